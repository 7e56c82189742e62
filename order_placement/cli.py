from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from order_placement.api.schemas import InputOrderPayload, error_envelope, success_envelope, to_entities
from order_placement.core.config import get_settings
from order_placement.core.errors import InvalidInputError
from order_placement.core.logging import configure_logging
from order_placement.domain.orders.factory import build_order_processor, load_repair_table
from order_placement.parsing.sku import SkuParser

_PAYLOAD_ADAPTER = TypeAdapter(list[InputOrderPayload])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Order placement cleaner CLI")
    top = parser.add_subparsers(dest="command", required=True)

    process = top.add_parser("process", help="Clean a JSON array of platform order lines")
    process.add_argument("source", help="Path to a JSON file, or - for stdin")

    parse_sku = top.add_parser("parse-sku", help="Show how a raw platform product id is split")
    parse_sku.add_argument("raw_id")
    parse_sku.add_argument("--qty", type=int, default=1, help="Order line quantity (default: 1)")

    serve = top.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _process(args: argparse.Namespace) -> int:
    processor = build_order_processor(get_settings())
    try:
        payload = _PAYLOAD_ADAPTER.validate_json(_read_source(args.source))
        if not payload:
            raise InvalidInputError("empty orders array")
        result = processor.process(to_entities(payload))
    except ValidationError as exc:
        print(json.dumps(error_envelope(InvalidInputError.default_message, f"{exc.error_count()} validation error(s)")), file=sys.stderr)
        return 1
    except InvalidInputError as exc:
        print(json.dumps(error_envelope(InvalidInputError.default_message, exc.reason)), file=sys.stderr)
        return 1

    print(json.dumps(success_envelope(result), ensure_ascii=False, indent=2))
    return 0


def _parse_sku(args: argparse.Namespace) -> int:
    parser = SkuParser(repair_table=load_repair_table(get_settings()))
    try:
        items = parser.parse(args.raw_id, args.qty)
    except InvalidInputError as exc:
        print(json.dumps(error_envelope(InvalidInputError.default_message, exc.reason)), file=sys.stderr)
        return 1

    print(
        json.dumps(
            {
                "raw_id": args.raw_id,
                "cleaned": parser.clean_prefix(args.raw_id),
                "items": [{"clean_product_id": item.clean_product_id, "quantity": item.quantity} for item in items],
            },
            indent=2,
        )
    )
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "order_placement.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    handlers = {"process": _process, "parse-sku": _parse_sku, "serve": _serve}

    if args.command in handlers:
        try:
            configure_logging(get_settings().log_level)
            return handlers[args.command](args)
        except ValueError as exc:
            # Settings and repair table problems; bad order input is reported by the handlers.
            print(json.dumps({"error": "configuration error", "message": str(exc)}), file=sys.stderr)
            return 2

    parser.error("unsupported command")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
