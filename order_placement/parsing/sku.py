from __future__ import annotations

import logging
import re

from order_placement.core.errors import InvalidInputError
from order_placement.domain.orders.models import ParsedSkuItem
from order_placement.parsing.repair import DEFAULT_MODEL_REPAIR_TABLE, ModelRepairTable

logger = logging.getLogger(__name__)

# Order matters: longer tokens first so "%20--%20x" is not eaten as "%20--".
JUNK_PREFIXES: tuple[str, ...] = (
    "%20--%20x",
    "%20--",
    "--%20x",
    "x2-3&",
    "%20x",
    "%20-",
    "--",
)
PRODUCT_START = "FG"
BUNDLE_SEPARATOR = "/"
MEMBER_ARTIFACT_PREFIX = "%20x"

_QUANTITY_SUFFIX = re.compile(r"\*(\d+)$")


class SkuParser:
    """Turns a raw platform product id into ``(clean id, quantity)`` bundle members.

    ``--FG0A-CLEAR-OPPOA3*2/FG0A-MATTE-OPPOA3`` with an order quantity of 1 yields
    ``FG0A-CLEAR-OPPOA3`` x2 and ``FG0A-MATTE-OPPOA3`` x1.
    """

    def __init__(
        self,
        repair_table: ModelRepairTable | None = None,
        log: logging.Logger | None = None,
    ):
        self.repair_table = repair_table or DEFAULT_MODEL_REPAIR_TABLE
        self.logger = log or logger

    def parse(self, raw_id: str, order_quantity: int = 1) -> list[ParsedSkuItem]:
        if not raw_id:
            self.logger.error("platform product id cannot be empty")
            raise InvalidInputError("platform product id cannot be empty")

        items: list[ParsedSkuItem] = []
        for member in self.split_bundle(self.clean_prefix(raw_id)):
            clean_id, quantity, has_quantity = self.extract_quantity(member)
            if not has_quantity:
                quantity = order_quantity
            items.append(ParsedSkuItem(clean_product_id=self.repair(clean_id), quantity=quantity))
        return items

    def clean_prefix(self, product_id: str) -> str:
        cleaned = product_id
        while True:
            stripped = self._strip_once(cleaned)
            if stripped == cleaned:
                return cleaned
            cleaned = stripped

    def _strip_once(self, value: str) -> str:
        for prefix in JUNK_PREFIXES:
            if value.startswith(prefix):
                return value[len(prefix):]
        if value.startswith("-") and not _is_product_start(value[1:]):
            return value[1:]
        return value

    def split_bundle(self, product_id: str) -> list[str]:
        members = []
        for part in product_id.split(BUNDLE_SEPARATOR):
            part = part.strip()
            if part.startswith(MEMBER_ARTIFACT_PREFIX):
                part = part[len(MEMBER_ARTIFACT_PREFIX):]
            if part:
                members.append(part)
        return members

    def extract_quantity(self, product_id: str) -> tuple[str, int, bool]:
        match = _QUANTITY_SUFFIX.search(product_id)
        if match is None:
            return product_id, 1, False
        try:
            quantity = int(match.group(1))
        except ValueError as exc:
            # int() refuses digit strings past sys.get_int_max_str_digits().
            self.logger.error("quantity suffix too long in %s...", product_id[:32])
            raise InvalidInputError("quantity suffix is out of range") from exc
        return product_id[: match.start()], quantity, True

    def repair(self, clean_id: str) -> str:
        parts = clean_id.split("-")
        if len(parts) != 2:
            return clean_id

        film_type_id = parts[0].strip().upper()
        texture = self.repair_table.normalize_texture(parts[1])
        model_id, known = self.repair_table.lookup_model(film_type_id, texture)
        repaired = f"{film_type_id}-{texture}-{model_id}"
        self.logger.warning(
            "repaired product id missing model: %s -> %s (table=%s, matched=%s)",
            clean_id,
            repaired,
            self.repair_table.version,
            known,
        )
        return repaired


def _is_product_start(value: str) -> bool:
    return len(value) >= 2 and value.startswith(PRODUCT_START)
