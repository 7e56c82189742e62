from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends

from order_placement.api.schemas import InputOrderPayload, success_envelope, to_entities
from order_placement.core.config import get_settings
from order_placement.core.errors import InvalidInputError
from order_placement.domain.orders.factory import build_order_processor
from order_placement.domain.orders.processor import OrderProcessor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["orders"])


@lru_cache(maxsize=1)
def get_order_processor() -> OrderProcessor:
    return build_order_processor(get_settings())


@router.post("/orders/process")
def process_orders(
    payload: list[InputOrderPayload],
    processor: OrderProcessor = Depends(get_order_processor),
):
    if not payload:
        logger.error("empty orders array")
        raise InvalidInputError("empty orders array")

    result = processor.process(to_entities(payload))
    return success_envelope(result)
