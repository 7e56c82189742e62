from __future__ import annotations

import logging

from order_placement.core.config import Settings
from order_placement.domain.catalog.decoder import ProductCodeDecoder
from order_placement.domain.orders.pipeline import StandardOrderLineParser
from order_placement.domain.orders.processor import OrderProcessor
from order_placement.parsing.repair import DEFAULT_MODEL_REPAIR_TABLE, ModelRepairTable
from order_placement.parsing.sku import SkuParser

logger = logging.getLogger(__name__)


def load_repair_table(settings: Settings) -> ModelRepairTable:
    if settings.repair_table_path is None:
        return DEFAULT_MODEL_REPAIR_TABLE
    table = ModelRepairTable.from_file(settings.repair_table_path)
    logger.info("loaded model repair table version=%s from %s", table.version, settings.repair_table_path)
    return table


def build_order_processor(settings: Settings) -> OrderProcessor:
    repair_table = load_repair_table(settings)
    parser = StandardOrderLineParser(
        sku_parser=SkuParser(repair_table=repair_table),
        decoder=ProductCodeDecoder(
            film_type_whitelist=settings.extra_film_types,
            texture_aliases=repair_table.texture_aliases,
        ),
    )
    return OrderProcessor(parser=parser)
