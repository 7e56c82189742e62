from __future__ import annotations

import logging
from typing import Protocol, Sequence

from order_placement.domain.catalog.decoder import DecodedProductCode, ProductCodeDecoder
from order_placement.domain.orders.models import ParsedSkuItem
from order_placement.domain.pricing.allocator import PriceAllocation, PriceAllocator
from order_placement.domain.pricing.price import Price
from order_placement.parsing.sku import SkuParser


class OrderLineParser(Protocol):
    def parse(self, raw_id: str, order_quantity: int) -> list[ParsedSkuItem]:
        ...

    def decode(self, clean_id: str) -> DecodedProductCode:
        ...

    def allocate(self, total_price: Price, quantities: Sequence[int]) -> list[PriceAllocation]:
        ...


class StandardOrderLineParser:
    def __init__(
        self,
        sku_parser: SkuParser | None = None,
        decoder: ProductCodeDecoder | None = None,
        allocator: PriceAllocator | None = None,
        log: logging.Logger | None = None,
    ):
        self.sku_parser = sku_parser or SkuParser(log=log)
        self.decoder = decoder or ProductCodeDecoder(log=log)
        self.allocator = allocator or PriceAllocator(log=log)

    def parse(self, raw_id: str, order_quantity: int) -> list[ParsedSkuItem]:
        return self.sku_parser.parse(raw_id, order_quantity)

    def decode(self, clean_id: str) -> DecodedProductCode:
        return self.decoder.decode(clean_id)

    def allocate(self, total_price: Price, quantities: Sequence[int]) -> list[PriceAllocation]:
        return self.allocator.allocate(total_price, quantities)
