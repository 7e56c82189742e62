from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from order_placement.core.errors import InvalidInputError
from order_placement.domain.pricing.price import Price

logger = logging.getLogger(__name__)

ALLOCATION_TOLERANCE = 0.01


@dataclass(frozen=True)
class PriceAllocation:
    unit_price: Price
    total_price: Price


class PriceAllocator:
    """Splits one aggregate line price across the members of a bundle.

    A single unit price (``total / sum(quantities)``) is shared by every member,
    and each member's total is that unit price times its own quantity. Totals are
    not nudged to match the input exactly; they agree within float rounding.
    """

    def __init__(self, log: logging.Logger | None = None):
        self.logger = log or logger

    def allocate(self, total_price: Price | None, quantities: Sequence[int]) -> list[PriceAllocation]:
        if not isinstance(total_price, Price):
            self.logger.error("total price is required for allocation")
            raise InvalidInputError("total price is required")

        total_units = sum(quantities)
        if total_units <= 0:
            self.logger.error("cannot allocate price over %s units", total_units)
            raise InvalidInputError("total quantity must be positive")

        unit_price = self.unit_price(total_price, total_units)
        return [
            PriceAllocation(unit_price=unit_price, total_price=self.item_total(unit_price, quantity))
            for quantity in quantities
        ]

    def unit_price(self, total_price: Price, quantity: int) -> Price:
        return total_price.divide_by_int(quantity)

    def item_total(self, unit_price: Price, quantity: int) -> Price:
        return unit_price.multiply_by_int(quantity)

    @staticmethod
    def sum_prices(*prices: Price) -> Price:
        total = Price.zero()
        for price in prices:
            total = total.add(price)
        return total
