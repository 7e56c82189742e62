from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from order_placement.core.errors import InvalidInputError
from order_placement.domain.catalog.texture import Texture
from order_placement.domain.orders.models import WIPING_CLOTH_PRODUCT_ID, CleanedOrder, Product
from order_placement.domain.pricing.price import Price

logger = logging.getLogger(__name__)


@dataclass
class ComplementaryAccumulator:
    wiping_cloth_quantity: int = 0
    cleaner_quantity_by_texture: dict[Texture, int] = field(
        default_factory=lambda: {texture: 0 for texture in Texture.ordered()}
    )


class ComplementaryAggregator:
    """Accumulates wiping-cloth and cleaner demand for one batch.

    Every sold unit needs one wiping cloth and one cleaner matching its texture.
    Rendered lines come out as wiping cloth first, then cleaners in texture
    priority order (CLEAR, MATTE, PRIVACY), regardless of scan order.
    """

    def __init__(self, log: logging.Logger | None = None):
        self.accumulator = ComplementaryAccumulator()
        self.logger = log or logger

    @property
    def wiping_cloth_quantity(self) -> int:
        return self.accumulator.wiping_cloth_quantity

    def cleaner_quantity(self, texture: Texture) -> int:
        return self.accumulator.cleaner_quantity_by_texture[texture]

    def add_product(self, product: Product | None) -> None:
        if product is None:
            self.logger.error("product cannot be empty")
            raise InvalidInputError("product is required")
        try:
            texture = product.texture
        except InvalidInputError:
            self.logger.error("product %s does not have a valid texture", product.product_id)
            raise

        self.accumulator.wiping_cloth_quantity += product.quantity
        self.accumulator.cleaner_quantity_by_texture[texture] += product.quantity

    def add_products(self, products: Iterable[Product]) -> None:
        for product in products:
            self.add_product(product)

    def render(self, starting_order_no: int) -> list[CleanedOrder]:
        lines: list[tuple[str, int]] = []
        if self.accumulator.wiping_cloth_quantity > 0:
            lines.append((WIPING_CLOTH_PRODUCT_ID, self.accumulator.wiping_cloth_quantity))
        for texture in Texture.ordered():
            quantity = self.accumulator.cleaner_quantity_by_texture[texture]
            if quantity > 0:
                lines.append((texture.cleaner_product_id, quantity))

        return [
            CleanedOrder(
                no=starting_order_no + offset,
                product_id=product_id,
                quantity=quantity,
                unit_price=Price.zero(),
                total_price=Price.zero(),
            )
            for offset, (product_id, quantity) in enumerate(lines)
        ]

    def total_value(
        self,
        wiping_cloth_price: Price | None = None,
        cleaner_prices: Mapping[Texture, Price] | None = None,
    ) -> Price:
        total = Price.zero()
        if wiping_cloth_price is not None:
            total = total.add(wiping_cloth_price.multiply_by_int(self.accumulator.wiping_cloth_quantity))
        for texture, price in (cleaner_prices or {}).items():
            quantity = self.accumulator.cleaner_quantity_by_texture.get(texture, 0)
            if price is not None and quantity > 0:
                total = total.add(price.multiply_by_int(quantity))
        return total


def calculate_complementary_orders(
    products: Iterable[Product],
    starting_order_no: int,
    log: logging.Logger | None = None,
) -> list[CleanedOrder]:
    aggregator = ComplementaryAggregator(log=log)
    aggregator.add_products(products)
    return aggregator.render(starting_order_no)
