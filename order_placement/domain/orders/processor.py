from __future__ import annotations

import logging
from typing import Callable, Sequence

from order_placement.core.errors import InvalidInputError
from order_placement.domain.orders.complementary import ComplementaryAggregator
from order_placement.domain.orders.models import CleanedOrder, InputOrder, Product
from order_placement.domain.orders.pipeline import OrderLineParser, StandardOrderLineParser

logger = logging.getLogger(__name__)


class OrderProcessor:
    """Expands raw order lines into numbered product lines plus complementary items.

    A batch either succeeds as a whole or raises ``InvalidInputError`` for the
    first offending line; nothing partial is ever returned.
    """

    def __init__(
        self,
        parser: OrderLineParser | None = None,
        aggregator_factory: Callable[[], ComplementaryAggregator] | None = None,
        log: logging.Logger | None = None,
    ):
        self.logger = log or logger
        self.parser = parser or StandardOrderLineParser(log=self.logger)
        self.aggregator_factory = aggregator_factory or (lambda: ComplementaryAggregator(log=self.logger))

    def process(self, orders: Sequence[InputOrder | None]) -> list[CleanedOrder]:
        if not orders:
            return []

        self._validate_input(orders)

        cleaned: list[CleanedOrder] = []
        main_products: list[Product] = []
        next_no = 1
        for order in orders:
            for product in self._expand(order):
                main_products.append(product)
                cleaned.append(product.to_cleaned_order(next_no))
                next_no += 1

        aggregator = self.aggregator_factory()
        try:
            aggregator.add_products(main_products)
        except InvalidInputError:
            self.logger.error("failed to calculate complementary items")
            raise
        complementary = aggregator.render(next_no)
        cleaned.extend(complementary)

        self._validate_output(cleaned)
        self.logger.info(
            "processed order batch: input_lines=%s main_lines=%s complementary_lines=%s",
            len(orders),
            len(main_products),
            len(complementary),
        )
        return cleaned

    def _expand(self, order: InputOrder) -> list[Product]:
        try:
            items = self.parser.parse(order.platform_product_id, order.quantity)
            allocations = self.parser.allocate(order.total_price, [item.quantity for item in items])
        except InvalidInputError:
            self.logger.error("failed to parse order no=%s product_id=%s", order.no, order.platform_product_id)
            raise

        products = []
        for item, allocation in zip(items, allocations):
            try:
                decoded = self.parser.decode(item.clean_product_id)
                product = Product(
                    product_id=item.clean_product_id,
                    material_id=decoded.material_id,
                    model_id=decoded.model_id,
                    quantity=item.quantity,
                    unit_price=allocation.unit_price,
                    total_price=allocation.total_price,
                )
                product.validate()
            except InvalidInputError:
                self.logger.error("invalid product in order no=%s: %s", order.no, item.clean_product_id)
                raise
            products.append(product)
        return products

    def _validate_input(self, orders: Sequence[InputOrder | None]) -> None:
        for index, order in enumerate(orders):
            if order is None:
                self.logger.error("input order at index %s is empty", index)
                raise InvalidInputError(f"input order at index {index} is missing")
            order.validate()

    def _validate_output(self, cleaned: Sequence[CleanedOrder]) -> None:
        for order in cleaned:
            try:
                order.validate()
            except InvalidInputError:
                self.logger.error("cleaned order no=%s is invalid", order.no)
                raise
