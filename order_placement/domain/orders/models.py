from __future__ import annotations

import logging
from dataclasses import dataclass

from order_placement.core.errors import InvalidInputError
from order_placement.domain.catalog.texture import Texture, texture_from_material_id
from order_placement.domain.pricing.price import Price

logger = logging.getLogger(__name__)

WIPING_CLOTH_PRODUCT_ID = "WIPING-CLOTH"


def _require_price(value: object, label: str) -> None:
    if not isinstance(value, Price):
        logger.error("%s is required", label)
        raise InvalidInputError(f"{label} is required")


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class InputOrder:
    no: int
    platform_product_id: str
    quantity: int
    unit_price: Price
    total_price: Price

    def validate(self) -> None:
        if not _is_count(self.no):
            logger.error("order number must be positive: %r", self.no)
            raise InvalidInputError("order number must be positive")
        if not self.platform_product_id:
            logger.error("platform product id cannot be empty (order no=%s)", self.no)
            raise InvalidInputError("platform product id cannot be empty")
        if not _is_count(self.quantity):
            logger.error("quantity must be positive (order no=%s): %r", self.no, self.quantity)
            raise InvalidInputError("quantity must be positive")
        _require_price(self.unit_price, "unit price")
        _require_price(self.total_price, "total price")


@dataclass(frozen=True)
class ParsedSkuItem:
    clean_product_id: str
    quantity: int


@dataclass(frozen=True)
class Product:
    product_id: str
    material_id: str
    model_id: str
    quantity: int
    unit_price: Price
    total_price: Price

    @property
    def texture(self) -> Texture:
        return texture_from_material_id(self.material_id)

    def validate(self) -> None:
        if not self.product_id:
            logger.error("product id cannot be empty")
            raise InvalidInputError("product id cannot be empty")
        if not self.material_id or not self.model_id:
            logger.error("product %s is missing material or model id", self.product_id)
            raise InvalidInputError("material id and model id are required")
        if self.quantity <= 0:
            logger.error("product %s quantity must be positive: %s", self.product_id, self.quantity)
            raise InvalidInputError("quantity must be positive")
        _require_price(self.unit_price, "unit price")
        _require_price(self.total_price, "total price")

    def to_cleaned_order(self, order_no: int) -> CleanedOrder:
        return CleanedOrder(
            no=order_no,
            product_id=self.product_id,
            material_id=self.material_id,
            model_id=self.model_id,
            quantity=self.quantity,
            unit_price=self.unit_price,
            total_price=self.total_price,
        )


@dataclass(frozen=True)
class CleanedOrder:
    no: int
    product_id: str
    quantity: int
    unit_price: Price
    total_price: Price
    material_id: str = ""
    model_id: str = ""

    @property
    def is_main_product(self) -> bool:
        return bool(self.material_id) and bool(self.model_id)

    @property
    def is_complementary(self) -> bool:
        return not self.is_main_product

    def validate(self) -> None:
        if self.no <= 0:
            logger.error("order number must be positive: %r", self.no)
            raise InvalidInputError("order number must be positive")
        if not self.product_id:
            logger.error("product id cannot be empty (order no=%s)", self.no)
            raise InvalidInputError("product id cannot be empty")
        if self.quantity <= 0:
            logger.error("quantity must be positive (order no=%s): %r", self.no, self.quantity)
            raise InvalidInputError("quantity must be positive")
        _require_price(self.unit_price, "unit price")
        _require_price(self.total_price, "total price")
