from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from order_placement.domain.orders.models import CleanedOrder, InputOrder
from order_placement.domain.pricing.price import Price


class InputOrderPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    no: int = Field(ge=1)
    platform_product_id: str = Field(alias="platformProductId", min_length=1)
    qty: int = Field(ge=1)
    unit_price: float = Field(alias="unitPrice", ge=0, allow_inf_nan=False)
    total_price: float = Field(alias="totalPrice", ge=0, allow_inf_nan=False)

    def to_entity(self) -> InputOrder:
        return InputOrder(
            no=self.no,
            platform_product_id=self.platform_product_id,
            quantity=self.qty,
            unit_price=Price.of(self.unit_price),
            total_price=Price.of(self.total_price),
        )


def to_entities(payloads: list[InputOrderPayload]) -> list[InputOrder]:
    return [payload.to_entity() for payload in payloads]


def _price_out(price: Price) -> float:
    return float(price.round(2))


def cleaned_order_out(order: CleanedOrder) -> dict:
    item: dict = {"no": order.no, "productId": order.product_id}
    if order.material_id:
        item["materialId"] = order.material_id
    if order.model_id:
        item["modelId"] = order.model_id
    item["qty"] = order.quantity
    item["unitPrice"] = _price_out(order.unit_price)
    item["totalPrice"] = _price_out(order.total_price)
    return item


def success_envelope(orders: list[CleanedOrder]) -> dict:
    return {"status": "success", "data": [cleaned_order_out(order) for order in orders]}


def error_envelope(reason: str, detail=None) -> dict:
    body: dict = {"error": reason}
    if detail is not None:
        body["detail"] = detail
    return body
