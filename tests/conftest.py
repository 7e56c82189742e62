from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from order_placement.domain.orders.models import InputOrder
from order_placement.domain.orders.processor import OrderProcessor
from order_placement.domain.pricing.price import Price
from order_placement.parsing.sku import SkuParser


@pytest.fixture()
def client():
    from order_placement.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def sku_parser() -> SkuParser:
    return SkuParser()


@pytest.fixture()
def processor() -> OrderProcessor:
    return OrderProcessor()


@pytest.fixture()
def make_order():
    def _make(
        platform_product_id: str,
        qty: int = 1,
        total_price: float = 100.0,
        unit_price: float | None = None,
        no: int = 1,
    ) -> InputOrder:
        return InputOrder(
            no=no,
            platform_product_id=platform_product_id,
            quantity=qty,
            unit_price=Price.of(total_price / qty if unit_price is None else unit_price),
            total_price=Price.of(total_price),
        )

    return _make
