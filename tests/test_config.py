from __future__ import annotations

import json

import pytest

from order_placement.core.config import Settings
from order_placement.domain.orders.factory import build_order_processor, load_repair_table
from order_placement.domain.orders.models import InputOrder
from order_placement.domain.pricing import Price
from order_placement.parsing.repair import DEFAULT_MODEL_REPAIR_TABLE


def test_settings_defaults():
    settings = Settings()

    assert settings.service_name == "order-placement-system"
    assert settings.cors_allows_all
    assert settings.extra_film_types == []
    assert load_repair_table(settings) is DEFAULT_MODEL_REPAIR_TABLE


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("OPS_API_PORT", "9090")
    monkeypatch.setenv("OPS_EXTRA_FILM_TYPES", '["XP1"]')

    settings = Settings()

    assert settings.api_port == 9090
    assert settings.extra_film_types == ["XP1"]


def test_wildcard_cors_rejected_outside_dev():
    with pytest.raises(ValueError, match="OPS_CORS_ALLOWED_ORIGINS"):
        Settings(env="prod")

    settings = Settings(env="prod", cors_allowed_origins=["https://shop.example.com"])
    assert not settings.cors_allows_all


def test_processor_built_from_settings(tmp_path):
    table_path = tmp_path / "repair.json"
    table_path.write_text(
        json.dumps({"version": "ops-3", "models": {"XP1-MATTE": "GALAXYA55"}, "default_model": "PIXEL8"}),
        encoding="utf-8",
    )
    settings = Settings(repair_table_path=table_path, extra_film_types=["XP1"])

    processor = build_order_processor(settings)
    result = processor.process(
        [InputOrder(no=1, platform_product_id="XP1-MAT", quantity=1, unit_price=Price.of(9), total_price=Price.of(9))]
    )

    assert result[0].product_id == "XP1-MATTE-GALAXYA55"
    assert result[0].material_id == "XP1-MATTE"
