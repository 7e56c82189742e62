from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from order_placement.domain.catalog.texture import TEXTURE_ALIASES, normalize_texture_token


class ModelRepairTable(BaseModel):
    """Guess table for ids that lost their model segment (``FG0A-MAT`` style).

    Keys of ``models`` are ``<filmType>-<texture>`` after alias normalization.
    Anything not listed falls back to ``default_model``.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    texture_aliases: dict[str, str] = Field(default_factory=lambda: dict(TEXTURE_ALIASES))
    models: dict[str, str] = Field(default_factory=dict)
    default_model: str = Field(min_length=1)

    @field_validator("texture_aliases", "models")
    @classmethod
    def _upper_keys(cls, value: dict[str, str]) -> dict[str, str]:
        return {key.strip().upper(): item.strip().upper() for key, item in value.items()}

    @field_validator("default_model")
    @classmethod
    def _upper_default(cls, value: str) -> str:
        return value.strip().upper()

    def normalize_texture(self, raw: str) -> str:
        return normalize_texture_token(raw, self.texture_aliases)

    def lookup_model(self, film_type_id: str, texture: str) -> tuple[str, bool]:
        key = f"{film_type_id.strip().upper()}-{texture}"
        if key in self.models:
            return self.models[key], True
        return self.default_model, False

    @classmethod
    def from_file(cls, path: Path) -> ModelRepairTable:
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise ValueError(f"cannot load model repair table from {path}: {exc}") from exc
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise ValueError(
                f"invalid model repair table in {path}: {exc.error_count()} validation error(s)"
            ) from exc


DEFAULT_MODEL_REPAIR_TABLE = ModelRepairTable(
    version="2024-01",
    models={
        "FG0A-CLEAR": "OPPOA3",
        "FG0A-MATTE": "OPPOA3",
        "FG0A-PRIVACY": "OPPOA3",
        "FG05-MATTE": "OPPOA3",
    },
    default_model="IPHONE16PROMAX",
)
