from __future__ import annotations

import logging
from enum import Enum
from typing import Mapping

from order_placement.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

CLEANER_SUFFIX = "-CLEANNER"

# Abbreviations seen in platform exports.
TEXTURE_ALIASES: dict[str, str] = {
    "CLR": "CLEAR",
    "MAT": "MATTE",
    "MATT": "MATTE",
    "PRIV": "PRIVACY",
    "PRV": "PRIVACY",
}


class Texture(str, Enum):
    CLEAR = "CLEAR"
    MATTE = "MATTE"
    PRIVACY = "PRIVACY"

    @property
    def priority(self) -> int:
        return _PRIORITY[self]

    @property
    def cleaner_product_id(self) -> str:
        return f"{self.value}{CLEANER_SUFFIX}"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def ordered(cls) -> list[Texture]:
        return sorted(cls, key=lambda texture: texture.priority)

    @classmethod
    def parse(cls, raw: str | None, aliases: Mapping[str, str] | None = None) -> Texture:
        text = normalize_texture_token(raw or "", aliases)
        try:
            return cls(text)
        except ValueError:
            logger.error("invalid texture: %r", raw)
            raise InvalidInputError(f"invalid texture: {raw!r}") from None

    @classmethod
    def is_valid(cls, raw: str | None) -> bool:
        return (raw or "").strip().upper() in cls._value2member_map_


_PRIORITY = {
    Texture.CLEAR: 1,
    Texture.MATTE: 2,
    Texture.PRIVACY: 3,
}


def normalize_texture_token(raw: str, aliases: Mapping[str, str] | None = None) -> str:
    text = raw.strip().upper()
    table = TEXTURE_ALIASES if aliases is None else aliases
    return table.get(text, text)


def texture_from_material_id(material_id: str) -> Texture:
    if not material_id:
        logger.error("material id cannot be empty")
        raise InvalidInputError("material id cannot be empty")
    parts = material_id.split("-")
    if len(parts) < 2:
        logger.error("invalid material id format: %s", material_id)
        raise InvalidInputError(f"invalid material id: {material_id!r}")
    return Texture.parse(parts[1])
