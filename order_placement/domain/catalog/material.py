from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from order_placement.core.errors import InvalidInputError
from order_placement.domain.catalog.texture import Texture

logger = logging.getLogger(__name__)

FILM_TYPE_PREFIX = "FG"
MIN_FILM_TYPE_LENGTH = 3


@dataclass(frozen=True)
class Material:
    film_type_id: str
    texture: Texture

    def __post_init__(self) -> None:
        film_type_id = (self.film_type_id or "").strip().upper()
        if not film_type_id:
            logger.error("film type id cannot be empty")
            raise InvalidInputError("film type id cannot be empty")
        if not isinstance(self.texture, Texture):
            logger.error("invalid texture: %r", self.texture)
            raise InvalidInputError(f"invalid texture: {self.texture!r}")
        object.__setattr__(self, "film_type_id", film_type_id)

    @classmethod
    def from_string(cls, material_id: str, aliases: Mapping[str, str] | None = None) -> Material:
        if not material_id:
            logger.error("material id cannot be empty")
            raise InvalidInputError("material id cannot be empty")
        parts = material_id.split("-")
        if len(parts) < 2:
            logger.error("invalid material id format: %s", material_id)
            raise InvalidInputError(f"invalid material id: {material_id!r}")
        return cls(film_type_id=parts[0], texture=Texture.parse(parts[1], aliases))

    @property
    def material_id(self) -> str:
        return f"{self.film_type_id}-{self.texture.value}"

    @property
    def cleaner_product_id(self) -> str:
        return self.texture.cleaner_product_id

    @property
    def display_name(self) -> str:
        return f"{self.film_type_id} {self.texture.display_name}"

    def has_texture(self, texture: Texture) -> bool:
        return self.texture is texture

    def __str__(self) -> str:
        return self.material_id


def validate_film_type(film_type_id: str, whitelist: frozenset[str] = frozenset()) -> str:
    if not film_type_id:
        logger.error("film type id cannot be empty")
        raise InvalidInputError("film type id cannot be empty")
    if film_type_id in whitelist:
        return film_type_id
    if not film_type_id.startswith(FILM_TYPE_PREFIX):
        logger.error("film type id must start with %r: %s", FILM_TYPE_PREFIX, film_type_id)
        raise InvalidInputError(f"film type id must start with {FILM_TYPE_PREFIX!r}")
    if len(film_type_id) < MIN_FILM_TYPE_LENGTH:
        logger.error("film type id too short: %s", film_type_id)
        raise InvalidInputError("film type id too short")
    return film_type_id
