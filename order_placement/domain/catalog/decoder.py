from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from order_placement.core.errors import InvalidInputError
from order_placement.domain.catalog.material import Material, validate_film_type
from order_placement.domain.catalog.texture import TEXTURE_ALIASES, Texture

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedProductCode:
    material: Material
    model_id: str

    @property
    def material_id(self) -> str:
        return self.material.material_id

    @property
    def texture(self) -> Texture:
        return self.material.texture


class ProductCodeDecoder:
    """Splits a clean SKU ``<filmType>-<texture>-<model...>`` into material and model ids.

    The model id keeps any further dashes, e.g. ``FG0A-CLEAR-OPPOA3-B-SPECIAL-EDITION``
    decodes to model ``OPPOA3-B-SPECIAL-EDITION``.
    """

    def __init__(
        self,
        film_type_whitelist: Iterable[str] = (),
        texture_aliases: Mapping[str, str] | None = None,
        log: logging.Logger | None = None,
    ):
        self.film_type_whitelist = frozenset(item.strip().upper() for item in film_type_whitelist if item.strip())
        self.texture_aliases = dict(TEXTURE_ALIASES if texture_aliases is None else texture_aliases)
        self.logger = log or logger

    def decode(self, clean_id: str) -> DecodedProductCode:
        if not clean_id:
            self.logger.error("product id cannot be empty")
            raise InvalidInputError("product id cannot be empty")

        parts = clean_id.split("-")
        if len(parts) < 3:
            self.logger.error("invalid product code format: %s", clean_id)
            raise InvalidInputError(f"invalid product code: {clean_id!r}")

        film_type_id = validate_film_type(parts[0].strip().upper(), self.film_type_whitelist)
        texture = Texture.parse(parts[1], self.texture_aliases)

        model_id = "-".join(parts[2:]).strip()
        if not model_id.replace("-", ""):
            self.logger.error("model id cannot be empty: %s", clean_id)
            raise InvalidInputError(f"model id missing in {clean_id!r}")

        return DecodedProductCode(material=Material(film_type_id, texture), model_id=model_id)

    def validate(self, clean_id: str) -> None:
        self.decode(clean_id)
