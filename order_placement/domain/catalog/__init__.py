from order_placement.domain.catalog.decoder import DecodedProductCode, ProductCodeDecoder
from order_placement.domain.catalog.material import Material, validate_film_type
from order_placement.domain.catalog.texture import Texture, texture_from_material_id

__all__ = [
    "DecodedProductCode",
    "Material",
    "ProductCodeDecoder",
    "Texture",
    "texture_from_material_id",
    "validate_film_type",
]
