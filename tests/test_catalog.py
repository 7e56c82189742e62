from __future__ import annotations

import pytest

from order_placement.core.errors import InvalidInputError
from order_placement.domain.catalog import (
    Material,
    ProductCodeDecoder,
    Texture,
    texture_from_material_id,
    validate_film_type,
)


def test_texture_priority_order_and_cleaner_ids():
    assert Texture.ordered() == [Texture.CLEAR, Texture.MATTE, Texture.PRIVACY]
    assert [t.priority for t in Texture.ordered()] == [1, 2, 3]
    assert Texture.CLEAR.cleaner_product_id == "CLEAR-CLEANNER"
    assert Texture.PRIVACY.cleaner_product_id == "PRIVACY-CLEANNER"
    assert Texture.MATTE.display_name == "Matte"


def test_texture_parse_normalizes_case_and_aliases():
    assert Texture.parse(" matte ") is Texture.MATTE
    assert Texture.parse("MAT") is Texture.MATTE
    assert Texture.parse("priv") is Texture.PRIVACY
    assert Texture.is_valid("clear")
    assert not Texture.is_valid("GLOSSY")

    with pytest.raises(InvalidInputError):
        Texture.parse("GLOSSY")
    with pytest.raises(InvalidInputError):
        Texture.parse("")


def test_texture_from_material_id():
    assert texture_from_material_id("FG0A-PRIVACY") is Texture.PRIVACY
    for bad in ["", "FG0A", "FG0A-GLOSSY"]:
        with pytest.raises(InvalidInputError):
            texture_from_material_id(bad)


def test_material_from_string_is_canonical():
    material = Material.from_string("fg0a-clear")

    assert material.film_type_id == "FG0A"
    assert material.texture is Texture.CLEAR
    assert str(material) == "FG0A-CLEAR"
    assert material.display_name == "FG0A Clear"
    assert material.cleaner_product_id == "CLEAR-CLEANNER"
    assert material.has_texture(Texture.CLEAR)
    assert material == Material("FG0A", Texture.CLEAR)


def test_material_rejects_missing_parts():
    with pytest.raises(InvalidInputError):
        Material("", Texture.CLEAR)
    with pytest.raises(InvalidInputError):
        Material("FG0A", "CLEAR-ISH")
    with pytest.raises(InvalidInputError):
        Material.from_string("FG0A")


def test_validate_film_type():
    assert validate_film_type("FG0A") == "FG0A"
    assert validate_film_type("XP1", whitelist=frozenset({"XP1"})) == "XP1"
    for bad in ["", "AB0A", "FG"]:
        with pytest.raises(InvalidInputError):
            validate_film_type(bad)


def test_decoder_splits_material_and_model():
    decoded = ProductCodeDecoder().decode("FG0A-CLEAR-IPHONE16PROMAX")

    assert decoded.material_id == "FG0A-CLEAR"
    assert decoded.model_id == "IPHONE16PROMAX"
    assert decoded.texture is Texture.CLEAR


def test_decoder_keeps_dashes_in_model_id():
    decoded = ProductCodeDecoder().decode("FG0A-CLEAR-OPPOA3-B-SPECIAL-EDITION")

    assert decoded.material_id == "FG0A-CLEAR"
    assert decoded.model_id == "OPPOA3-B-SPECIAL-EDITION"


def test_decoder_normalizes_texture_abbreviation():
    assert ProductCodeDecoder().decode("FG05-mat-OPPOA3").material_id == "FG05-MATTE"


@pytest.mark.parametrize(
    "clean_id",
    [
        "",
        "FG0A-CLEAR",
        "AB0A-CLEAR-OPPOA3",
        "FG-CLEAR-OPPOA3",
        "-FG0A-CLEAR-OPPOA3",
        "FG0A-GLOSSY-OPPOA3",
        "FG0A-CLEAR-",
        "FG0A-CLEAR--",
    ],
)
def test_decoder_rejects_malformed_codes(clean_id):
    with pytest.raises(InvalidInputError):
        ProductCodeDecoder().decode(clean_id)


def test_decoder_accepts_whitelisted_film_types():
    decoder = ProductCodeDecoder(film_type_whitelist=["xp1"])

    assert decoder.decode("XP1-PRIVACY-GALAXYS24").material_id == "XP1-PRIVACY"
    with pytest.raises(InvalidInputError):
        ProductCodeDecoder().decode("XP1-PRIVACY-GALAXYS24")
