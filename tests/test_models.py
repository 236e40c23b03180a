"""Tests for garment and profile models."""

from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color import InvalidColorError, RGBColor
from models.garment import Garment, from_raw_metadata, update_garment
from models.outfit import Outfit
from models.profile import CustomerProfile, default_profile, profile_from_dict, reset_profile
from models.taxonomy import (
    BodyType,
    GarmentType,
    InvalidEnumError,
    Season,
    StyleVibe,
    guess_type_from_filename,
)


def test_garment_derives_color_name_and_normalises_fields() -> None:
    garment = Garment(
        id="g1",
        name="Blue shirt",
        type="top",
        color="#2980B9",
        tags=[" work ", "cotton", "work", ""],
        seasons=["spring", "summer", "spring"],
    )
    assert garment.type is GarmentType.TOP
    assert garment.color == RGBColor(0x29, 0x80, 0xB9)
    assert garment.color_name == "blue"
    assert garment.tags == ["work", "cotton"]
    assert garment.seasons == [Season.SPRING, Season.SUMMER]


def test_garment_keeps_user_supplied_color_name() -> None:
    garment = Garment(id="g1", name="Shirt", type="top", color="#2980B9", color_name="cobalt")
    assert garment.color_name == "cobalt"


def test_garment_rejects_unknown_type_and_bad_color() -> None:
    with pytest.raises(InvalidEnumError):
        Garment(id="g1", name="Cap", type="hat", color="#000000")
    with pytest.raises(InvalidColorError):
        Garment(id="g1", name="Shirt", type="top", color=(0, 0, 300))
    with pytest.raises(ValueError):
        Garment(id=" ", name="Shirt", type="top", color="#000000")


def test_update_garment_recomputes_color_name_on_color_change() -> None:
    original = Garment(id="g1", name="Tee", type="top", color="#000000")
    recolored = update_garment(original, color="#FFFFFF")
    assert recolored.color_name == "white"
    assert original.color_name == "black"

    renamed = update_garment(original, color="#FFFFFF", color_name="snow")
    assert renamed.color_name == "snow"

    retyped = update_garment(original, type="outerwear", name="Layer")
    assert retyped.type is GarmentType.OUTERWEAR
    assert retyped.color_name == "black"


def test_update_garment_refuses_id_change() -> None:
    garment = Garment(id="g1", name="Tee", type="top", color="#000000")
    with pytest.raises(ValueError):
        update_garment(garment, id="g2")


def test_from_raw_metadata_guesses_type_and_name_from_filename() -> None:
    garment = from_raw_metadata({"filename": "summer-dress.jpg", "color": [192, 57, 43], "tags": "party, red"})
    assert garment.type is GarmentType.DRESS
    assert garment.name == "summer-dress"
    assert garment.tags == ["party", "red"]
    assert garment.color_name == "red"
    assert garment.id


def test_from_raw_metadata_requires_color() -> None:
    with pytest.raises(ValueError):
        from_raw_metadata({"id": "x", "type": "top"})


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("evening_gown.png", GarmentType.DRESS),
        ("Denim Jacket.jpg", GarmentType.OUTERWEAR),
        ("black-jeans.jpg", GarmentType.BOTTOM),
        ("running_sneakers.webp", GarmentType.SHOES),
        ("wool_scarf.jpg", GarmentType.ACCESSORY),
        ("IMG_0042.jpg", GarmentType.TOP),
        ("shirt-dress.jpg", GarmentType.DRESS),
    ],
)
def test_guess_type_from_filename(filename: str, expected: GarmentType) -> None:
    assert guess_type_from_filename(filename) is expected


def test_profile_parses_enums_and_cleans_color_lists() -> None:
    profile = CustomerProfile(
        body_type="invertedTriangle",
        skin_undertone="",
        preferred_styles=["edgy", "boho"],
        favorite_colors=[" blue ", "", "blue", "teal"],
        disliked_colors="brown, rust",
    )
    assert profile.body_type is BodyType.INVERTED_TRIANGLE
    assert profile.skin_undertone is None
    assert profile.preferred_styles == [StyleVibe.EDGY, StyleVibe.BOHO]
    assert profile.favorite_colors == ["blue", "teal"]
    assert profile.disliked_colors == ["brown", "rust"]


@pytest.mark.parametrize("field, value", [("body_type", "pear"), ("skin_undertone", "olive"), ("preferred_styles", ["grunge"])])
def test_profile_rejects_unknown_enum_values(field: str, value) -> None:
    with pytest.raises(InvalidEnumError):
        CustomerProfile(**{field: value})


@pytest.mark.parametrize("scale", [0, 6, 2.5])
def test_profile_rejects_out_of_range_formality(scale) -> None:
    with pytest.raises(ValueError):
        CustomerProfile(formality_scale=scale)


def test_default_and_reset_profiles() -> None:
    assert default_profile().preferred_styles == [StyleVibe.CLASSIC, StyleVibe.MINIMALIST]
    assert default_profile().formality_scale == 3
    assert reset_profile().preferred_styles == [StyleVibe.CLASSIC]
    assert reset_profile().body_type is None


def test_profile_from_dict_ignores_unknown_and_null_keys() -> None:
    profile = profile_from_dict({"body_type": "oval", "skin_undertone": None, "theme": "dark"})
    assert profile.body_type is BodyType.OVAL
    assert profile.skin_undertone is None


def test_outfit_key_is_order_independent() -> None:
    top = Garment(id="b", name="Top", type="top", color="#000000")
    bottom = Garment(id="a", name="Bottom", type="bottom", color="#FFFFFF")
    first = Outfit(items=(top, bottom), rationale=())
    second = Outfit(items=(bottom, top), rationale=())
    assert first.key == second.key == "a-b"
    assert first.item_ids == ("b", "a")
