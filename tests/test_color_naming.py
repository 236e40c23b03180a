"""Tests for color values and nearest-name lookup."""

from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color import InvalidColorError, RGBColor, color_distance, to_color
from models.color_palette import NAMED_COLOR_PALETTE, NamedColor, name_of, palette_names


def test_hex_parsing_accepts_long_short_and_bare_forms() -> None:
    assert RGBColor.from_hex("#C0392B") == RGBColor(192, 57, 43)
    assert RGBColor.from_hex("c0392b") == RGBColor(192, 57, 43)
    assert RGBColor.from_hex("#abc") == RGBColor(0xAA, 0xBB, 0xCC)
    assert RGBColor(192, 57, 43).hex == "#c0392b"


@pytest.mark.parametrize("raw", ["#12", "#GGGGGG", "", "#1234567"])
def test_hex_parsing_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(InvalidColorError):
        RGBColor.from_hex(raw)


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
def test_out_of_range_channels_are_rejected(channels) -> None:
    with pytest.raises(InvalidColorError):
        RGBColor(*channels)


def test_to_color_coerces_sequences_and_rejects_wrong_arity() -> None:
    assert to_color([10, 20, 30]) == RGBColor(10, 20, 30)
    assert to_color("#0a141e") == RGBColor(10, 20, 30)
    with pytest.raises(InvalidColorError):
        to_color([1, 2])


def test_color_distance_is_euclidean() -> None:
    black = RGBColor(0, 0, 0)
    white = RGBColor(255, 255, 255)
    assert color_distance(black, white) == pytest.approx(441.67, abs=0.01)
    assert color_distance(RGBColor(3, 4, 0), black) == pytest.approx(5.0)


def test_two_entry_palette_names_near_black() -> None:
    palette = [
        NamedColor(RGBColor.from_hex("#000000"), "black"),
        NamedColor(RGBColor.from_hex("#FFFFFF"), "white"),
    ]
    assert name_of("#111111", palette) == "black"
    assert name_of("#eeeeee", palette) == "white"


def test_ties_go_to_the_first_palette_entry() -> None:
    # #111111 is equidistant from black and charcoal.
    assert name_of("#111111") == "black"


def test_exact_palette_colors_name_themselves() -> None:
    for entry in NAMED_COLOR_PALETTE:
        assert name_of(entry.color) == entry.name


@pytest.mark.parametrize("channels", [(0, 0, 0), (255, 255, 255), (12, 200, 99), (255, 0, 128)])
def test_name_of_always_returns_a_palette_name(channels) -> None:
    assert name_of(RGBColor(*channels)) in palette_names()


def test_palette_names_keep_palette_order() -> None:
    names = palette_names()
    assert names[:3] == ["black", "charcoal", "graphite"]
    assert names[-1] == "brown"
    assert len(names) == 17
