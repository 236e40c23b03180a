"""Named-color palette and nearest-name lookup.

The palette is an ordered sequence rather than a mapping: when two entries are
equally close to a color, the one listed first wins.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from models.color import ColorLike, RGBColor, color_distance, to_color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamedColor:
    color: RGBColor
    name: str


def _entry(hex_value: str, name: str) -> NamedColor:
    return NamedColor(color=RGBColor.from_hex(hex_value), name=name)


NAMED_COLOR_PALETTE: Tuple[NamedColor, ...] = (
    _entry("#000000", "black"),
    _entry("#222222", "charcoal"),
    _entry("#444444", "graphite"),
    _entry("#666666", "slate"),
    _entry("#888888", "gray"),
    _entry("#FFFFFF", "white"),
    _entry("#F2F2F2", "off white"),
    _entry("#C0392B", "red"),
    _entry("#D35400", "orange"),
    _entry("#F39C12", "amber"),
    _entry("#27AE60", "green"),
    _entry("#16A085", "teal"),
    _entry("#2980B9", "blue"),
    _entry("#8E44AD", "purple"),
    _entry("#E67E22", "rust"),
    _entry("#B87333", "copper"),
    _entry("#A0522D", "brown"),
)


def name_of(color: ColorLike, palette: Sequence[NamedColor] = NAMED_COLOR_PALETTE) -> str:
    """Return the name of the palette entry nearest to ``color``."""

    if not palette:
        raise ValueError("Color palette must contain at least one entry")
    target = to_color(color)
    best = palette[0]
    best_distance = float("inf")
    for entry in palette:
        distance = color_distance(target, entry.color)
        if distance < best_distance:
            best_distance = distance
            best = entry
    logger.debug("nearest color for %s -> %s (%.1f)", target.hex, best.name, best_distance)
    return best.name


def palette_names(palette: Sequence[NamedColor] = NAMED_COLOR_PALETTE) -> List[str]:
    """List palette names in palette order."""

    return [entry.name for entry in palette]


__all__ = ["NamedColor", "NAMED_COLOR_PALETTE", "name_of", "palette_names"]
