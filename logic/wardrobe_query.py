"""Wardrobe browsing filters."""
from __future__ import annotations

from typing import List, Optional, Sequence

from models.color_palette import name_of
from models.garment import Garment
from models.taxonomy import GarmentType, parse_enum

ALL_TYPES = "all"


def filter_garments(
    wardrobe: Sequence[Garment],
    garment_type: Optional[GarmentType | str] = None,
    color_name: Optional[str] = None,
    query: Optional[str] = None,
) -> List[Garment]:
    """Return garments matching every supplied criterion, in wardrobe order.

    ``color_name`` is compared against the palette name nearest to each
    garment's color, and ``query`` is a case-insensitive substring search over
    the garment name and tags.
    """

    wanted_type = None
    if garment_type and garment_type != ALL_TYPES:
        wanted_type = parse_enum(GarmentType, garment_type)
    needle = query.lower() if query else None

    matches: List[Garment] = []
    for garment in wardrobe:
        if wanted_type is not None and garment.type != wanted_type:
            continue
        if color_name and name_of(garment.color) != color_name:
            continue
        if needle and needle not in f"{garment.name} {' '.join(garment.tags)}".lower():
            continue
        matches.append(garment)
    return matches


__all__ = ["filter_garments", "ALL_TYPES"]
