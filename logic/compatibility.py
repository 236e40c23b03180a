"""Color compatibility checks against a customer profile."""
from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Optional

from models.color import ColorLike
from models.color_palette import name_of
from models.garment import Garment
from models.outfit import Outfit
from models.profile import CustomerProfile
from models.taxonomy import SkinUndertone, parse_optional_enum

logger = logging.getLogger(__name__)

# Neutral undertones have no entry: every color suits them.
UNDERTONE_FRIENDLY_COLORS: Dict[SkinUndertone, FrozenSet[str]] = {
    SkinUndertone.COOL: frozenset({"blue", "purple", "charcoal", "graphite", "white", "teal"}),
    SkinUndertone.WARM: frozenset({"rust", "amber", "copper", "brown", "green", "off white"}),
}


def is_undertone_friendly(color: ColorLike, undertone: Optional[SkinUndertone | str]) -> bool:
    """Return True when ``color`` flatters the given skin undertone."""

    parsed = parse_optional_enum(SkinUndertone, undertone)
    if parsed is None or parsed not in UNDERTONE_FRIENDLY_COLORS:
        return True
    return name_of(color) in UNDERTONE_FRIENDLY_COLORS[parsed]


def is_item_acceptable(item: Garment, profile: CustomerProfile) -> bool:
    """Check a single garment against dislikes, favorites and undertone."""

    color_name = name_of(item.color)
    if color_name in profile.disliked_colors:
        return False
    # An empty favorites list allows every color.
    if profile.favorite_colors and color_name not in profile.favorite_colors:
        return False
    return is_undertone_friendly(item.color, profile.skin_undertone)


def is_outfit_acceptable(outfit: Outfit, profile: CustomerProfile) -> bool:
    """Return True when every garment in the outfit passes :func:`is_item_acceptable`."""

    result = all(is_item_acceptable(item, profile) for item in outfit.items)
    if not result:
        logger.debug("Rejected outfit %s for profile color preferences", outfit.key)
    return result


__all__ = [
    "UNDERTONE_FRIENDLY_COLORS",
    "is_undertone_friendly",
    "is_item_acceptable",
    "is_outfit_acceptable",
]
