"""Customer profile used to personalise outfit matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from models.taxonomy import (
    BodyType,
    SkinUndertone,
    StyleVibe,
    parse_enum_list,
    parse_optional_enum,
)


def _normalise_color_names(values: Optional[Iterable[str]]) -> List[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = values.split(",")
    names: List[str] = []
    for value in values:
        name = str(value).strip()
        if name and name not in names:
            names.append(name)
    return names


@dataclass
class CustomerProfile:
    """Styling preferences for a single user.

    ``preferred_styles``, ``formality_scale``, ``height_cm`` and ``avoid_notes``
    are collected from the user but are not consulted by the matcher.
    """

    body_type: Optional[BodyType] = None
    skin_undertone: Optional[SkinUndertone] = None
    preferred_styles: List[StyleVibe] = field(default_factory=list)
    favorite_colors: List[str] = field(default_factory=list)
    disliked_colors: List[str] = field(default_factory=list)
    formality_scale: int = 3
    name: Optional[str] = None
    height_cm: Optional[float] = None
    avoid_notes: Optional[str] = None

    def __post_init__(self) -> None:
        self.body_type = parse_optional_enum(BodyType, self.body_type)
        self.skin_undertone = parse_optional_enum(SkinUndertone, self.skin_undertone)
        self.preferred_styles = parse_enum_list(StyleVibe, self.preferred_styles)
        self.favorite_colors = _normalise_color_names(self.favorite_colors)
        self.disliked_colors = _normalise_color_names(self.disliked_colors)
        if isinstance(self.formality_scale, bool) or int(self.formality_scale) != self.formality_scale:
            raise ValueError(f"formality_scale must be an integer, got {self.formality_scale!r}")
        self.formality_scale = int(self.formality_scale)
        if not 1 <= self.formality_scale <= 5:
            raise ValueError(f"formality_scale must be between 1 and 5, got {self.formality_scale}")
        if self.height_cm is not None:
            self.height_cm = float(self.height_cm)


def default_profile() -> CustomerProfile:
    """Profile used on first launch."""

    return CustomerProfile(preferred_styles=[StyleVibe.CLASSIC, StyleVibe.MINIMALIST], formality_scale=3)


def reset_profile() -> CustomerProfile:
    """Profile restored when the user clears their closet."""

    return CustomerProfile(preferred_styles=[StyleVibe.CLASSIC], formality_scale=3)


def profile_from_dict(data: Dict[str, Any]) -> CustomerProfile:
    """Build a profile from loose key/value preferences."""

    known = {
        "body_type",
        "skin_undertone",
        "preferred_styles",
        "favorite_colors",
        "disliked_colors",
        "formality_scale",
        "name",
        "height_cm",
        "avoid_notes",
    }
    return CustomerProfile(**{key: value for key, value in data.items() if key in known and value is not None})


__all__ = ["CustomerProfile", "default_profile", "reset_profile", "profile_from_dict"]
