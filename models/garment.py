"""Garment data model and helpers."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional

from models.color import RGBColor, to_color
from models.color_palette import name_of
from models.taxonomy import (
    GarmentType,
    Season,
    guess_type_from_filename,
    parse_enum,
    parse_enum_list,
)


def new_garment_id() -> str:
    """Return a short random identifier for a new garment."""

    return secrets.token_hex(4)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar, comma separated string or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, (list, tuple, set)):
        return list(value)
    return [value]


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Strip tags, drop blanks and duplicates while keeping insertion order."""

    normalised: List[str] = []
    for value in values:
        tag = str(value).strip()
        if tag and tag not in normalised:
            normalised.append(tag)
    return normalised


@dataclass
class Garment:
    """A single item in the user's wardrobe.

    ``color_name`` is derived from ``color`` unless given explicitly. The user
    may rename a color, so the two are allowed to diverge.
    """

    id: str
    name: str
    type: GarmentType
    color: RGBColor
    color_name: str = ""
    tags: List[str] = field(default_factory=list)
    seasons: List[Season] = field(default_factory=list)
    image_ref: Optional[str] = None

    def __post_init__(self) -> None:
        if not str(self.id).strip():
            raise ValueError("Garment id must not be empty")
        self.id = str(self.id)
        self.name = str(self.name)
        self.type = parse_enum(GarmentType, self.type)
        self.color = to_color(self.color)
        if not self.color_name:
            self.color_name = name_of(self.color)
        self.tags = normalise_tags(_ensure_list(self.tags))
        self.seasons = parse_enum_list(Season, self.seasons)


def update_garment(garment: Garment, **changes: Any) -> Garment:
    """Return a copy of ``garment`` with user edits applied.

    Changing ``color`` recomputes ``color_name`` unless a name is supplied in
    the same edit.
    """

    if "id" in changes and changes["id"] != garment.id:
        raise ValueError("Garment id is immutable")
    changes.pop("id", None)
    if "color" in changes and "color_name" not in changes:
        changes["color_name"] = ""
    return replace(garment, **changes)


def from_raw_metadata(metadata: Dict[str, Any]) -> Garment:
    """Factory to build a :class:`Garment` from loose catalog or upload metadata."""

    if metadata.get("color") is None:
        raise ValueError("Missing required field for Garment: color")

    filename = str(metadata.get("filename") or "")
    name = metadata.get("name")
    if not name and filename:
        name = filename.rsplit(".", 1)[0]
    garment_type = metadata.get("type")
    if not garment_type:
        garment_type = guess_type_from_filename(filename or str(name or ""))

    return Garment(
        id=str(metadata.get("id") or new_garment_id()),
        name=str(name or ""),
        type=garment_type,
        color=metadata["color"],
        color_name=str(metadata.get("color_name") or ""),
        tags=_ensure_list(metadata.get("tags")),
        seasons=_ensure_list(metadata.get("seasons")),
        image_ref=metadata.get("image_ref"),
    )


__all__ = ["Garment", "update_garment", "from_raw_metadata", "new_garment_id", "normalise_tags"]
