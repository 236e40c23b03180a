"""Canonical enumerations for garments and customer profiles.

Every enumerated field in the data model is parsed through :func:`parse_enum`
so that unknown labels fail fast at the model boundary instead of leaking into
the matching logic.
"""

import re
from enum import Enum
from typing import List, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class InvalidEnumError(ValueError):
    """Raised when a value is not part of a fixed enumeration."""


class GarmentType(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"
    DRESS = "dress"
    OUTERWEAR = "outerwear"
    SHOES = "shoes"
    ACCESSORY = "accessory"


class BodyType(str, Enum):
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    INVERTED_TRIANGLE = "invertedTriangle"
    HOURGLASS = "hourglass"
    OVAL = "oval"


class SkinUndertone(str, Enum):
    COOL = "cool"
    WARM = "warm"
    NEUTRAL = "neutral"


class FitGoal(str, Enum):
    ELONGATE = "elongate"
    BALANCE = "balance"
    ACCENTUATE_SHOULDERS = "accentuateShoulders"
    ACCENTUATE_WAIST = "accentuateWaist"
    MINIMIZE_HIPS = "minimizeHips"
    RELAXED = "relaxed"


class StyleVibe(str, Enum):
    CLASSIC = "classic"
    MINIMALIST = "minimalist"
    SPORTY = "sporty"
    STREET = "street"
    ELEGANT = "elegant"
    BOHO = "boho"
    EDGY = "edgy"
    PREPPY = "preppy"


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"
    WINTER = "winter"


def parse_enum(enum_cls: Type[E], value: object) -> E:
    """Return the enum member for ``value`` or raise :class:`InvalidEnumError`."""

    if isinstance(value, enum_cls):
        return value
    raw = str(value).strip() if value is not None else ""
    try:
        return enum_cls(raw)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise InvalidEnumError(
            f"Unsupported {enum_cls.__name__} '{value}'. Allowed: {allowed}"
        ) from None


def parse_optional_enum(enum_cls: Type[E], value: object) -> Optional[E]:
    """Like :func:`parse_enum` but maps ``None`` and blank strings to ``None``."""

    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_enum(enum_cls, value)


def parse_enum_list(enum_cls: Type[E], values: object) -> List[E]:
    """Parse a collection of labels, dropping duplicates but keeping order."""

    if values is None:
        return []
    if isinstance(values, (str, Enum)):
        values = [values]
    parsed: List[E] = []
    for value in values:  # type: ignore[union-attr]
        member = parse_enum(enum_cls, value)
        if member not in parsed:
            parsed.append(member)
    return parsed


# Checked in order; the first matching pattern wins.
_FILENAME_TYPE_RULES = [
    (re.compile(r"dress|gown"), GarmentType.DRESS),
    (re.compile(r"coat|jacket|hoodie|blazer|parka"), GarmentType.OUTERWEAR),
    (re.compile(r"jean|pant|trouser|short"), GarmentType.BOTTOM),
    (re.compile(r"shoe|sneaker|boot|heel|loafer"), GarmentType.SHOES),
    (re.compile(r"belt|hat|cap|scarf|bag"), GarmentType.ACCESSORY),
]


def guess_type_from_filename(filename: str) -> GarmentType:
    """Guess a garment type from keywords in an uploaded photo's file name."""

    lowered = filename.lower()
    for pattern, garment_type in _FILENAME_TYPE_RULES:
        if pattern.search(lowered):
            return garment_type
    return GarmentType.TOP


__all__ = [
    "InvalidEnumError",
    "GarmentType",
    "BodyType",
    "SkinUndertone",
    "FitGoal",
    "StyleVibe",
    "Season",
    "parse_enum",
    "parse_optional_enum",
    "parse_enum_list",
    "guess_type_from_filename",
]
