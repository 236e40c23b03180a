"""RGB color values and distance helpers."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Tuple, Union


class InvalidColorError(ValueError):
    """Raised when a color value cannot be parsed or is out of range."""


@dataclass(frozen=True)
class RGBColor:
    """An sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel_name in ("r", "g", "b"):
            value = getattr(self, channel_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColorError(f"Channel {channel_name} must be an integer, got {value!r}")
            if not 0 <= value <= 255:
                raise InvalidColorError(f"Channel {channel_name}={value} is outside 0..255")

    @classmethod
    def from_hex(cls, value: str) -> "RGBColor":
        """Parse ``#RRGGBB``, ``RRGGBB`` or the ``#RGB`` shorthand."""

        digits = str(value).strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise InvalidColorError(f"Unsupported hex color '{value}'")
        try:
            packed = int(digits, 16)
        except ValueError:
            raise InvalidColorError(f"Unsupported hex color '{value}'") from None
        return cls((packed >> 16) & 255, (packed >> 8) & 255, packed & 255)

    @property
    def hex(self) -> str:
        return "#" + "".join(f"{channel:02x}" for channel in self.as_tuple())

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.hex


ColorLike = Union[RGBColor, str, Iterable[int]]


def to_color(value: ColorLike) -> RGBColor:
    """Coerce a hex string or an ``(r, g, b)`` sequence into an :class:`RGBColor`."""

    if isinstance(value, RGBColor):
        return value
    if isinstance(value, str):
        return RGBColor.from_hex(value)
    try:
        channels = tuple(value)
    except TypeError:
        raise InvalidColorError(f"Unsupported color value {value!r}") from None
    if len(channels) != 3:
        raise InvalidColorError(f"Expected three channels, got {len(channels)}")
    return RGBColor(*channels)


def color_distance(first: RGBColor, second: RGBColor) -> float:
    """Euclidean distance between two colors in RGB space."""

    return math.sqrt(
        (first.r - second.r) ** 2 + (first.g - second.g) ** 2 + (first.b - second.b) ** 2
    )


__all__ = ["RGBColor", "InvalidColorError", "ColorLike", "to_color", "color_distance"]
