"""Model package exports."""

from models.color import RGBColor, InvalidColorError, color_distance, to_color
from models.color_palette import NAMED_COLOR_PALETTE, NamedColor, name_of, palette_names
from models.garment import Garment, from_raw_metadata, update_garment
from models.outfit import Outfit
from models.profile import CustomerProfile, default_profile, reset_profile
from models.taxonomy import *  # noqa: F401,F403

__all__ = [
    "RGBColor",
    "InvalidColorError",
    "color_distance",
    "to_color",
    "NAMED_COLOR_PALETTE",
    "NamedColor",
    "name_of",
    "palette_names",
    "Garment",
    "from_raw_metadata",
    "update_garment",
    "Outfit",
    "CustomerProfile",
    "default_profile",
    "reset_profile",
]
