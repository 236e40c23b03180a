"""Deterministic outfit composition from a wardrobe snapshot.

Two strategies produce candidates: dress-anchored looks and top/bottom
separates. Pairing is a first-match linear scan in wardrobe order, so the
chosen companions and the rationale text depend on how the wardrobe is ordered.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from logic.compatibility import is_outfit_acceptable
from logic.fit_rules import fit_goals_for
from models.color import color_distance
from models.color_palette import name_of
from models.garment import Garment
from models.outfit import Outfit
from models.profile import CustomerProfile
from models.taxonomy import FitGoal, GarmentType

logger = logging.getLogger(__name__)

MAX_OUTFITS = 12
MAX_DRESS_ANCHORS = 6
MAX_TOP_ANCHORS = 8

# Outerwear needs more contrast than shoes.
DRESS_OUTERWEAR_MIN_DISTANCE = 90
DRESS_SHOES_MIN_DISTANCE = 60
TOP_BOTTOM_MIN_DISTANCE = 80
TOP_OUTERWEAR_MIN_DISTANCE = 90
BOTTOM_SHOES_MIN_DISTANCE = 60

DRESS_BASE_RATIONALE = "Dress as one-and-done base"
MINIMAL_LAYERING_RATIONALE = "Minimal layering to elongate line"
SHOE_CONTRAST_RATIONALE = "Shoes chosen for contrast"

FIT_GOAL_ADVICE: Dict[FitGoal, str] = {
    FitGoal.ACCENTUATE_WAIST: "Tuck or belt to define waistline",
    FitGoal.ELONGATE: "Monochromatic column from top to shoe to elongate silhouette",
    FitGoal.ACCENTUATE_SHOULDERS: "Structured shoulder or boat-neck to broaden upper body",
}


@dataclass(frozen=True)
class WardrobePartition:
    tops: List[Garment]
    bottoms: List[Garment]
    dresses: List[Garment]
    outerwear: List[Garment]
    shoes: List[Garment]
    accessories: List[Garment]


@dataclass(frozen=True)
class CompositionResult:
    outfits: List[Outfit]
    diagnostics: Dict[str, object]


def partition_wardrobe(wardrobe: Sequence[Garment]) -> WardrobePartition:
    """Group garments by type, keeping wardrobe order within each group."""

    def of_type(garment_type: GarmentType) -> List[Garment]:
        return [item for item in wardrobe if item.type == garment_type]

    return WardrobePartition(
        tops=of_type(GarmentType.TOP),
        bottoms=of_type(GarmentType.BOTTOM),
        dresses=of_type(GarmentType.DRESS),
        outerwear=of_type(GarmentType.OUTERWEAR),
        shoes=of_type(GarmentType.SHOES),
        accessories=of_type(GarmentType.ACCESSORY),
    )


def first_contrasting(
    candidates: Sequence[Garment], anchor: Garment, min_distance: float
) -> Optional[Garment]:
    """Return the first candidate whose color is farther than ``min_distance`` from ``anchor``."""

    for candidate in candidates:
        if color_distance(candidate.color, anchor.color) > min_distance:
            return candidate
    return None


def compose_dress_outfits(partition: WardrobePartition) -> List[Outfit]:
    """Build dress + optional outerwear + shoes candidates."""

    outfits: List[Outfit] = []
    for dress in partition.dresses[:MAX_DRESS_ANCHORS]:
        layer = first_contrasting(partition.outerwear, dress, DRESS_OUTERWEAR_MIN_DISTANCE)
        shoe = first_contrasting(partition.shoes, dress, DRESS_SHOES_MIN_DISTANCE)
        if shoe is None:
            logger.debug("No contrasting shoes for dress %s", dress.id)
            continue
        if layer is not None:
            layering = f"Layer adds structure ({name_of(layer.color)} vs {name_of(dress.color)})"
            items = (dress, layer, shoe)
        else:
            layering = MINIMAL_LAYERING_RATIONALE
            items = (dress, shoe)
        outfits.append(
            Outfit(
                items=items,
                rationale=(DRESS_BASE_RATIONALE, layering, SHOE_CONTRAST_RATIONALE),
                kind="dress",
            )
        )
    return outfits


def compose_separates_outfits(partition: WardrobePartition, profile: CustomerProfile) -> List[Outfit]:
    """Build top + bottom + optional outerwear + optional shoes candidates."""

    goals = set(fit_goals_for(profile.body_type))
    advice = [text for goal, text in FIT_GOAL_ADVICE.items() if goal in goals]

    outfits: List[Outfit] = []
    for top in partition.tops[:MAX_TOP_ANCHORS]:
        bottom = first_contrasting(partition.bottoms, top, TOP_BOTTOM_MIN_DISTANCE)
        if bottom is None:
            logger.debug("No contrasting bottom for top %s", top.id)
            continue
        layer = first_contrasting(partition.outerwear, top, TOP_OUTERWEAR_MIN_DISTANCE)
        shoe = first_contrasting(partition.shoes, bottom, BOTTOM_SHOES_MIN_DISTANCE)

        items: List[Garment] = [top, bottom]
        if layer is not None:
            items.append(layer)
        if shoe is not None:
            items.append(shoe)
        rationale = [f"Top ({name_of(top.color)}) with {name_of(bottom.color)} bottom for contrast"]
        rationale.extend(advice)
        outfits.append(Outfit(items=tuple(items), rationale=tuple(rationale), kind="separates"))
    return outfits


def deduplicate_outfits(outfits: Sequence[Outfit]) -> List[Outfit]:
    """Keep the first outfit for each distinct set of garment ids."""

    unique: List[Outfit] = []
    seen = set()
    for outfit in outfits:
        if outfit.id_set in seen:
            continue
        seen.add(outfit.id_set)
        unique.append(outfit)
    return unique


def compose_with_diagnostics(wardrobe: Sequence[Garment], profile: CustomerProfile) -> CompositionResult:
    """Generate, filter, deduplicate and cap outfit suggestions with diagnostics."""

    partition = partition_wardrobe(wardrobe)
    candidates = compose_dress_outfits(partition) + compose_separates_outfits(partition, profile)
    accepted = [outfit for outfit in candidates if is_outfit_acceptable(outfit, profile)]
    unique = deduplicate_outfits(accepted)
    surfaced = unique[:MAX_OUTFITS]

    diagnostics: Dict[str, object] = {
        "wardrobe_size": len(wardrobe),
        "candidate_count": len(candidates),
        "accepted_count": len(accepted),
        "unique_count": len(unique),
        "surfaced_count": len(surfaced),
        "surfaced_keys": [outfit.key for outfit in surfaced],
    }
    logger.info(
        "Composed %s outfits from %s candidates (%s garments)",
        len(surfaced),
        len(candidates),
        len(wardrobe),
    )
    return CompositionResult(outfits=surfaced, diagnostics=diagnostics)


def compose(wardrobe: Sequence[Garment], profile: CustomerProfile) -> List[Outfit]:
    """Return up to :data:`MAX_OUTFITS` distinct, profile-compatible outfits."""

    return compose_with_diagnostics(wardrobe, profile).outfits


__all__ = [
    "MAX_OUTFITS",
    "FIT_GOAL_ADVICE",
    "WardrobePartition",
    "CompositionResult",
    "partition_wardrobe",
    "first_contrasting",
    "compose_dress_outfits",
    "compose_separates_outfits",
    "deduplicate_outfits",
    "compose_with_diagnostics",
    "compose",
]
