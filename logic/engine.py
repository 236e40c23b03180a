"""Outfit engine entry points used by the service and demo runner."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from closet_app.logging_config import OUTFITS_GENERATED, get_logger, log_event, operation_context
from logic.outfit_builder import compose_with_diagnostics
from logic.validation import OutfitRequest, OutfitResponse, OutfitView
from models.garment import Garment, from_raw_metadata
from models.outfit import Outfit
from models.profile import CustomerProfile, profile_from_dict
from tools.observability import instrument_operation

logger = get_logger(__name__)


@instrument_operation("generate_outfits")
def generate_outfits(wardrobe: Sequence[Garment], profile: CustomerProfile) -> List[Outfit]:
    """Return ranked outfit suggestions for a wardrobe snapshot and profile.

    The wardrobe is read, never modified. An empty wardrobe or one without
    any valid pairing simply yields an empty list.
    """

    with operation_context("engine.generate_outfits") as correlation_id:
        result = compose_with_diagnostics(list(wardrobe), profile)
        log_event(
            logger,
            logging.INFO,
            OUTFITS_GENERATED,
            correlation_id=correlation_id,
            **result.diagnostics,
        )
        return result.outfits


def wardrobe_from_payload(items: Sequence[Dict[str, Any]]) -> List[Garment]:
    """Build garments from validated payload dicts, failing fast on bad values."""

    return [from_raw_metadata(item) for item in items]


@instrument_operation("suggest_outfits", input_model=OutfitRequest)
def suggest_outfits(
    wardrobe: Sequence[Dict[str, Any]], profile: Optional[Dict[str, Any]] = None
) -> OutfitResponse:
    """Validate a raw request, run the engine and serialise the suggestions."""

    garments = wardrobe_from_payload(wardrobe)
    customer = profile_from_dict(profile or {})
    outfits = generate_outfits(garments, customer)
    return OutfitResponse(outfits=[OutfitView.from_outfit(outfit) for outfit in outfits], count=len(outfits))


__all__ = ["generate_outfits", "suggest_outfits", "wardrobe_from_payload"]
