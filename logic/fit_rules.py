"""Body-shape styling rules."""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from models.taxonomy import BodyType, FitGoal, parse_optional_enum

_FIT_GOALS: Dict[BodyType, Tuple[FitGoal, ...]] = {
    BodyType.RECTANGLE: (FitGoal.ACCENTUATE_WAIST,),
    BodyType.TRIANGLE: (FitGoal.ACCENTUATE_SHOULDERS, FitGoal.ELONGATE),
    BodyType.INVERTED_TRIANGLE: (FitGoal.MINIMIZE_HIPS, FitGoal.BALANCE),
    BodyType.HOURGLASS: (FitGoal.ACCENTUATE_WAIST,),
    BodyType.OVAL: (FitGoal.ELONGATE, FitGoal.RELAXED),
}


def fit_goals_for(body_type: Optional[BodyType | str]) -> Tuple[FitGoal, ...]:
    """Return the ordered fit goals for a body type, empty when it is unset."""

    parsed = parse_optional_enum(BodyType, body_type)
    if parsed is None:
        return ()
    return _FIT_GOALS[parsed]


__all__ = ["fit_goals_for"]
