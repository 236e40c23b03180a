"""Pydantic schemas for validating engine IO payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from models.garment import Garment
from models.outfit import Outfit

ColorField = Union[str, List[int]]


class GarmentPayload(BaseModel):
    """Wire shape of a wardrobe garment."""

    id: str = Field(min_length=1)
    name: str = ""
    type: str
    color: ColorField
    color_name: Optional[str] = None
    tags: List[str] = []
    seasons: List[str] = []
    image_ref: Optional[str] = None


class ProfilePayload(BaseModel):
    """Wire shape of a customer profile."""

    body_type: Optional[str] = None
    skin_undertone: Optional[str] = None
    preferred_styles: List[str] = []
    favorite_colors: List[str] = []
    disliked_colors: List[str] = []
    formality_scale: int = Field(3, ge=1, le=5)
    name: Optional[str] = None
    height_cm: Optional[float] = Field(None, gt=0)
    avoid_notes: Optional[str] = None


class OutfitRequest(BaseModel):
    """Input contract for outfit generation."""

    wardrobe: List[GarmentPayload] = []
    profile: ProfilePayload = Field(default_factory=ProfilePayload)


class GarmentView(BaseModel):
    id: str
    name: str
    type: str
    color: str
    color_name: str
    tags: List[str] = []

    @classmethod
    def from_garment(cls, garment: Garment) -> "GarmentView":
        return cls(
            id=garment.id,
            name=garment.name,
            type=garment.type.value,
            color=garment.color.hex,
            color_name=garment.color_name,
            tags=list(garment.tags),
        )


class OutfitView(BaseModel):
    key: str
    kind: Literal["dress", "separates"]
    items: List[GarmentView]
    rationale: List[str]

    @classmethod
    def from_outfit(cls, outfit: Outfit) -> "OutfitView":
        return cls(
            key=outfit.key,
            kind=outfit.kind,
            items=[GarmentView.from_garment(item) for item in outfit.items],
            rationale=list(outfit.rationale),
        )


class OutfitResponse(BaseModel):
    """Outfit suggestions returned to presentation layers."""

    outfits: List[OutfitView] = []
    count: int = 0


class ColorNameRequest(BaseModel):
    color: ColorField


class WardrobeFilterRequest(BaseModel):
    wardrobe: List[GarmentPayload] = []
    type: Optional[str] = None
    color_name: Optional[str] = None
    query: Optional[str] = None


class ValidationResult(BaseModel):
    """Wrapper returned to callers when validation fails."""

    status: Literal["needs_review"] = "needs_review"
    message: str
    details: List[Dict[str, Any]]


def validation_failure(message: str, exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent review payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return ValidationResult(message=message, details=details).model_dump()


def model_failure(message: str, exc: ValueError) -> Dict[str, Any]:
    """Translate a data-model ``ValueError`` into the same review payload."""

    return ValidationResult(
        message=message, details=[{"msg": str(exc), "type": type(exc).__name__}]
    ).model_dump()


__all__ = [
    "GarmentPayload",
    "ProfilePayload",
    "OutfitRequest",
    "GarmentView",
    "OutfitView",
    "OutfitResponse",
    "ColorNameRequest",
    "WardrobeFilterRequest",
    "ValidationResult",
    "validation_failure",
    "model_failure",
]
