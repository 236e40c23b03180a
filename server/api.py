"""FastAPI server exposing the outfit engine."""

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from closet_app.config import ClosetConfig
from closet_app.logging_config import configure_logging
from logic.engine import suggest_outfits, wardrobe_from_payload
from logic.validation import (
    ColorNameRequest,
    GarmentView,
    OutfitRequest,
    OutfitResponse,
    WardrobeFilterRequest,
    model_failure,
    validation_failure,
)
from logic.wardrobe_query import filter_garments
from models.color import to_color
from models.color_palette import NAMED_COLOR_PALETTE, name_of, palette_names

config = ClosetConfig.from_env()
configure_logging(config.log_level, json_output=config.json_logs)

app = FastAPI(title="Virtual Closet", version="0.1.0")


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": config.service_name,
        "environment": config.environment or "local",
    }


@app.get("/colors")
async def list_colors() -> List[dict]:
    """Return the named-color palette in lookup order."""

    return [{"hex": entry.color.hex, "name": entry.name} for entry in NAMED_COLOR_PALETTE]


@app.get("/colors/names")
async def list_color_names() -> List[str]:
    """Return palette names only, for color pickers and wardrobe filters."""

    return palette_names()


@app.post("/colors/name")
async def name_color(request: ColorNameRequest) -> dict:
    """Name the palette color nearest to the given value."""

    try:
        color = to_color(request.color)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=model_failure("invalid color", exc)) from exc
    return {"color": color.hex, "name": name_of(color)}


@app.post("/outfits")
async def plan_outfits(request: OutfitRequest) -> OutfitResponse:
    """Generate outfit suggestions for the submitted wardrobe and profile."""

    try:
        return suggest_outfits(**request.model_dump())
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=validation_failure("invalid request", exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=model_failure("invalid wardrobe or profile", exc)) from exc


@app.post("/wardrobe/filter")
async def filter_wardrobe(request: WardrobeFilterRequest) -> List[GarmentView]:
    """Return garments matching the requested type, color name and search text."""

    try:
        garments = wardrobe_from_payload([item.model_dump() for item in request.wardrobe])
        matches = filter_garments(
            garments, garment_type=request.type, color_name=request.color_name, query=request.query
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=model_failure("invalid filter request", exc)) from exc
    return [GarmentView.from_garment(garment) for garment in matches]


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host=config.host, port=config.port, reload=False)
