"""HTTP surface tests using FastAPI's test client."""

from pathlib import Path
import sys

from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1]))

from server.api import app

client = TestClient(app)

_WARDROBE = [
    {"id": "top", "name": "Black tee", "type": "top", "color": "#000000", "tags": ["basics"]},
    {"id": "bottom", "name": "White jeans", "type": "bottom", "color": "#FFFFFF"},
]


def test_healthcheck() -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_palette_listing_and_naming() -> None:
    colors = client.get("/colors").json()
    assert colors[0] == {"hex": "#000000", "name": "black"}
    assert len(colors) == 17

    names = client.get("/colors/names").json()
    assert names == [entry["name"] for entry in colors]
    assert "off white" in names

    named = client.post("/colors/name", json={"color": "#111111"})
    assert named.json() == {"color": "#111111", "name": "black"}

    invalid = client.post("/colors/name", json={"color": [300, 0, 0]})
    assert invalid.status_code == 422


def test_outfits_endpoint_returns_suggestions() -> None:
    response = client.post("/outfits", json={"wardrobe": _WARDROBE, "profile": {}})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    assert [item["id"] for item in body["outfits"][0]["items"]] == ["top", "bottom"]


def test_outfits_endpoint_applies_dislikes() -> None:
    response = client.post("/outfits", json={"wardrobe": _WARDROBE, "profile": {"disliked_colors": ["white"]}})
    assert response.json() == {"outfits": [], "count": 0}


def test_outfits_endpoint_rejects_unknown_garment_type() -> None:
    wardrobe = [{"id": "x", "type": "cape", "color": "#000000"}]
    response = client.post("/outfits", json={"wardrobe": wardrobe})
    assert response.status_code == 422
    assert response.json()["detail"]["status"] == "needs_review"


def test_wardrobe_filter_endpoint() -> None:
    response = client.post("/wardrobe/filter", json={"wardrobe": _WARDROBE, "query": "basics"})
    assert response.status_code == 200
    assert [item["id"] for item in response.json()] == ["top"]
