"""Simple entrypoint to try the outfit engine locally."""

from closet_app.logging_config import configure_logging
from logic.engine import generate_outfits
from models.garment import Garment
from models.profile import default_profile

SAMPLE_WARDROBE = [
    Garment(id="tee-black", name="Black tee", type="top", color="#111111", tags=["basics"]),
    Garment(id="shirt-blue", name="Oxford shirt", type="top", color="#2f7fc0"),
    Garment(id="jeans-light", name="Light jeans", type="bottom", color="#f0f0f0"),
    Garment(id="chinos-rust", name="Rust chinos", type="bottom", color="#e0802a"),
    Garment(id="dress-red", name="Red midi dress", type="dress", color="#c23a2c"),
    Garment(id="coat-charcoal", name="Wool coat", type="outerwear", color="#222222"),
    Garment(id="sneakers-white", name="White sneakers", type="shoes", color="#ffffff"),
]


def main() -> None:
    configure_logging("WARNING")
    for outfit in generate_outfits(SAMPLE_WARDROBE, default_profile()):
        print(" + ".join(item.name for item in outfit.items))
        for line in outfit.rationale:
            print(f"    - {line}")


if __name__ == "__main__":
    main()
