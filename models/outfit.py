"""Outfit suggestion records."""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from models.garment import Garment

KEY_SEPARATOR = "-"


@dataclass(frozen=True)
class Outfit:
    """A suggested combination of garments with human-readable rationale.

    ``items`` keeps composition order: the anchor garment first, then the
    garments chosen to go with it.
    """

    items: Tuple[Garment, ...]
    rationale: Tuple[str, ...]
    kind: str = "separates"

    @property
    def item_ids(self) -> Tuple[str, ...]:
        return tuple(item.id for item in self.items)

    @property
    def id_set(self) -> FrozenSet[str]:
        """Order-independent identity used for deduplication."""

        return frozenset(self.item_ids)

    @property
    def key(self) -> str:
        """Readable label for the outfit; ids may contain the separator."""

        return KEY_SEPARATOR.join(sorted(self.item_ids))


__all__ = ["Outfit", "KEY_SEPARATOR"]
