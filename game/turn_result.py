"""Turn result value object.

Encapsulates the outcome of one driver turn so the session, logger and
writers can report on it without reading driver internals.
"""

from __future__ import annotations

from dataclasses import dataclass

from game.geometry import square_to_label
from game.tile_types import TileCategory, TileType


@dataclass(frozen=True)
class TurnResult:
    """Outcome of a single turn.

    Attributes:
        category: Die outcome (CARROT, CURVE or STRAIGHT)
        tile_type: Tile resolved from the category (None for CARROT)
        candidates: Squares returned by the legality engine, in order
        square: Square the tile was placed on (None if nothing was placed)
        anchor: Anchor square after the turn
    """

    category: TileCategory
    tile_type: TileType | None
    candidates: tuple[int, ...]
    square: int | None
    anchor: int

    @property
    def placed(self) -> bool:
        return self.square is not None

    def to_dict(self) -> dict:
        """Return a transcript-friendly dictionary.

        Returns:
            dict: {'roll': ..., 'tile': ..., 'square': ..., 'anchor': ...}
        """
        return {
            "roll": self.category.value,
            "tile": self.tile_type.name if self.tile_type is not None else "",
            "square": square_to_label(self.square) if self.square is not None else "",
            "anchor": square_to_label(self.anchor),
        }
