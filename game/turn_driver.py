"""Single-turn driver: roll, resolve, check legality, commit."""

from __future__ import annotations

import logging

import numpy as np

from game.geometry import square_to_label
from game.legality import generate_valid_squares
from game.tile_types import CURVE_TYPES, DIE, STRAIGHT_TYPES, TileCategory, TileType
from game.track_board import TrackBoard
from game.turn_result import TurnResult

logger = logging.getLogger(__name__)


class TurnDriver:
    """Plays one turn at a time against a board it owns exclusively.

    The random source is injected so runs can be reproduced. Anything with a
    numpy-style ``integers(high)`` method works.
    """

    def __init__(self, board: TrackBoard, rng=None, move_generator=generate_valid_squares):
        """Initialize the driver.

        Args:
            board: Board mutated by committed placements
            rng: numpy Generator (default: unseeded ``np.random.default_rng()``)
            move_generator: Callable (board, anchor, tile_type) -> MoveList
        """
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.move_generator = move_generator

    def roll_category(self) -> TileCategory:
        """Roll the six-faced die (3 carrot, 2 curve, 1 straight)."""
        return DIE[int(self.rng.integers(len(DIE)))]

    def resolve_tile_type(self, category: TileCategory) -> TileType | None:
        """Draw a concrete tile for the category; None for a carrot roll."""
        if category is TileCategory.CURVE:
            return CURVE_TYPES[int(self.rng.integers(len(CURVE_TYPES)))]
        if category is TileCategory.STRAIGHT:
            return STRAIGHT_TYPES[int(self.rng.integers(len(STRAIGHT_TYPES)))]
        return None

    def take_turn(self, anchor: int) -> TurnResult:
        """Play one turn from ``anchor``.

        The tile goes on the first candidate that is not yet occupied and
        becomes the new anchor. A carrot roll, an empty candidate list or a
        list of occupied squares leaves the board and the anchor unchanged.

        Args:
            anchor: Square of the previously placed tile

        Returns:
            TurnResult: Outcome of the turn (``result.anchor`` is the new anchor)
        """
        category = self.roll_category()
        tile_type = self.resolve_tile_type(category)
        if tile_type is None:
            logger.debug("Rolled %s, no movement", category.value)
            return TurnResult(category, None, (), None, anchor)

        candidates = tuple(self.move_generator(self.board, anchor, tile_type))
        for square in candidates:
            if not self.board.is_occupied(square):
                self.board.place(tile_type, square)
                logger.debug(
                    "Placed %s on %s (candidates: %d)",
                    tile_type.name,
                    square_to_label(square),
                    len(candidates),
                )
                return TurnResult(category, tile_type, candidates, square, square)

        logger.debug("No free square for %s next to anchor %d, turn skipped", tile_type.name, anchor)
        return TurnResult(category, tile_type, candidates, None, anchor)
