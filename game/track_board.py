import numpy as np

from game.constants import NUM_SQUARES, START_SQUARE
from game.geometry import is_on_board, square_to_label
from game.tile_types import NUM_TILE_TYPES, TileType


class BoardInvariantError(RuntimeError):
    """Raised when the per-type layers and the occupancy layer disagree."""


class TrackBoard:
    # The board is a 9x9 grid of squares numbered row-major from the top-left:
    #
    #  a9 b9 c9 d9 e9 f9 g9 h9 i9
    #  a8 b8 c8 d8 e8 f8 g8 h8 i8
    #  ...
    #  a1 b1 c1 d1 e1 f1 g1 h1 i1
    #
    # The anchor tile is seeded on a1 before the first turn.

    # ==================================================================================
    # STATE STRUCTURE
    # ==================================================================================
    # state:      (7, 81) bool array, one layer per TileType (layer index == TileType value)
    # occupancy:  (81,) bool array, union of all layers
    #
    # Invariants:
    #   - the seven layers are pairwise disjoint (a square holds at most one tile)
    #   - occupancy is exactly their union
    #   - squares are never cleared once occupied
    # ==================================================================================

    def __init__(self, clone=None):
        """Initialize a track board.

        Args:
            clone: TrackBoard instance to copy state from (default: new board
                holding only the anchor on a1)
        """
        if clone is not None:
            self.state = np.copy(clone.state)
            self.occupancy = np.copy(clone.occupancy)
        else:
            self.state = np.zeros((NUM_TILE_TYPES, NUM_SQUARES), dtype=bool)
            self.occupancy = np.zeros(NUM_SQUARES, dtype=bool)
            self.place(TileType.ANCHOR_START, START_SQUARE)

    def __deepcopy__(self, memo):
        return TrackBoard(clone=self)

    def place(self, tile_type, square):
        """Commit a tile to an empty square.

        Raises:
            ValueError: If the square is off the board or already occupied
        """
        if not is_on_board(square):
            raise ValueError(f"Invalid placement: square {square} is not on the board")
        if self.occupancy[square]:
            raise ValueError(
                f"Invalid placement: square {square_to_label(square)} is already occupied"
            )
        self.state[TileType(tile_type), square] = True
        self.occupancy[square] = True

    def type_at(self, square):
        """Return the TileType on ``square``, or None if empty or off the board.

        Layers are scanned in TileType order, so the lowest layer wins if
        the layers ever overlapped.
        """
        if not is_on_board(square):
            return None
        layers = np.flatnonzero(self.state[:, square])
        if layers.size == 0:
            return None
        return TileType(int(layers[0]))

    def is_occupied(self, square):
        if not is_on_board(square):
            return False
        return bool(self.occupancy[square])

    def occupied_count(self):
        return int(np.count_nonzero(self.occupancy))

    def occupied_squares(self):
        return [int(square) for square in np.flatnonzero(self.occupancy)]

    def squares_of(self, tile_type):
        return [int(square) for square in np.flatnonzero(self.state[TileType(tile_type)])]

    def snapshot(self):
        """Return read-only copies of (state, occupancy) for display."""
        state = np.copy(self.state)
        occupancy = np.copy(self.occupancy)
        state.setflags(write=False)
        occupancy.setflags(write=False)
        return state, occupancy

    def check_invariants(self):
        """Verify layer disjointness and that occupancy is their union.

        Raises:
            BoardInvariantError: If either invariant is broken
        """
        per_square = self.state.sum(axis=0)
        overlapping = np.flatnonzero(per_square > 1)
        if overlapping.size:
            labels = ", ".join(square_to_label(int(sq)) for sq in overlapping)
            raise BoardInvariantError(f"Tile layers overlap on: {labels}")
        mismatched = np.flatnonzero((per_square > 0) != self.occupancy)
        if mismatched.size:
            labels = ", ".join(square_to_label(int(sq)) for sq in mismatched)
            raise BoardInvariantError(f"Occupancy does not match tile layers on: {labels}")
