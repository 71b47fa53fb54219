"""Tile types, connector directions and dice categories."""

from __future__ import annotations

from enum import Enum, IntEnum

from game.constants import BOARD_WIDTH, DICE_FACES


class Direction(Enum):
    """Compass direction, valued by its square delta on the row-major grid."""

    N = -BOARD_WIDTH  # Up (towards rank 8)
    E = 1  # Right (towards file i)
    S = BOARD_WIDTH  # Down (towards rank 0)
    W = -1  # Left (towards file a)

    @property
    def delta(self) -> int:
        return self.value

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}


class TileType(IntEnum):
    """Closed set of tiles. The value doubles as the board layer index."""

    ANCHOR_START = 0
    CURVE_SE = 1  # ┌
    CURVE_SW = 2  # ┐
    CURVE_NW = 3  # ┘
    CURVE_NE = 4  # └
    STRAIGHT_H = 5  # ─
    STRAIGHT_V = 6  # │


class TileCategory(Enum):
    """Coarse die outcome before a concrete tile type is chosen."""

    CARROT = "CARROT"  # No movement this turn
    CURVE = "CURVE"
    STRAIGHT = "STRAIGHT"

    @classmethod
    def from_face(cls, face: str) -> TileCategory:
        try:
            return cls[face.upper()]
        except KeyError:
            raise ValueError(f"Invalid dice face: '{face}'") from None


NUM_TILE_TYPES = len(TileType)

# The two directions each tile connects. The anchor sits in the bottom-left
# corner, so it can only lead North or East.
CONNECTORS: dict[TileType, tuple[Direction, Direction]] = {
    TileType.ANCHOR_START: (Direction.N, Direction.E),
    TileType.CURVE_SE: (Direction.E, Direction.S),
    TileType.CURVE_SW: (Direction.S, Direction.W),
    TileType.CURVE_NW: (Direction.N, Direction.W),
    TileType.CURVE_NE: (Direction.N, Direction.E),
    TileType.STRAIGHT_H: (Direction.E, Direction.W),
    TileType.STRAIGHT_V: (Direction.N, Direction.S),
}

# Draw order matters: the driver indexes into these with a uniform draw
CURVE_TYPES: tuple[TileType, ...] = (
    TileType.CURVE_SE,
    TileType.CURVE_SW,
    TileType.CURVE_NW,
    TileType.CURVE_NE,
)
STRAIGHT_TYPES: tuple[TileType, ...] = (TileType.STRAIGHT_H, TileType.STRAIGHT_V)

TILE_SYMBOLS: dict[TileType, str] = {
    TileType.ANCHOR_START: "S",
    TileType.CURVE_SE: "┌",
    TileType.CURVE_SW: "┐",
    TileType.CURVE_NW: "┘",
    TileType.CURVE_NE: "└",
    TileType.STRAIGHT_H: "─",
    TileType.STRAIGHT_V: "│",
}

DIE: tuple[TileCategory, ...] = tuple(TileCategory.from_face(face) for face in DICE_FACES)


def tile_types_facing(direction: Direction) -> frozenset[TileType]:
    """Return every tile type exposing a connector towards ``direction``."""
    return frozenset(tile for tile, connectors in CONNECTORS.items() if direction in connectors)
