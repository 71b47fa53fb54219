"""Pure square arithmetic for the 9x9 grid.

Squares are numbered row-major from the top-left corner:

     a9 b9 c9 d9 e9 f9 g9 h9 i9      0  1  2  3  4  5  6  7  8
     a8 b8 ...                       9 10 ...
     ...                             ...
     a1 b1 c1 d1 e1 f1 g1 h1 i1     72 73 74 75 76 77 78 79 80

Rank counts rows from the bottom (0-8) and file counts columns from the
left (0-8). Queries on squares outside the grid return INVALID_SQUARE or
None instead of raising.
"""

from __future__ import annotations

from game.constants import (
    BOARD_WIDTH,
    FILE_LETTERS,
    INVALID_SQUARE,
    NUM_SQUARES,
    TOUCHING_DIFFERENCES,
)
from game.tile_types import Direction


def is_on_board(square: int) -> bool:
    return 0 <= square < NUM_SQUARES


def rank_of(square: int) -> int:
    if not is_on_board(square):
        return INVALID_SQUARE
    return BOARD_WIDTH - 1 - square // BOARD_WIDTH


def file_of(square: int) -> int:
    if not is_on_board(square):
        return INVALID_SQUARE
    return square % BOARD_WIDTH


def are_touching(a: int, b: int) -> bool:
    """Coarse adjacency test on raw indices.

    True for the same square or an index difference of 1, 8, 9 or 10. This
    is looser than 4-neighbour adjacency (it ignores row wrap and accepts
    diagonals) and only serves as a pre-filter.
    """
    if a == b:
        return True
    return abs(a - b) in TOUCHING_DIFFERENCES


def neighbour(square: int, direction: Direction) -> int | None:
    """Return the square one step from ``square`` in ``direction``.

    Returns None when either square is off the board or when the step would
    wrap around a grid edge (exactly one of rank or file must change, by 1).
    """
    if not is_on_board(square):
        return None
    target = square + direction.delta
    if not is_on_board(target):
        return None
    rank_step = abs(rank_of(target) - rank_of(square))
    file_step = abs(file_of(target) - file_of(square))
    if rank_step + file_step != 1:
        return None
    return target


def square_to_label(square: int) -> str:
    """Convert a square index to its label (0 -> 'a9', 72 -> 'a1')."""
    if not is_on_board(square):
        raise ValueError(f"Square {square} is not on the board")
    return f"{FILE_LETTERS[file_of(square)]}{rank_of(square) + 1}"


def label_to_square(label: str) -> int:
    """Convert a label such as 'e5' back to its square index."""
    label = label.strip().lower()
    if len(label) != 2 or label[0] not in FILE_LETTERS or not label[1].isdigit():
        raise ValueError(f"Invalid square label: '{label}'")
    rank = int(label[1]) - 1
    if not 0 <= rank < BOARD_WIDTH:
        raise ValueError(f"Invalid square label: '{label}'")
    return (BOARD_WIDTH - 1 - rank) * BOARD_WIDTH + FILE_LETTERS.index(label[0])
