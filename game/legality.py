"""Stateless legality engine for tile placement.

All functions are pure: same board and arguments, same answer.
Nothing here mutates the board or raises for an illegal move; an illegal
move simply does not appear in the returned MoveList.

Attachment model:
    A new tile is laid one step away from the anchor (the previously placed
    tile) in an ``offset`` direction. It enters through the connector facing
    back at the anchor and leaves through its other connector, the ``exit``.
    A candidate square is legal when:
      1. the anchor's tile exposes a connector towards ``offset``
      2. the candidate is on the board without wrapping an edge
      3. the candidate is empty
      4. the square beyond the exit is on the board and empty

Usage:
    moves = generate_valid_squares(board, anchor, TileType.CURVE_SE)
    for square in moves:
        ...
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

from game.constants import MOVE_LIST_CAPACITY
from game.geometry import are_touching, neighbour
from game.tile_types import Direction, TileType, tile_types_facing


class MoveList:
    """Ordered, fixed-capacity list of candidate squares."""

    def __init__(self, squares: Iterable[int] = (), capacity: int = MOVE_LIST_CAPACITY):
        self.capacity = capacity
        self._squares: list[int] = []
        for square in squares:
            self.add(square)

    def add(self, square: int) -> None:
        if len(self._squares) >= self.capacity:
            raise ValueError(f"Move list is full ({self.capacity} squares)")
        self._squares.append(square)

    @property
    def count(self) -> int:
        return len(self._squares)

    def __len__(self) -> int:
        return len(self._squares)

    def __iter__(self) -> Iterator[int]:
        return iter(self._squares)

    def __getitem__(self, index: int) -> int:
        return self._squares[index]

    def __eq__(self, other) -> bool:
        if isinstance(other, MoveList):
            return self._squares == other._squares
        if isinstance(other, (list, tuple)):
            return self._squares == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"MoveList({self._squares})"


class AttachmentRule(NamedTuple):
    """One way a tile type can attach to the anchor."""

    offset: Direction  # Step from anchor to candidate
    exit: Direction  # Connector the new tile leads out through
    predecessors: frozenset  # Anchor tile types exposing a connector towards offset


# Tile types with a connector facing each direction. The anchor faces N and E.
_FACING_N = tile_types_facing(Direction.N)  # ANCHOR_START, CURVE_NW, CURVE_NE, STRAIGHT_V
_FACING_E = tile_types_facing(Direction.E)  # ANCHOR_START, CURVE_SE, CURVE_NE, STRAIGHT_H
_FACING_S = tile_types_facing(Direction.S)  # CURVE_SE, CURVE_SW, STRAIGHT_V
_FACING_W = tile_types_facing(Direction.W)  # CURVE_SW, CURVE_NW, STRAIGHT_H

# Evaluation order is observable: the driver commits to the first free candidate.
ATTACHMENT_RULES: dict[TileType, tuple[AttachmentRule, AttachmentRule]] = {
    TileType.CURVE_SE: (
        AttachmentRule(Direction.N, Direction.E, _FACING_N),
        AttachmentRule(Direction.W, Direction.S, _FACING_W),
    ),
    TileType.CURVE_SW: (
        AttachmentRule(Direction.E, Direction.S, _FACING_E),
        AttachmentRule(Direction.N, Direction.W, _FACING_N),
    ),
    TileType.CURVE_NW: (
        AttachmentRule(Direction.E, Direction.N, _FACING_E),
        AttachmentRule(Direction.S, Direction.W, _FACING_S),
    ),
    TileType.CURVE_NE: (
        AttachmentRule(Direction.W, Direction.N, _FACING_W),
        AttachmentRule(Direction.S, Direction.E, _FACING_S),
    ),
    TileType.STRAIGHT_H: (
        AttachmentRule(Direction.E, Direction.E, _FACING_E),
        AttachmentRule(Direction.W, Direction.W, _FACING_W),
    ),
    TileType.STRAIGHT_V: (
        AttachmentRule(Direction.N, Direction.N, _FACING_N),
        AttachmentRule(Direction.S, Direction.S, _FACING_S),
    ),
}


def candidate_for_rule(board, anchor: int, rule: AttachmentRule) -> int | None:
    """Return the square ``rule`` attaches to, or None if it is not legal.

    Args:
        board: TrackBoard to read (never modified)
        anchor: Square of the previously placed tile
        rule: AttachmentRule to evaluate

    Returns:
        int | None: Candidate square, or None when any check fails
    """
    if board.type_at(anchor) not in rule.predecessors:
        return None

    candidate = neighbour(anchor, rule.offset)
    if candidate is None or not are_touching(anchor, candidate):
        return None
    if board.type_at(candidate) is not None:
        return None

    # The track must be able to continue past the new tile
    exit_square = neighbour(candidate, rule.exit)
    if exit_square is None or board.type_at(exit_square) is not None:
        return None

    return candidate


def generate_valid_squares(board, anchor: int, tile_type: TileType) -> MoveList:
    """Enumerate the squares ``tile_type`` may legally attach to.

    Args:
        board: TrackBoard to read (never modified)
        anchor: Square of the previously placed tile
        tile_type: Newly drawn tile type

    Returns:
        MoveList: Candidates in rule order (at most 2). Empty when the anchor
            square holds no tile, is off the board, or nothing fits.
    """
    move_list = MoveList()
    if board.type_at(anchor) is None:
        return move_list

    for rule in ATTACHMENT_RULES.get(tile_type, ()):
        candidate = candidate_for_rule(board, anchor, rule)
        if candidate is not None:
            move_list.add(candidate)

    return move_list
