"""Text-based renderer for the final board."""

from __future__ import annotations

import sys
from typing import TextIO

from game.constants import BOARD_WIDTH, EMPTY_SYMBOL
from game.tile_types import TILE_SYMBOLS


class TextRenderer:
    """Writes 9x9 text grids of a board to a stream, top row (rank 9) first."""

    def __init__(self, stream: TextIO | None = None):
        self._stream: TextIO = stream or sys.stdout

    @staticmethod
    def render_board(board) -> str:
        """One symbol per square, '.' for empty squares."""
        lines = []
        for row in range(BOARD_WIDTH):
            symbols = []
            for col in range(BOARD_WIDTH):
                tile_type = board.type_at(row * BOARD_WIDTH + col)
                symbols.append(EMPTY_SYMBOL if tile_type is None else TILE_SYMBOLS[tile_type])
            lines.append("".join(f" {symbol}" for symbol in symbols))
        return "\n".join(lines)

    @staticmethod
    def render_occupancy(board) -> str:
        """Occupancy as a grid of 1/0."""
        grid = board.occupancy.reshape(BOARD_WIDTH, BOARD_WIDTH)
        return "\n".join("".join(f" {int(bit)}" for bit in row) for row in grid)

    def show_board(self, board) -> None:
        print(self.render_board(board), file=self._stream)

    def show_occupancy(self, board) -> None:
        print(self.render_occupancy(board), file=self._stream)

    def report_status(self, message: str) -> None:
        if message is None:
            return
        print(message, file=self._stream)
