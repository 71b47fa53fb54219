"""Turn writers for the track simulation.

Provides pluggable writer classes that write simulation turns to an output
stream in a given format.
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

import numpy as np

from game.constants import BOARD_WIDTH


class TurnWriter(ABC):
    """Abstract base class for turn writers.

    A TurnWriter owns an output stream and writes a run's header, one entry
    per turn and an optional footer. Subclasses implement the format.
    """

    def __init__(self, output: TextIO):
        """Initialize the writer.

        Args:
            output: Output stream to write to (stdout, StringIO, etc.)
        """
        self.output = output
        self._run_started = False

    @abstractmethod
    def write_header(self, seed: int, turns: int) -> None:
        """Write run metadata.

        Args:
            seed: Random seed for this run
            turns: Number of turns after the priming turn
        """
        pass

    @abstractmethod
    def write_turn(self, turn_number: int, result) -> None:
        """Write a single turn.

        Args:
            turn_number: 0 for the priming turn, then 1..turns
            result: TurnResult for the turn
        """
        pass

    def write_comment(self, message: str) -> None:
        """Write a status/comment message (default: ignored)."""
        pass

    def write_footer(self, board=None) -> None:
        """Write the final board state (optional).

        Args:
            board: Optional TrackBoard after the run
        """
        pass

    def flush(self) -> None:
        self.output.flush()

    def close(self) -> None:
        """Close the output stream (but never close stdout/stderr)."""
        if self.output in (sys.stdout, sys.stderr):
            return
        if hasattr(self.output, 'close'):
            self.output.close()


class TranscriptWriter(TurnWriter):
    """Writes turns in transcript format.

    Format:
        # Seed: 12345
        # Turns: 10000
        #
        Turn 0: {'roll': 'CURVE', 'tile': 'CURVE_SE', 'square': 'a2', 'anchor': 'a2'}
        Turn 1: {'roll': 'CARROT', 'tile': '', 'square': '', 'anchor': 'a2'}
        #
        # Final board state:
        # ...
    """

    def __init__(self, output: TextIO, include_skipped: bool = True):
        """Initialize transcript writer.

        Args:
            output: Output stream to write to
            include_skipped: Also write turns that placed nothing
        """
        super().__init__(output)
        self.include_skipped = include_skipped

    def write_header(self, seed: int, turns: int) -> None:
        self.output.write(f"# Seed: {seed}\n")
        self.output.write(f"# Turns: {turns}\n")
        self.output.write("#\n")
        self._run_started = True
        self.flush()

    def write_turn(self, turn_number: int, result) -> None:
        if not result.placed and not self.include_skipped:
            return
        self.output.write(f"Turn {turn_number}: {result.to_dict()}\n")
        self.flush()

    def write_comment(self, message: str) -> None:
        self.output.write(f"# {message}\n")
        self.flush()

    def write_footer(self, board=None) -> None:
        """Write the final board as layer numbers (0 empty, 1 anchor, 2-7 tiles)."""
        if board is None:
            return

        self.output.write("#\n")
        self.output.write("# Final board state:\n")
        self.output.write("# ---------------\n")

        layer_numbers = np.arange(1, board.state.shape[0] + 1)[:, None]
        combined = (board.state * layer_numbers).max(axis=0).reshape(BOARD_WIDTH, BOARD_WIDTH)
        for row in combined:
            self.output.write(f"# {row}\n")

        self.output.write("# ---------------\n")
        self.output.write(f"# Occupied squares: {board.occupied_count()}\n")
        self.flush()
