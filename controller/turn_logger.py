"""Turn logging for the track simulation.

Fans simulation events out to any number of pluggable writers.
"""

import sys
from typing import TextIO

from game.writers import TranscriptWriter, TurnWriter


class TurnLogger:
    """Manages turn writers for a simulation run.

    Writers only ever target streams (stdout by default); the simulation
    does no file I/O.
    """

    def __init__(
        self,
        log_to_screen: bool = False,
        stream: TextIO | None = None,
        include_skipped: bool = True,
    ):
        """Initialize the turn logger.

        Args:
            log_to_screen: Whether to write the transcript to ``stream``
            stream: Output stream for the transcript (default: sys.stdout)
            include_skipped: Whether turns that placed nothing are written
        """
        self._run_active = False
        self.writers: list[TurnWriter] = []

        if log_to_screen:
            self.writers.append(TranscriptWriter(stream or sys.stdout, include_skipped=include_skipped))

    def add_writer(self, writer: TurnWriter) -> None:
        self.writers.append(writer)

    def remove_writer(self, writer: TurnWriter) -> None:
        if writer in self.writers:
            self.writers.remove(writer)

    def start_log(self, seed: int, turns: int) -> None:
        """Write headers to all writers. Does nothing if none are configured."""
        if not self.writers:
            return
        for writer in self.writers:
            writer.write_header(seed, turns)
        self._run_active = True

    def log_turn(self, turn_number: int, result) -> None:
        for writer in self.writers:
            writer.write_turn(turn_number, result)

    def log_comment(self, message: str) -> None:
        for writer in self.writers:
            writer.write_comment(message)

    def end_log(self, board=None) -> None:
        """Write footers to all writers. Streams stay open until close()."""
        if not self.writers:
            return
        for writer in self.writers:
            writer.write_footer(board)
        self._run_active = False

    def is_active(self) -> bool:
        return self._run_active

    def close(self) -> None:
        """Close all writers (stdout/stderr are left open)."""
        for writer in self.writers:
            writer.close()
