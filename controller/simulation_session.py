"""Simulation session management for the track game.

Manages a single run's lifecycle: seeding, board creation, the priming turn
and the fixed turn loop.
"""

import logging
import time
from typing import Callable

import numpy as np

from controller.turn_logger import TurnLogger
from game.constants import NUM_TURNS, START_SQUARE
from game.tile_types import TileCategory
from game.track_board import TrackBoard
from game.turn_driver import TurnDriver

logger = logging.getLogger(__name__)


class SimulationSession:
    """Manages one simulation run (board, driver, anchor and statistics)."""

    def __init__(
        self,
        seed=None,
        turns=NUM_TURNS,
        status_reporter: Callable[[str], None] | None = None,
        turn_logger: TurnLogger | None = None,
    ):
        """Initialize a simulation session.

        Args:
            seed: Random seed for reproducibility (auto-generated if None)
            turns: Turns played after the priming turn
            status_reporter: Optional callback for status messages (default: print)
            turn_logger: Optional TurnLogger receiving every turn
        """
        if turns < 0:
            raise ValueError(f"Turn count must be non-negative, got {turns}")

        self.turns = turns
        self._status_reporter: Callable[[str], None] | None = status_reporter
        self.turn_logger = turn_logger

        if seed is None:
            seed = int(time.time())
        self.current_seed = seed
        self._report(f"-- Setting Seed: {seed}")
        self.rng = np.random.default_rng(seed)

        self.board = TrackBoard()
        self.anchor = START_SQUARE
        self.driver = TurnDriver(self.board, self.rng)

        # Statistics
        self.turns_played = 0
        self.placements = 0
        self.skipped_turns = 0
        self.carrot_rolls = 0

    def play_turn(self):
        """Play one turn and advance the anchor.

        Returns:
            TurnResult: Outcome of the turn
        """
        result = self.driver.take_turn(self.anchor)

        if result.placed:
            self.placements += 1
        elif result.category is TileCategory.CARROT:
            self.carrot_rolls += 1
        else:
            self.skipped_turns += 1

        if self.turn_logger is not None:
            self.turn_logger.log_turn(self.turns_played, result)

        self.anchor = result.anchor
        self.turns_played += 1
        return result

    def run(self):
        """Play the priming turn plus ``turns`` further turns.

        Returns:
            TrackBoard: The final board (invariants verified)

        Raises:
            BoardInvariantError: If the board ended up inconsistent
        """
        if self.turn_logger is not None:
            self.turn_logger.start_log(self.current_seed, self.turns)

        self.play_turn()
        for _ in range(self.turns):
            self.play_turn()

        self.board.check_invariants()
        logger.debug(
            "Run finished: %d turns, %d placements, %d skipped, %d carrots",
            self.turns_played,
            self.placements,
            self.skipped_turns,
            self.carrot_rolls,
        )

        if self.turn_logger is not None:
            self.turn_logger.end_log(self.board)

        return self.board

    def snapshot(self):
        """Read-only (state, occupancy) view of the board for display."""
        return self.board.snapshot()

    def get_seed(self):
        return self.current_seed

    def get_statistics(self):
        """Get run statistics.

        Returns:
            dict: turns, placements, skipped turns, carrot rolls and occupied squares
        """
        return {
            "turns": self.turns_played,
            "placements": self.placements,
            "skipped": self.skipped_turns,
            "carrots": self.carrot_rolls,
            "occupied": self.board.occupied_count(),
        }

    def set_status_reporter(self, reporter: Callable[[str], None] | None) -> None:
        """Set or update the status reporter callback."""
        self._status_reporter = reporter

    def _report(self, message: str | None) -> None:
        if message is None:
            return
        if self._status_reporter is not None:
            self._status_reporter(message)
        else:
            print(message)
