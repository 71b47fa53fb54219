"""Tests for SimulationSession functionality."""

import io

import pytest
import numpy as np

from controller.simulation_session import SimulationSession
from controller.turn_logger import TurnLogger
from game.constants import NUM_TURNS, START_SQUARE
from game.legality import generate_valid_squares
from game.tile_types import TileType


def quiet_session(**kwargs):
    messages = []
    session = SimulationSession(status_reporter=messages.append, **kwargs)
    return session, messages


class TestSimulationSession:
    """Test suite for SimulationSession class."""

    def test_default_initialization(self):
        session, messages = quiet_session(seed=5)

        assert session.turns == NUM_TURNS
        assert session.get_seed() == 5
        assert session.anchor == START_SQUARE
        assert session.board.occupied_squares() == [START_SQUARE]
        assert session.turns_played == 0
        assert messages == ["-- Setting Seed: 5"]

    def test_seed_defaults_to_time(self):
        session, messages = quiet_session()

        assert isinstance(session.get_seed(), int)
        assert messages == [f"-- Setting Seed: {session.get_seed()}"]

    def test_status_reporter_defaults_to_print(self, capsys):
        SimulationSession(seed=9)
        assert capsys.readouterr().out == "-- Setting Seed: 9\n"

    def test_negative_turns_rejected(self):
        with pytest.raises(ValueError, match="Turn count must be non-negative"):
            SimulationSession(seed=1, turns=-1, status_reporter=lambda message: None)

    def test_zero_turns_plays_priming_turn_only(self):
        session, _ = quiet_session(seed=3, turns=0)
        session.run()

        assert session.turns_played == 1

    def test_statistics_add_up(self):
        session, _ = quiet_session(seed=11, turns=400)
        board = session.run()
        stats = session.get_statistics()

        assert stats["turns"] == 401
        assert stats["placements"] + stats["skipped"] + stats["carrots"] == 401
        assert stats["occupied"] == stats["placements"] + 1
        assert board.occupied_count() == stats["occupied"]

    def test_same_seed_same_board(self):
        first, _ = quiet_session(seed=2024, turns=1000)
        second, _ = quiet_session(seed=2024, turns=1000)
        first.run()
        second.run()

        assert np.array_equal(first.board.state, second.board.state)
        assert first.anchor == second.anchor
        assert first.get_statistics() == second.get_statistics()

    def test_occupancy_is_monotonic(self):
        session, _ = quiet_session(seed=77, turns=300)
        previous = np.copy(session.board.occupancy)

        for _ in range(301):
            result = session.play_turn()
            current = session.board.occupancy
            assert np.all(previous <= current)
            grown = int(current.sum()) - int(previous.sum())
            assert grown == (1 if result.placed else 0)
            previous = np.copy(current)

    def test_anchor_always_holds_a_tile(self):
        session, _ = quiet_session(seed=8, turns=300)
        for _ in range(300):
            session.play_turn()
            assert session.board.is_occupied(session.anchor)

    def test_full_run_terminates_with_valid_board(self):
        session, _ = quiet_session(seed=31337)
        board = session.run()

        assert session.turns_played == NUM_TURNS + 1
        board.check_invariants()
        assert board.type_at(START_SQUARE) == TileType.ANCHOR_START

        for anchor in board.occupied_squares():
            for tile_type in TileType:
                assert len(generate_valid_squares(board, anchor, tile_type)) <= 2

    def test_snapshot_is_read_only(self):
        session, _ = quiet_session(seed=4, turns=50)
        session.run()
        state, occupancy = session.snapshot()

        assert not state.flags.writeable
        assert not occupancy.flags.writeable
        assert np.array_equal(occupancy, session.board.occupancy)

    def test_set_status_reporter(self):
        session, messages = quiet_session(seed=1)
        replacement = []
        session.set_status_reporter(replacement.append)
        session._report("hello")

        assert replacement == ["hello"]
        assert messages == ["-- Setting Seed: 1"]


class TestSessionLogging:
    """Test that a session drives its TurnLogger."""

    def test_transcript_has_one_line_per_turn(self):
        stream = io.StringIO()
        turn_logger = TurnLogger(log_to_screen=True, stream=stream)
        session, _ = quiet_session(seed=7, turns=10, turn_logger=turn_logger)
        session.run()

        lines = stream.getvalue().splitlines()
        assert lines[:3] == ["# Seed: 7", "# Turns: 10", "#"]
        turn_lines = [line for line in lines if line.startswith("Turn ")]
        assert len(turn_lines) == 11
        assert turn_lines[0].startswith("Turn 0: ")
        assert turn_lines[-1].startswith("Turn 10: ")
        assert "# Final board state:" in lines
        assert not turn_logger.is_active()

    def test_placed_only_transcript(self):
        stream = io.StringIO()
        turn_logger = TurnLogger(log_to_screen=True, stream=stream, include_skipped=False)
        session, _ = quiet_session(seed=7, turns=200, turn_logger=turn_logger)
        session.run()

        turn_lines = [line for line in stream.getvalue().splitlines() if line.startswith("Turn ")]
        assert len(turn_lines) == session.placements
