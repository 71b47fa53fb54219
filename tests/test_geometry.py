"""
Unit tests for square geometry helpers.

Tests rank/file projection, the coarse touching test, direction steps and
square labels, including the off-board sentinel behaviour.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path to import game modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from game.constants import INVALID_SQUARE, START_SQUARE
from game.geometry import (
    are_touching,
    file_of,
    is_on_board,
    label_to_square,
    neighbour,
    rank_of,
    square_to_label,
)
from game.tile_types import Direction


class TestRankAndFile:
    """Test rank/file projections."""

    @pytest.mark.parametrize("square,rank,file", [
        (0, 8, 0),  # a9, top-left
        (8, 8, 8),  # i9, top-right
        (40, 4, 4),  # e5, centre
        (72, 0, 0),  # a1, bottom-left
        (80, 0, 8),  # i1, bottom-right
    ])
    def test_projection(self, square, rank, file):
        assert rank_of(square) == rank
        assert file_of(square) == file

    @pytest.mark.parametrize("square", [-10, -1, 81, 100])
    def test_off_board_returns_sentinel(self, square):
        assert not is_on_board(square)
        assert rank_of(square) == INVALID_SQUARE
        assert file_of(square) == INVALID_SQUARE

    def test_start_square_is_bottom_left(self):
        assert rank_of(START_SQUARE) == 0
        assert file_of(START_SQUARE) == 0


class TestAreTouching:
    """Test the coarse index-difference adjacency test."""

    @pytest.mark.parametrize("other", [40, 41, 39, 32, 31, 30, 48, 49, 50])
    def test_touching_differences(self, other):
        assert are_touching(40, other)

    @pytest.mark.parametrize("other", [42, 38, 29, 51, 0, 80])
    def test_not_touching(self, other):
        assert not are_touching(40, other)

    def test_row_wrap_still_counts_as_touching(self):
        """The test is deliberately coarse: i9 (8) and a8 (9) differ by 1."""
        assert are_touching(8, 9)
        assert neighbour(8, Direction.E) is None


class TestNeighbour:
    """Test single steps in a direction, including edge rejection."""

    def test_steps_from_centre(self):
        assert neighbour(40, Direction.N) == 31
        assert neighbour(40, Direction.S) == 49
        assert neighbour(40, Direction.E) == 41
        assert neighbour(40, Direction.W) == 39

    def test_steps_from_start_square(self):
        assert neighbour(START_SQUARE, Direction.N) == 63
        assert neighbour(START_SQUARE, Direction.E) == 73
        assert neighbour(START_SQUARE, Direction.S) is None
        assert neighbour(START_SQUARE, Direction.W) is None

    @pytest.mark.parametrize("square", [8, 17, 26, 35, 44, 53, 62, 71, 80])
    def test_no_step_east_from_file_i(self, square):
        assert neighbour(square, Direction.E) is None

    @pytest.mark.parametrize("square", [0, 9, 18, 27, 36, 45, 54, 63, 72])
    def test_no_step_west_from_file_a(self, square):
        assert neighbour(square, Direction.W) is None

    @pytest.mark.parametrize("square", range(9))
    def test_no_step_north_from_rank_9(self, square):
        assert neighbour(square, Direction.N) is None

    @pytest.mark.parametrize("square", range(72, 81))
    def test_no_step_south_from_rank_1(self, square):
        assert neighbour(square, Direction.S) is None

    def test_off_board_origin(self):
        assert neighbour(-1, Direction.E) is None
        assert neighbour(81, Direction.N) is None

    def test_direction_opposites(self):
        assert Direction.N.opposite is Direction.S
        assert Direction.E.opposite is Direction.W
        for direction in Direction:
            assert direction.opposite.opposite is direction
            assert direction.delta == -direction.opposite.delta


class TestLabels:
    """Test square label conversion against the fixed coordinate table."""

    @pytest.mark.parametrize("square,label", [
        (0, "a9"),
        (8, "i9"),
        (9, "a8"),
        (40, "e5"),
        (72, "a1"),
        (73, "b1"),
        (80, "i1"),
    ])
    def test_square_to_label(self, square, label):
        assert square_to_label(square) == label
        assert label_to_square(label) == square

    def test_label_is_case_insensitive(self):
        assert label_to_square("E5") == 40
        assert label_to_square(" a1 ") == START_SQUARE

    @pytest.mark.parametrize("label", ["", "j1", "a0", "a10", "5e", "aa"])
    def test_invalid_label(self, label):
        with pytest.raises(ValueError, match="Invalid square label"):
            label_to_square(label)

    def test_off_board_square_has_no_label(self):
        with pytest.raises(ValueError, match="not on the board"):
            square_to_label(81)
