"""
Tests for the Board entity.
"""

import random

import pytest

from snek.domain.board import Board


class TestBoardGeometry:
    """Construction and basic geometry."""

    def test_dimensions(self, board):
        """Board exposes its width, height and cell size."""
        assert board.width == 250
        assert board.height == 250
        assert board.size == 10
        assert board.cell_count == 625

    def test_rejects_misaligned_dimensions(self):
        """Dimensions must be positive multiples of the cell size."""
        with pytest.raises(ValueError):
            Board(255, 250, 10)
        with pytest.raises(ValueError):
            Board(250, 0, 10)

    def test_rejects_non_positive_size(self):
        """A zero cell size is rejected."""
        with pytest.raises(ValueError):
            Board(250, 250, 0)

    def test_contains(self, board):
        """contains() covers [0, width) x [0, height)."""
        assert board.contains((0, 0))
        assert board.contains((240, 240))
        assert not board.contains((250, 0))
        assert not board.contains((0, -10))

    def test_cells_are_aligned_and_complete(self):
        """cells() lists every aligned cell row by row."""
        small = Board(30, 20, 10)
        assert small.cells() == [(0, 0), (10, 0), (20, 0), (0, 10), (10, 10), (20, 10)]

    def test_random_cell_is_aligned_and_on_board(self, board):
        """random_cell() only produces aligned cells inside the board."""
        rng = random.Random(42)
        for _ in range(200):
            x, y = board.random_cell(rng)
            assert board.contains((x, y))
            assert x % 10 == 0 and y % 10 == 0


class TestBoardWrap:
    """Edge wrapping."""

    def test_in_range_position_is_unchanged(self, board):
        assert board.wrap((120, 130)) == (120, 130)

    def test_past_right_edge_wraps_to_zero(self, board):
        """x at the width wraps to 0."""
        assert board.wrap((250, 100)) == (0, 100)

    def test_past_left_edge_wraps_to_last_cell(self, board):
        """Negative x wraps to width - size."""
        assert board.wrap((-10, 100)) == (240, 100)

    def test_past_bottom_edge_wraps_to_zero(self, board):
        assert board.wrap((100, 250)) == (100, 0)

    def test_past_top_edge_wraps_to_last_cell(self, board):
        assert board.wrap((100, -10)) == (100, 240)

    def test_both_axes_wrap_independently(self, board):
        """A corner exit wraps x and y in the same call."""
        assert board.wrap((250, -10)) == (0, 240)

    def test_boards_compare_by_geometry(self):
        assert Board(100, 100, 10) == Board(100, 100, 10)
        assert Board(100, 100, 10) != Board(100, 100, 20)
