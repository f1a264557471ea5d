"""Tests for Board."""

import pytest

from kinarow.core.board import Board


class TestBoard:

    def test_initial_state(self):
        board = Board(4)
        assert len(board) == 16
        assert board.empty_cells() == list(range(16))
        assert board.occupied_count() == 0
        assert not board.is_full()

    def test_apply(self):
        board = Board()
        assert board.apply(4, "X")
        assert board.get(4) == "X"
        assert board.occupied_count() == 1

        # Cannot place on occupied cell
        assert not board.apply(4, "O")
        assert board.get(4) == "X"

    @pytest.mark.parametrize("idx", [-1, 9, 100])
    def test_apply_out_of_range(self, idx):
        board = Board()
        assert not board.apply(idx, "X")
        assert board.cells == [None] * 9

    @pytest.mark.parametrize("idx", [-1, -9, 9])
    def test_get_out_of_range(self, idx):
        board = Board()
        board.apply(8, "X")
        with pytest.raises(IndexError):
            board.get(idx)

    def test_revert(self):
        board = Board()
        board.apply(0, "O")
        assert board.revert(0)
        assert board.get(0) is None
        # Nothing left to revert
        assert not board.revert(0)
        assert not board.revert(42)

    def test_full(self):
        board = Board()
        for i in range(9):
            board.apply(i, "X" if i % 2 == 0 else "O")
        assert board.is_full()
        assert board.empty_cells() == []

    def test_copy_is_independent(self):
        board = Board()
        board.apply(1, "X")
        dup = board.copy()
        dup.apply(2, "O")
        assert board.get(2) is None
        assert dup.get(1) == "X"

    def test_wrong_cell_count(self):
        with pytest.raises(ValueError):
            Board(3, [None] * 8)
