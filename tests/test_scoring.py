"""Tests for the static evaluator."""

from kinarow.core.board import Board
from kinarow.core.lines import generate_lines
from kinarow.core.scoring import evaluate

LINES_3 = generate_lines(3, 3)


def board_with(n=3, **stones):
    board = Board(n)
    for player, idxs in stones.items():
        for i in idxs:
            board.apply(i, player)
    return board


class TestEvaluate:

    def test_empty_board_is_zero(self):
        assert evaluate(Board(), LINES_3, "X") == 0
        assert evaluate(Board(5), generate_lines(5, 4), "O") == 0

    def test_center_stone(self):
        board = board_with(X=[4])
        # four open lines through the centre, one stone each
        assert evaluate(board, LINES_3, "X") == 40
        assert evaluate(board, LINES_3, "O") == -40

    def test_two_in_a_row_is_weighted_exponentially(self):
        board = board_with(X=[0, 1])
        # row 0 holds two stones (100); columns 0 and 1 and the main diagonal hold one (10 each)
        assert evaluate(board, LINES_3, "X") == 130

    def test_mixed_lines_count_zero(self):
        board = board_with(X=[4], O=[0])
        # X: row 1, column 1, anti-diagonal; O: row 0, column 0; main diagonal is mixed
        assert evaluate(board, LINES_3, "X") == 10
        assert evaluate(board, LINES_3, "O") == -10

    def test_blocked_row(self):
        board = board_with(X=[0, 2], O=[1])
        assert evaluate(board, LINES_3, "X") == 30

    def test_drawn_board_is_zero(self):
        board = board_with(X=[0, 2, 3, 7, 8], O=[1, 4, 5, 6])
        assert evaluate(board, LINES_3, "X") == 0
