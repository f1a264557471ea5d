"""Tests for win and draw detection."""

import random

from kinarow.core.board import Board
from kinarow.core.lines import generate_lines
from kinarow.core.rules import check_winner, find_win, is_draw

LINES_3 = generate_lines(3, 3)
LINES_4 = generate_lines(4, 4)


def board_from(s):
    """'XO.X.....' -> Board"""
    n = int(len(s) ** 0.5)
    return Board(n, [None if ch == "." else ch for ch in s])


class TestFindWin:

    def test_empty_board(self):
        assert find_win(Board(), LINES_3) is None

    def test_row(self):
        win = find_win(board_from("XXXOO...."), LINES_3)
        assert win.player == "X"
        assert win.line == (0, 1, 2)

    def test_ascending_diagonal(self):
        win = find_win(board_from("XXO.OXO.."), LINES_3)
        assert win.player == "O"
        assert win.line == (6, 4, 2)

    def test_row_reported_before_column(self):
        # X completes row 0 and column 0 with the same stone
        board = board_from("XXXX..X..")
        assert find_win(board, LINES_3).line == (0, 1, 2)

    def test_column_reported_before_diagonal(self):
        board = board_from("X..XX.X.X")
        assert find_win(board, LINES_3).line == (0, 3, 6)

    def test_descending_before_ascending(self):
        board = board_from("X.X.X.X.X")
        assert find_win(board, LINES_3).line == (0, 4, 8)

    def test_four_by_four(self):
        board = Board(4)
        for i in (3, 6, 9, 12):
            board.apply(i, "O")
        assert find_win(board, LINES_4) == ("O", (12, 9, 6, 3))

    def test_three_stones_do_not_win_on_four_by_four(self):
        board = Board(4)
        for i in (0, 1, 2):
            board.apply(i, "X")
        assert check_winner(board, LINES_4) is None

    def test_no_lines_never_wins(self):
        assert find_win(board_from("XXXXXXXXX"), ()) is None

    def test_matches_brute_force(self):
        """A win is reported iff some line is uniformly occupied, and it is the first such line."""
        rng = random.Random(7)
        for _ in range(300):
            cells = [rng.choice([None, "X", "O"]) for _ in range(16)]
            board = Board(4, cells)
            full = [line for line in LINES_4 if cells[line[0]] and all(cells[i] == cells[line[0]] for i in line)]
            win = find_win(board, LINES_4)
            if full:
                assert win.line == full[0]
                assert win.player == cells[full[0][0]]
            else:
                assert win is None


class TestDraw:

    def test_full_board_without_line(self):
        assert is_draw(board_from("XOXXOOOXX"), LINES_3)

    def test_full_board_with_line_is_not_draw(self):
        assert not is_draw(board_from("XXXOOXXOO"), LINES_3)

    def test_open_board_is_not_draw(self):
        assert not is_draw(board_from("XOXXOOOX."), LINES_3)
