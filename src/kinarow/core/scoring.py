from __future__ import annotations
from typing import Sequence

from kinarow.config import LINE_WEIGHT_BASE
from kinarow.core.board import Board
from kinarow.types import Line, Player, other


def _score_line(cells: list, line: Line, player: Player, opp: Player) -> int:
    p_count = 0
    o_count = 0
    for i in line:
        v = cells[i]
        if v == player:
            p_count += 1
        elif v == opp:
            o_count += 1

    # mixed line: both players present => can never be completed
    if p_count > 0 and o_count > 0:
        return 0

    score = 0
    if p_count > 0:
        score += LINE_WEIGHT_BASE ** p_count
    if o_count > 0:
        score -= LINE_WEIGHT_BASE ** o_count
    return score


def evaluate(board: Board, lines: Sequence[Line], player: Player) -> int:
    """
    Static score of a position from `player`'s side.

    Each open line adds 10**c for c own stones and subtracts 10**c for c opponent
    stones. Lines holding both players count for nothing.
    """
    opp = other(player)
    cells = board.cells
    return sum(_score_line(cells, line, player, opp) for line in lines)
