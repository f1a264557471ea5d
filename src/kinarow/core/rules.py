from __future__ import annotations
from typing import NamedTuple, Optional, Sequence

from kinarow.core.board import Board
from kinarow.types import Line, Player


class Win(NamedTuple):
    player: Player
    line: Line


def find_win(board: Board, lines: Sequence[Line]) -> Optional[Win]:
    """First fully occupied single-player line in enumeration order, if any."""
    g = board.cells
    for line in lines:
        p = g[line[0]]
        if p is None:
            continue
        if all(g[i] == p for i in line):
            return Win(p, line)
    return None


def check_winner(board: Board, lines: Sequence[Line]) -> Optional[Player]:
    res = find_win(board, lines)
    return res.player if res else None


def is_draw(board: Board, lines: Sequence[Line]) -> bool:
    return board.is_full() and check_winner(board, lines) is None
