from __future__ import annotations

from dataclasses import dataclass, field
import random
import time
from typing import Optional, Sequence

from kinarow.core.board import Board
from kinarow.core.rules import check_winner
from kinarow.errors import NoLegalMoveError
from kinarow.types import Line, Player, other


def _completing_move(board: Board, lines: Sequence[Line], moves: list[int], who: Player) -> Optional[int]:
    """First empty cell (ascending) that gives `who` a finished line."""
    for m in moves:
        board.apply(m, who)
        wins = check_winner(board, lines) == who
        board.revert(m)
        if wins:
            return m
    return None


@dataclass(slots=True)
class GreedyAgent:
    """
    One-ply lookahead, checked strictly in this order:
      1) play a move that wins now
      2) block a move that would win for the opponent
      3) take the centre cell
      4) anything else, uniformly at random
    """
    name: str = "Greedy (1-ply)"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board, lines: Sequence[Line], player: Player) -> int:
        moves = board.empty_cells()
        if not moves:
            raise NoLegalMoveError("No empty cells.")

        start = time.perf_counter()
        reason = "win"

        choice = _completing_move(board, lines, moves, player)
        if choice is None:
            reason = "block"
            choice = _completing_move(board, lines, moves, other(player))
        if choice is None:
            n = board.size
            center = (n // 2) * n + (n // 2)
            if board.get(center) is None:
                reason = "center"
                choice = center
        if choice is None:
            reason = "random"
            choice = self.rng.choice(moves)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 1,
            "nodes": 2 * len(moves),
            "cutoffs": 0,
            "eval": None,
            "reason": reason,
            "move": choice,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return choice
