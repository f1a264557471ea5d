from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import time
from typing import Optional, Sequence

from kinarow.config import MINIMAX_DEPTH_4X4, MINIMAX_DEPTH_DEFAULT, WIN_SCORE
from kinarow.core.board import Board
from kinarow.core.rules import check_winner
from kinarow.core.scoring import evaluate
from kinarow.errors import NoLegalMoveError
from kinarow.types import Line, Player, other


def depth_limit(board: Board) -> int:
    """Full search on 3x3, a fixed ply cutoff on bigger boards."""
    if board.size == 3:
        return len(board.empty_cells())
    if board.size == 4:
        return MINIMAX_DEPTH_4X4
    return MINIMAX_DEPTH_DEFAULT


@dataclass(slots=True)
class MinimaxAgent:
    """
    Alpha-beta minimax over every empty cell.

    Trial moves are applied to and reverted from the board passed in, so the
    caller must hand over a board nothing else is looking at. Won positions
    score WIN_SCORE - depth (or its negation) so faster wins and slower losses
    are preferred. Root ties go to the lowest index.
    """
    name: str = "Minimax AI"
    depth: Optional[int] = None  # None = adaptive

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def choose_move(self, board: Board, lines: Sequence[Line], player: Player) -> int:
        moves = board.empty_cells()
        if not moves:
            raise NoLegalMoveError("No empty cells.")

        max_depth = self.depth if self.depth is not None else depth_limit(board)

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        best_move = moves[0]
        best_score = -inf
        alpha = -inf
        beta = inf

        for m in moves:
            board.apply(m, player)
            score = self._minimax(board, lines, 1, False, alpha, beta, player, max_depth)
            board.revert(m)

            if score > best_score:
                best_score = score
                best_move = m
            alpha = max(alpha, best_score)

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": max_depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else best_score,
            "move": best_move,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return best_move

    def _minimax(
        self,
        board: Board,
        lines: Sequence[Line],
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        me: Player,
        max_depth: int,
    ) -> float:
        self._nodes += 1

        w = check_winner(board, lines)
        if w is not None:
            return WIN_SCORE - depth if w == me else -WIN_SCORE + depth

        moves = board.empty_cells()
        if not moves or depth >= max_depth:
            return evaluate(board, lines, me)

        to_play = me if maximizing else other(me)

        if maximizing:
            v = -inf
            for m in moves:
                board.apply(m, to_play)
                v = max(v, self._minimax(board, lines, depth + 1, False, alpha, beta, me, max_depth))
                board.revert(m)
                alpha = max(alpha, v)
                if beta <= alpha:
                    self._cutoffs += 1
                    break
            return v

        v = inf
        for m in moves:
            board.apply(m, to_play)
            v = min(v, self._minimax(board, lines, depth + 1, True, alpha, beta, me, max_depth))
            board.revert(m)
            beta = min(beta, v)
            if beta <= alpha:
                self._cutoffs += 1
                break
        return v
