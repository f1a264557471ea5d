from __future__ import annotations
from dataclasses import dataclass, field
import random
import time
from typing import Sequence

from kinarow.core.board import Board
from kinarow.errors import NoLegalMoveError
from kinarow.types import Line, Player


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    last_info: dict = field(default_factory=dict)

    def choose_move(self, board: Board, lines: Sequence[Line], player: Player) -> int:
        start = time.perf_counter()
        moves = board.empty_cells()
        if not moves:
            raise NoLegalMoveError("No empty cells.")
        choice = self.rng.choice(moves)

        self.last_info = {
            "depth": 0,
            "nodes": 0,
            "cutoffs": 0,
            "eval": None,
            "move": choice,
            "time_ms": max(1, int((time.perf_counter() - start) * 1000)),
        }
        return choice
