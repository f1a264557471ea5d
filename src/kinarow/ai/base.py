from __future__ import annotations
from typing import Protocol, Sequence

from kinarow.core.board import Board
from kinarow.types import Line, Player


class Agent(Protocol):
    name: str
    last_info: dict

    def choose_move(self, board: Board, lines: Sequence[Line], player: Player) -> int:
        ...
