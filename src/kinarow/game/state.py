from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from kinarow.types import Line, Player

StatusKind = Literal["in_progress", "won", "drawn"]


@dataclass(frozen=True, slots=True)
class GameStatus:
    kind: StatusKind = "in_progress"
    winner: Optional[Player] = None
    line: Optional[Line] = None

    @property
    def is_over(self) -> bool:
        return self.kind != "in_progress"

    def describe(self) -> str:
        if self.kind == "won":
            return f"Player {self.winner} wins!"
        if self.kind == "drawn":
            return "Draw game."
        return "In progress."


IN_PROGRESS = GameStatus()
DRAWN = GameStatus(kind="drawn")


def won(player: Player, line: Line) -> GameStatus:
    return GameStatus(kind="won", winner=player, line=line)
