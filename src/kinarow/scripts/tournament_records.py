from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Literal

from kinarow.types import Player, Tier

Outcome = Literal["X", "O", "D"]


@dataclass(frozen=True)
class Team:
    name: str
    tier: Tier


@dataclass(frozen=True)
class GameRecord:
    """One finished self-play game. X always moves first."""
    game: int
    seed: int
    size: int
    win_length: int
    x_team: str
    o_team: str
    x_tier: Tier
    o_tier: Tier
    outcome: Outcome
    plies: int
    opening: int  # cell of the random first ply, -1 if none
    x_moves: int = 0
    o_moves: int = 0
    x_nodes: int = 0
    o_nodes: int = 0
    x_ms: int = 0
    o_ms: int = 0

    def seat_of(self, team: str) -> Player:
        if team == self.x_team:
            return "X"
        if team == self.o_team:
            return "O"
        raise KeyError(f"{team} did not play game {self.game}")

    def score_for(self, seat: Player) -> float:
        if self.outcome == "D":
            return 0.5
        return 1.0 if self.outcome == seat else 0.0

    def as_row(self) -> dict:
        return asdict(self)


COLUMNS = [f.name for f in fields(GameRecord)]
