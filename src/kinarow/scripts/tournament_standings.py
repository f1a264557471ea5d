from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from kinarow.types import Player, Tier

from .tournament_records import GameRecord


@dataclass
class SeatTally:
    wins: int = 0
    draws: int = 0
    losses: int = 0

    @property
    def games(self) -> int:
        return self.wins + self.draws + self.losses

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws

    def add(self, score: float) -> None:
        if score == 1.0:
            self.wins += 1
        elif score == 0.5:
            self.draws += 1
        else:
            self.losses += 1


@dataclass
class Standing:
    """A team's results split by the seat it played."""
    name: str
    tier: Tier
    as_x: SeatTally
    as_o: SeatTally
    moves: int = 0
    nodes: int = 0
    time_ms: int = 0

    @property
    def games(self) -> int:
        return self.as_x.games + self.as_o.games

    @property
    def points(self) -> float:
        return self.as_x.points + self.as_o.points

    @property
    def wins(self) -> int:
        return self.as_x.wins + self.as_o.wins

    @property
    def draws(self) -> int:
        return self.as_x.draws + self.as_o.draws

    @property
    def losses(self) -> int:
        return self.as_x.losses + self.as_o.losses

    def seat(self, player: Player) -> SeatTally:
        return self.as_x if player == "X" else self.as_o

    def nodes_per_move(self) -> float:
        return self.nodes / self.moves if self.moves else 0.0

    def ms_per_move(self) -> float:
        return self.time_ms / self.moves if self.moves else 0.0


def score_rate(tally: SeatTally) -> float:
    return tally.points / tally.games if tally.games else 0.0


def standings(records: Iterable[GameRecord]) -> Dict[str, Standing]:
    table: Dict[str, Standing] = {}

    def entry(name: str, tier: Tier) -> Standing:
        if name not in table:
            table[name] = Standing(name, tier, SeatTally(), SeatTally())
        return table[name]

    for r in records:
        x = entry(r.x_team, r.x_tier)
        o = entry(r.o_team, r.o_tier)
        x.as_x.add(r.score_for("X"))
        o.as_o.add(r.score_for("O"))

        x.moves += r.x_moves
        x.nodes += r.x_nodes
        x.time_ms += r.x_ms
        o.moves += r.o_moves
        o.nodes += r.o_nodes
        o.time_ms += r.o_ms

    return table


def ranked(table: Dict[str, Standing]) -> List[Standing]:
    # Points first, then the harder seat (O), then speed
    return sorted(table.values(), key=lambda s: (-s.points, -s.as_o.points, s.ms_per_move(), s.name))


def first_mover_score(records: Iterable[GameRecord]) -> float:
    """Mean score of the X seat over all games; 0.5 means no first-move edge."""
    scores = [r.score_for("X") for r in records]
    return sum(scores) / len(scores) if scores else 0.0
