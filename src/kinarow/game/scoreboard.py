from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

from kinarow.game.events import DrawEvent, GameEvent, WinEvent
from kinarow.game.session import GameSession


@dataclass
class Scoreboard:
    """In-memory wins per player and draws ("D"), fed by session events."""
    counts: Dict[str, int] = field(default_factory=lambda: {"X": 0, "O": 0, "D": 0})

    def attach(self, session: GameSession) -> "Scoreboard":
        session.subscribe(self.on_event)
        return self

    def on_event(self, event: GameEvent) -> None:
        if isinstance(event, WinEvent):
            self.counts[event.winner] += 1
        elif isinstance(event, DrawEvent):
            self.counts["D"] += 1

    def clear(self) -> None:
        for k in self.counts:
            self.counts[k] = 0

    def summary(self) -> str:
        return f"X: {self.counts['X']} • O: {self.counts['O']} • Draws: {self.counts['D']}"
