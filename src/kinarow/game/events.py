from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Union

from kinarow.types import Line, Move, Player


@dataclass(frozen=True, slots=True)
class WinEvent:
    move: Move
    winner: Player
    line: Line  # for highlighting


@dataclass(frozen=True, slots=True)
class DrawEvent:
    move: Move


@dataclass(frozen=True, slots=True)
class ContinueEvent:
    move: Move
    next_player: Player


GameEvent = Union[WinEvent, DrawEvent, ContinueEvent]
Listener = Callable[[GameEvent], None]
