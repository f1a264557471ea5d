# src/kinarow/types.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Line = Tuple[int, ...]  # cell indices, row-major
Tier = Literal["random", "greedy", "minimax"]

TIERS: Tuple[Tier, ...] = ("random", "greedy", "minimax")


@dataclass(frozen=True, slots=True)
class Move:
    index: int
    player: Player


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"
