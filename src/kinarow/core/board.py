# src/kinarow/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from kinarow.config import DEFAULT_SIZE
from kinarow.types import Cell, Player


@dataclass(slots=True)
class Board:
    size: int = DEFAULT_SIZE
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * (self.size * self.size)
        elif len(self.cells) != self.size * self.size:
            raise ValueError(f"Expected {self.size * self.size} cells, got {len(self.cells)}.")

    def copy(self) -> "Board":
        return Board(self.size, self.cells[:])

    def __len__(self) -> int:
        return len(self.cells)

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.cells)

    def get(self, index: int) -> Cell:
        if not self.in_range(index):
            raise IndexError(f"Cell {index} is off the board.")
        return self.cells[index]

    def empty_cells(self) -> List[int]:
        return [i for i, v in enumerate(self.cells) if v is None]

    def occupied_count(self) -> int:
        return sum(1 for v in self.cells if v is not None)

    def is_full(self) -> bool:
        return all(v is not None for v in self.cells)

    def apply(self, index: int, player: Player) -> bool:
        """Place a stone. Returns False (board untouched) if the index is off-board or taken."""
        if not self.in_range(index) or self.cells[index] is not None:
            return False
        self.cells[index] = player
        return True

    def revert(self, index: int) -> bool:
        """
        Empty a previously occupied cell.
        Used by session undo and by search backtracking.
        """
        if not self.in_range(index) or self.cells[index] is None:
            return False
        self.cells[index] = None
        return True
