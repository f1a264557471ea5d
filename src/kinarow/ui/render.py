from __future__ import annotations
from typing import Iterable, Optional, Sequence, Set

from kinarow.config import CLEAR_SCREEN
from kinarow.types import Cell
from kinarow.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE


def _piece(cell: Cell, idx: int, width: int) -> str:
    if cell is None:
        return c(str(idx + 1).rjust(width), FG_GRAY)
    if cell == "X":
        return c("X".rjust(width), FG_RED)
    return c("O".rjust(width), FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(cells: Sequence[Cell], size: int, highlight: Optional[Iterable[int]] = None) -> list[str]:
    """Rows of the board as text; empty cells show their 1-based number."""
    hl: Set[int] = set(highlight) if highlight else set()
    width = len(str(size * size))

    out = []
    for r in range(size):
        parts = []
        for col in range(size):
            idx = r * size + col
            p = _piece(cells[idx], idx, width)
            if idx in hl:
                p = c(p, REVERSE)
            parts.append(p)
        out.append(" " + " | ".join(parts))
        if r < size - 1:
            out.append(c(" " + "-+-".join("-" * width for _ in range(size)), DIM))
    return out


def render(
    cells: Sequence[Cell],
    size: int,
    status: str = "",
    highlight: Optional[Iterable[int]] = None,
    footer: str = "",
) -> None:
    clear_screen()

    print(c(f"{size}x{size} TIC-TAC-TOE", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for row in board_lines(cells, size, highlight):
        print(row)

    print()
    if footer:
        print(c(footer, DIM))
    print(c(f"Enter 1-{size * size} to play, u to undo, q to quit.", DIM))
