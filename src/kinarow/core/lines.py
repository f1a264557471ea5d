# src/kinarow/core/lines.py

from __future__ import annotations
from functools import lru_cache
from typing import List, Tuple

from kinarow.errors import ConfigurationError
from kinarow.types import Line


@lru_cache(maxsize=None)
def generate_lines(n: int, win_length: int) -> Tuple[Line, ...]:
    """
    Every candidate winning run on an n x n board, as row-major index tuples.

    Order is fixed: horizontal, vertical, diagonal down-right, diagonal up-right,
    each in increasing start index. Win detection relies on this order.
    A run longer than the board yields no lines at all.
    """
    if n <= 0 or win_length <= 0:
        raise ConfigurationError(f"Invalid board: size={n}, win_length={win_length}.")

    k = win_length
    lines: List[Line] = []
    if k > n:
        return ()

    # Horizontal
    for r in range(n):
        for c in range(n - k + 1):
            lines.append(tuple(r * n + (c + i) for i in range(k)))

    # Vertical
    for r in range(n - k + 1):
        for c in range(n):
            lines.append(tuple((r + i) * n + c for i in range(k)))

    # Diagonal down-right
    for r in range(n - k + 1):
        for c in range(n - k + 1):
            lines.append(tuple((r + i) * n + (c + i) for i in range(k)))

    # Diagonal up-right
    for r in range(k - 1, n):
        for c in range(n - k + 1):
            lines.append(tuple((r - i) * n + (c + i) for i in range(k)))

    return tuple(lines)
