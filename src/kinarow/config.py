# src/kinarow/config.py

from __future__ import annotations

DEFAULT_SIZE = 3
MIN_SIZE = 3
MAX_SIZE = 7

# Minimax depth cutoffs. A 3x3 board is always searched to the end.
MINIMAX_DEPTH_4X4 = 5
MINIMAX_DEPTH_DEFAULT = 4

# Terminal score for a won position (adjusted by ply depth).
WIN_SCORE = 1000

# Evaluator: a line holding c stones of one player is worth LINE_WEIGHT_BASE ** c
LINE_WEIGHT_BASE = 10

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINK_DELAY_SEC = 0.4

# Turn timer (0 disables)
TURN_TIMEOUT_SEC = 0
TIMEOUT_ACTION = "pass"  # "pass" | "random"


def win_length_for(size: int) -> int:
    """Run length used for a board side: 3 on 3x3, 4 on anything larger."""
    return 3 if size <= 3 else 4
