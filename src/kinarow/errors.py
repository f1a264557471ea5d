# src/kinarow/errors.py

from __future__ import annotations


class KinarowError(Exception):
    """Base class for engine errors."""


class ConfigurationError(KinarowError, ValueError):
    """Board size or run length cannot describe a game."""


class IllegalMoveError(KinarowError, ValueError):
    """Occupied cell, index out of range, wrong turn, or game already over."""


class NoLegalMoveError(KinarowError, ValueError):
    """Search was asked for a move on a full board."""
