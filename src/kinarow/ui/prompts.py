from __future__ import annotations
from typing import Literal, Optional, Union

Command = Literal["undo", "quit"]


def parse_move(raw: str, cells: int) -> Union[int, Command]:
    """1-based cell number -> 0-based index, or a command word."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return "quit"
    if s in {"u", "undo"}:
        return "undo"
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a number, u or q.")
    idx = int(s) - 1
    if idx < 0 or idx >= cells:
        raise ValueError(f"Cell must be between 1 and {cells}.")
    return idx


def ask_yes_no(question: str, default: bool = True) -> bool:
    raw = input(f"{question} [{'Y/n' if default else 'y/N'}]: ").strip().lower()
    if not raw:
        return default
    return raw in {"y", "yes"}


def timed_input(prompt: str, timeout_sec: float) -> Optional[str]:
    """
    input() with a deadline. Returns None if nothing was typed in time.
    Only POSIX terminals support the deadline; elsewhere it waits forever.
    """
    if timeout_sec <= 0:
        return input(prompt)

    import select
    import sys

    print(prompt, end="", flush=True)
    try:
        ready, _, _ = select.select([sys.stdin], [], [], timeout_sec)
    except (OSError, ValueError):
        return sys.stdin.readline().rstrip("\n")
    if not ready:
        print()
        return None
    return sys.stdin.readline().rstrip("\n")
