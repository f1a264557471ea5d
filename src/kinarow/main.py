from __future__ import annotations

import argparse

from kinarow.config import (
    AI_THINK_DELAY_SEC,
    DEFAULT_SIZE,
    MAX_SIZE,
    MIN_SIZE,
    TIMEOUT_ACTION,
    TURN_TIMEOUT_SEC,
    win_length_for,
)
from kinarow.game.controller import run_game
from kinarow.game.session import GameSession
from kinarow.types import TIERS


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="kinarow", description="N x N tic-tac-toe in the terminal.")
    ap.add_argument("--size", type=int, default=DEFAULT_SIZE, choices=range(MIN_SIZE, MAX_SIZE + 1),
                    metavar=f"{{{MIN_SIZE}..{MAX_SIZE}}}", help="Board side length")
    ap.add_argument("--win-length", type=int, default=None,
                    help="Stones in a row needed to win (default: 3 on 3x3, else 4)")
    ap.add_argument("--mode", choices=["human", "ai"], default="ai", help="Opponent type")
    ap.add_argument("--tier", choices=list(TIERS), default="minimax", help="Computer strength")
    ap.add_argument("--computer", choices=["X", "O"], default="O", help="Symbol the computer plays")
    ap.add_argument("--start", choices=["X", "O"], default="X", help="Player who moves first")
    ap.add_argument("--swap-start", action="store_true", help="Alternate the first player on rematch")
    ap.add_argument("--timeout", type=float, default=TURN_TIMEOUT_SEC,
                    help="Seconds per human turn (0 = untimed)")
    ap.add_argument("--timeout-action", choices=["pass", "random"], default=TIMEOUT_ACTION,
                    help="What happens when a turn times out")
    ap.add_argument("--think-delay", type=float, default=AI_THINK_DELAY_SEC,
                    help="Pause before the computer moves")
    ap.add_argument("--tournament", action="store_true",
                    help="Run a computer-vs-computer tournament instead of playing")
    ap.add_argument("--games", type=int, default=10, help="Games per pairing (tournament)")
    ap.add_argument("--seed", type=int, default=1234, help="Random seed (tournament)")
    ap.add_argument("--workers", type=int, default=None, help="Worker processes (tournament)")
    ap.add_argument("--export-csv", action="store_true", help="Write one CSV row per game (tournament)")
    return ap


def resolve_win_length(ap: argparse.ArgumentParser, size: int, win_length: int | None) -> int:
    if win_length is None:
        return win_length_for(size)
    if not 1 <= win_length <= size:
        ap.error(f"--win-length must be between 1 and the board size ({size}), got {win_length}")
    return win_length


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    win_length = resolve_win_length(ap, args.size, args.win_length)

    if args.tournament:
        from kinarow.scripts.tournament import main as tournament_main

        return tournament_main(
            size=args.size,
            win_length=win_length,
            games_per_pair=args.games,
            seed=args.seed,
            max_workers=args.workers,
            export_csv=args.export_csv,
        )

    session = GameSession(
        size=args.size,
        win_length=win_length,
        start_player=args.start,
        computer_player=args.computer if args.mode == "ai" else None,
        tier=args.tier,
    )
    run_game(
        session,
        timeout_sec=args.timeout,
        timeout_action=args.timeout_action,
        swap_start=args.swap_start,
        think_delay=args.think_delay,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
