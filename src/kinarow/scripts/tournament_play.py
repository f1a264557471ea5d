from __future__ import annotations

import random
from typing import Dict, List, Tuple

from kinarow.game.session import GameSession
from kinarow.types import Move, Tier

from .tournament_records import GameRecord, Team

GameStats = Dict[str, Dict[str, int]]


def play_headless(
    tier_x: Tier,
    tier_o: Tier,
    size: int,
    win_length: int,
    seed: int = 0,
    opening_plies: int = 1,
) -> Tuple[str, GameStats, Tuple[Move, ...]]:
    """
    Play one computer-vs-computer game on a private session.
    Returns ("X" | "O" | "D", per-side search stats, move history).
    """
    rng = random.Random(seed)
    session = GameSession(size=size, win_length=win_length, start_player="X", rng=rng)
    stats: GameStats = {
        "X": {"moves": 0, "time_ms": 0, "nodes": 0},
        "O": {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    # A few random opening plies so deterministic tiers do not replay one game
    for _ in range(opening_plies):
        if session.status.is_over:
            break
        session.submit_move(session.choose_move("random"), session.current_player)

    while not session.status.is_over:
        player = session.current_player
        tier = tier_x if player == "X" else tier_o
        move = session.choose_move(tier)

        info = session.last_info
        side = stats[player]
        side["moves"] += 1
        side["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side["nodes"] += int(info.get("nodes", 0))

        session.submit_move(move, player)

    status = session.status
    return (status.winner if status.kind == "won" else "D"), stats, session.history


def play_record(
    game: int,
    x: Team,
    o: Team,
    size: int,
    win_length: int,
    seed: int,
    opening_plies: int = 1,
) -> GameRecord:
    outcome, stats, history = play_headless(x.tier, o.tier, size, win_length, seed=seed, opening_plies=opening_plies)
    return GameRecord(
        game=game,
        seed=seed,
        size=size,
        win_length=win_length,
        x_team=x.name,
        o_team=o.name,
        x_tier=x.tier,
        o_tier=o.tier,
        outcome=outcome,  # type: ignore[arg-type]
        plies=len(history),
        opening=history[0].index if opening_plies and history else -1,
        x_moves=stats["X"]["moves"],
        o_moves=stats["O"]["moves"],
        x_nodes=stats["X"]["nodes"],
        o_nodes=stats["O"]["nodes"],
        x_ms=stats["X"]["time_ms"],
        o_ms=stats["O"]["time_ms"],
    )


Job = Tuple[Team, Team, int, int]  # (a, b, first game number, base seed)


def run_pairing(args: Tuple[Job, int, int, int, int]) -> List[GameRecord]:
    """All games of one pairing; A takes X in even games and O in odd ones."""
    (job, games, size, win_length, opening_plies) = args
    a, b, first_game, base_seed = job
    out = []
    for g in range(games):
        x, o = (a, b) if g % 2 == 0 else (b, a)
        out.append(play_record(first_game + g, x, o, size, win_length, base_seed + g, opening_plies))
    return out
