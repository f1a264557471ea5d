from __future__ import annotations

import csv
import itertools
import os
import time
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from kinarow.config import DEFAULT_SIZE, win_length_for
from kinarow.types import TIERS
from kinarow.ui.colors import c, BOLD, DIM, FG_CYAN

from .tournament_play import Job, run_pairing
from .tournament_records import COLUMNS, GameRecord, Team
from .tournament_standings import first_mover_score, ranked, score_rate, standings


def default_roster() -> List[Team]:
    return [Team(name=t.capitalize(), tier=t) for t in TIERS]


def run_tournament(
    teams: Sequence[Team],
    size: int = DEFAULT_SIZE,
    win_length: Optional[int] = None,
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: Optional[int] = None,
    opening_plies: int = 1,
) -> List[GameRecord]:
    """
    Round robin over every pair of teams, one record per game, in game order.
    Each game runs on its own session, so pairings can be spread over worker
    processes.
    """
    win_length = win_length or win_length_for(size)

    jobs: List[Job] = []
    for i, (a, b) in enumerate(itertools.combinations(teams, 2)):
        jobs.append((a, b, i * games_per_pair, seed + 1000 * i))
    tasks = [(job, games_per_pair, size, win_length, opening_plies) for job in jobs]

    if max_workers is not None and max_workers > 1 and len(tasks) > 1:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            batches = list(ex.map(run_pairing, tasks))
    else:
        batches = [run_pairing(t) for t in tasks]

    return [r for batch in batches for r in batch]


def print_results(records: Sequence[GameRecord], title: str) -> None:
    print(c(c(title, BOLD), FG_CYAN))
    header = (
        f"{'rk':>3}  {'name':<10} {'pts':>6} {'as X W-D-L':>11} {'as O W-D-L':>11} "
        f"{'X%':>5} {'O%':>5} {'nodes/mv':>9} {'ms/mv':>7}"
    )
    print(c(header, DIM))
    print(c("─" * len(header), DIM))
    for rk, s in enumerate(ranked(standings(records)), start=1):
        x_wdl = f"{s.as_x.wins}-{s.as_x.draws}-{s.as_x.losses}"
        o_wdl = f"{s.as_o.wins}-{s.as_o.draws}-{s.as_o.losses}"
        print(
            f"{rk:>3}  {s.name:<10} {s.points:>6.1f} {x_wdl:>11} {o_wdl:>11} "
            f"{100 * score_rate(s.as_x):>5.0f} {100 * score_rate(s.as_o):>5.0f} "
            f"{s.nodes_per_move():>9.1f} {s.ms_per_move():>7.1f}"
        )
    print(c("─" * len(header), DIM))
    if records:
        print(c(f"X (first mover) scored {first_mover_score(records):.3f} per game", DIM))


def write_csv(records: Sequence[GameRecord], out_path: Path) -> Path:
    """One row per game; the only file the tournament writes, and only when asked."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=COLUMNS)
        w.writeheader()
        for r in records:
            w.writerow(r.as_row())
    return out_path


def main(
    size: int = DEFAULT_SIZE,
    win_length: Optional[int] = None,
    games_per_pair: int = 10,
    seed: int = 1234,
    max_workers: Optional[int] = None,
    export_csv: bool = False,
    results_dir: str = "data/results",
) -> int:
    roster = default_roster()
    win_length = win_length or win_length_for(size)
    workers = max_workers if max_workers is not None else min(len(roster), os.cpu_count() or 1)
    print(c(
        f"Tournament: {len(roster)} teams on {size}x{size} (k={win_length}), "
        f"{games_per_pair} games per pairing",
        BOLD,
    ))

    start = time.perf_counter()
    records = run_tournament(
        roster,
        size=size,
        win_length=win_length,
        games_per_pair=games_per_pair,
        seed=seed,
        max_workers=workers,
    )
    elapsed = time.perf_counter() - start

    print_results(records, "Final standings")

    if export_csv:
        ts = time.strftime("%Y%m%d_%H%M%S")
        path = write_csv(records, Path(results_dir) / f"tournament_games_{size}x{size}_k{win_length}_{ts}.csv")
        print(f"Wrote CSV: {path}")

    print(c(f"Total runtime: {elapsed:.3f}s", BOLD))
    return 0
