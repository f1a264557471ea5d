from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_games import latest_games_csv, load_games
from ..metrics.seats import (
    first_mover_edge,
    score_matrix,
    search_cost,
    seat_outcomes,
    select_board,
    team_standings,
)
from ..plots.chart import plot_score_matrix, plot_search_cost, plot_seat_outcomes


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kinarow_analysis",
        description="Analyze per-game k-in-a-row tournament CSVs.",
    )
    ap.add_argument("--csv", type=str, default=None, help="Path to a games CSV. If omitted, uses the newest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing tournament_games_*.csv")
    ap.add_argument("--pattern", type=str, default="tournament_games_*.csv", help="Glob pattern for selecting the newest file")

    ap.add_argument("--size", type=int, default=None, help="Only games on this board size")
    ap.add_argument("--win-length", type=int, default=None, help="Only games with this win length")

    ap.add_argument("--outdir", type=str, default="data/figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    return ap


def _fmt(v: float) -> str:
    return f"{v:.3f}"


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = latest_games_csv(Path(args.results_dir), pattern=args.pattern)

    df = select_board(load_games(csv_path), size=args.size, win_length=args.win_length)

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(df):,}")
    if df.empty:
        print("No games match the board filter.")
        return 1

    print("\n=== Standings ===")
    print(team_standings(df).to_string(index=False, float_format=_fmt))

    print("\n=== Outcomes by seat ===")
    outcomes = seat_outcomes(df)
    print(outcomes.to_string(index=False, float_format=_fmt))

    print("\n=== First-move edge ===")
    print(first_mover_edge(df).to_string(index=False, float_format=_fmt))

    print("\n=== Search cost ===")
    cost = search_cost(df)
    print(cost.to_string(index=False, float_format=lambda v: f"{v:.1f}"))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    for (n, k), board in df.groupby(["size", "win_length"]):
        plot_score_matrix(score_matrix(board), outdir, f"{n}x{n}k{k}", show=args.show)
    plot_seat_outcomes(outcomes, outdir, show=args.show)
    plot_search_cost(cost, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
