from __future__ import annotations

from pathlib import Path

import pandas as pd


KEY_COLS = ["game", "size", "win_length", "x_team", "o_team", "x_tier", "o_tier", "outcome", "plies"]
COUNT_COLS = [
    "game", "seed", "size", "win_length", "plies", "opening",
    "x_moves", "o_moves", "x_nodes", "o_nodes", "x_ms", "o_ms",
]
OUTCOMES = ("X", "O", "D")


def load_games(csv_path: Path) -> pd.DataFrame:
    """
    Read a per-game tournament CSV. Adds x_score (1 / 0.5 / 0 for the first
    mover) and a "x_tier v o_tier" matchup label.
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype={"outcome": str})
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in KEY_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Not a games CSV, missing {missing}. Columns: {list(df.columns)}")

    for c in COUNT_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce").fillna(0).astype(int)

    df["outcome"] = df["outcome"].str.strip().str.upper()
    bad = df.loc[~df["outcome"].isin(OUTCOMES), "outcome"]
    if not bad.empty:
        raise ValueError(f"Unknown outcomes: {sorted(bad.unique())}")

    df["x_score"] = df["outcome"].map({"X": 1.0, "D": 0.5, "O": 0.0})
    df["matchup"] = df["x_tier"] + " v " + df["o_tier"]
    return df.sort_values("game").reset_index(drop=True)


def latest_games_csv(results_dir: Path, pattern: str = "tournament_games_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern), key=lambda p: (p.stat().st_mtime, p.name))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")
    return files[-1]
