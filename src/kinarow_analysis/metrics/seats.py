from __future__ import annotations

import pandas as pd


def select_board(df: pd.DataFrame, size: int | None = None, win_length: int | None = None) -> pd.DataFrame:
    out = df
    if size is not None:
        out = out[out["size"] == size]
    if win_length is not None:
        out = out[out["win_length"] == win_length]
    return out.copy()


def _share(letter: str):
    def share(s: pd.Series) -> float:
        return float((s == letter).mean())
    return share


def seat_outcomes(df: pd.DataFrame) -> pd.DataFrame:
    """Outcome shares for each (board, X tier, O tier) matchup."""
    return (
        df.groupby(["size", "win_length", "x_tier", "o_tier"])
        .agg(
            games=("game", "size"),
            x_win_rate=("outcome", _share("X")),
            draw_rate=("outcome", _share("D")),
            o_win_rate=("outcome", _share("O")),
            x_score=("x_score", "mean"),
            avg_plies=("plies", "mean"),
        )
        .reset_index()
    )


def first_mover_edge(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean X score per board. Pairings alternate seats, so every tier sits on X
    as often as on O and the distance from 0.5 is the first-move edge.
    """
    out = (
        df.groupby(["size", "win_length"])
        .agg(games=("game", "size"), x_score=("x_score", "mean"), draw_rate=("outcome", _share("D")))
        .reset_index()
    )
    out["edge"] = out["x_score"] - 0.5
    return out


def by_seat(df: pd.DataFrame) -> pd.DataFrame:
    """One row per (game, seat): team, tier, score and search cost of that side."""
    parts = []
    for seat, score in (("X", df["x_score"]), ("O", 1.0 - df["x_score"])):
        p = seat.lower()
        parts.append(pd.DataFrame({
            "game": df["game"],
            "size": df["size"],
            "win_length": df["win_length"],
            "seat": seat,
            "team": df[f"{p}_team"],
            "tier": df[f"{p}_tier"],
            "score": score,
            "moves": df.get(f"{p}_moves", 0),
            "nodes": df.get(f"{p}_nodes", 0),
            "ms": df.get(f"{p}_ms", 0),
        }))
    return pd.concat(parts, ignore_index=True)


def team_standings(df: pd.DataFrame) -> pd.DataFrame:
    """Points per team, with the score rate on each seat shown apart."""
    seats = by_seat(df)
    total = seats.groupby("team").agg(tier=("tier", "first"), games=("game", "size"), points=("score", "sum"))
    rate = seats.pivot_table(index="team", columns="seat", values="score", aggfunc="mean")
    total["x_score_rate"] = rate.get("X")
    total["o_score_rate"] = rate.get("O")
    total["seat_gap"] = total["x_score_rate"] - total["o_score_rate"]
    out = total.sort_values(["points", "o_score_rate"], ascending=False).reset_index()
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def search_cost(df: pd.DataFrame) -> pd.DataFrame:
    """Nodes and milliseconds per move for each tier on each board."""
    seats = by_seat(df)
    g = seats.groupby(["size", "win_length", "tier"])[["moves", "nodes", "ms"]].sum()
    moves = g["moves"].where(g["moves"] > 0)
    g["nodes_per_move"] = (g["nodes"] / moves).fillna(0.0)
    g["ms_per_move"] = (g["ms"] / moves).fillna(0.0)
    return g.reset_index()


def score_matrix(df: pd.DataFrame) -> pd.DataFrame:
    """Mean X score with rows = X tier, columns = O tier."""
    if df.empty:
        return pd.DataFrame()
    return df.pivot_table(index="x_tier", columns="o_tier", values="x_score", aggfunc="mean")
