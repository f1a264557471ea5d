from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def _board_tag(df: pd.DataFrame) -> str:
    boards = sorted({(int(n), int(k)) for n, k in zip(df["size"], df["win_length"])})
    return "_".join(f"{n}x{n}k{k}" for n, k in boards) or "empty"


def plot_score_matrix(matrix: pd.DataFrame, outdir: Path, tag: str, *, show: bool) -> Path | None:
    """Heatmap of the mean X score, X tier down the side, O tier across."""
    if matrix.empty:
        return None

    fig, ax = plt.subplots(figsize=(5, 4))
    im = ax.imshow(matrix.to_numpy(dtype=float), vmin=0.0, vmax=1.0, cmap="RdBu_r")
    ax.set_xticks(range(len(matrix.columns)), labels=[str(c) for c in matrix.columns])
    ax.set_yticks(range(len(matrix.index)), labels=[str(i) for i in matrix.index])
    ax.set_xlabel("O tier")
    ax.set_ylabel("X tier (moves first)")
    for i in range(len(matrix.index)):
        for j in range(len(matrix.columns)):
            v = matrix.iat[i, j]
            if pd.notna(v):
                ax.text(j, i, f"{v:.2f}", ha="center", va="center")
    fig.colorbar(im, ax=ax, label="X score")
    ax.set_title(f"X score by matchup ({tag})")

    return _finish(fig, outdir, f"score_matrix_{tag}.png", show=show)


def plot_seat_outcomes(outcomes: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked X-win/draw/O-win share per matchup (input from metrics.seat_outcomes)."""
    cols = ["x_win_rate", "draw_rate", "o_win_rate"]
    if outcomes.empty or any(col not in outcomes.columns for col in cols):
        return None

    labels = (
        outcomes["x_tier"] + " v " + outcomes["o_tier"]
        + " (" + outcomes["size"].astype(str) + "/" + outcomes["win_length"].astype(str) + ")"
    )
    fig = plt.figure(figsize=(max(6, 0.9 * len(labels)), 5))
    bottom = pd.Series(0.0, index=outcomes.index)
    for col, label in zip(cols, ("X wins", "draw", "O wins")):
        plt.bar(labels, outcomes[col], bottom=bottom, label=label)
        bottom = bottom + outcomes[col]
    plt.title("Outcomes by seat")
    plt.ylabel("share of games")
    plt.ylim(0, 1)
    plt.xticks(rotation=30, ha="right")
    plt.legend()

    return _finish(fig, outdir, f"seat_outcomes_{_board_tag(outcomes)}.png", show=show)


def plot_search_cost(cost: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Nodes per move for each tier, one bar group per board (log scale)."""
    if cost.empty or "nodes_per_move" not in cost.columns:
        return None

    cost = cost.assign(board=cost["size"].astype(str) + "x" + cost["size"].astype(str) + " k=" + cost["win_length"].astype(str))
    table = cost.pivot_table(index="board", columns="tier", values="nodes_per_move", aggfunc="sum")
    if not (table > 0).any().any():
        return None

    ax = table.plot(kind="bar", figsize=(7, 5), rot=0)
    ax.set_yscale("log")
    ax.set_ylabel("nodes per move")
    ax.set_title("Search cost")

    return _finish(ax.get_figure(), outdir, f"search_cost_{_board_tag(cost)}.png", show=show)
