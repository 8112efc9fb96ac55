from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_column_frequency(freq: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    player_cols = [c for c in freq.columns if c.startswith("player_")]
    if not player_cols or freq[player_cols].to_numpy().sum() == 0:
        return None

    fig, ax = plt.subplots()
    freq[player_cols].plot.bar(ax=ax)
    ax.set_title("Chips per column")
    ax.set_xlabel("column")
    ax.set_ylabel("chips")
    ax.set_xticklabels([str(int(c) + 1) for c in freq.index], rotation=0)

    if show:
        plt.show()
        return None

    _ensure_dir(outdir)
    path = outdir / "column_frequency.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_game_lengths(results: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    if "moves" not in results.columns or results.empty:
        return None

    fig = plt.figure()
    plt.hist(results["moves"], bins=range(0, 44, 2))
    plt.title("Game length")
    plt.xlabel("moves")
    plt.ylabel("games")

    if show:
        plt.show()
        return None

    _ensure_dir(outdir)
    path = outdir / "game_lengths.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
