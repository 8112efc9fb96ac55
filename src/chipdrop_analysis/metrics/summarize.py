from __future__ import annotations

from typing import List

import pandas as pd

from chipdrop.config import COLUMNS, PLAYERS
from chipdrop.core.board import Board
from chipdrop.core.rules import check_for_win

RESULT_COLS = ["game", "moves", "winner", "outcome"]


def _require_cols(df: pd.DataFrame, cols: List[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def column_frequency(df: pd.DataFrame) -> pd.DataFrame:
    """
    Chips dropped per column, one column per player plus totals and share.
    Every board column appears, including ones nobody played.
    """
    _require_cols(df, ["player", "column"])

    counts = pd.DataFrame(0, index=pd.Index(range(COLUMNS), name="column"), columns=list(PLAYERS))
    if not df.empty:
        observed = df.groupby(["column", "player"]).size().unstack("player", fill_value=0)
        counts = observed.reindex(index=counts.index, columns=counts.columns, fill_value=0)
    counts.columns = [f"player_{p}" for p in counts.columns]
    counts.index.name = "column"

    counts["total"] = counts.sum(axis=1)
    total = counts["total"].sum()
    counts["share"] = counts["total"] / total if total else 0.0
    return counts


def _replay_outcome(moves: pd.DataFrame) -> tuple[int, int, str]:
    board = Board()
    played = 0
    for player, column in zip(moves["player"], moves["column"]):
        if not board.place_chip(int(column), int(player)):
            continue
        played += 1
        if check_for_win(board, int(column), int(player)):
            return played, int(player), "win"
    if board.is_full():
        return played, 0, "draw"
    return played, 0, "open"


def game_results(df: pd.DataFrame) -> pd.DataFrame:
    """Replay each saved game to find who won, if anyone (winner 0 = nobody)."""
    _require_cols(df, ["game", "ply", "player", "column"])

    rows = []
    for game, moves in df.sort_values(["game", "ply"]).groupby("game", sort=True):
        played, winner, outcome = _replay_outcome(moves)
        rows.append({"game": game, "moves": played, "winner": winner, "outcome": outcome})
    return pd.DataFrame(rows, columns=RESULT_COLS)


def opening_moves(df: pd.DataFrame) -> pd.Series:
    """How often each column was the first move of a game."""
    _require_cols(df, ["game", "ply", "column"])
    first = df[df["ply"] == 1]
    return first["column"].value_counts().sort_index().rename("games")


def outcome_summary(results: pd.DataFrame) -> pd.DataFrame:
    _require_cols(results, ["outcome", "winner", "moves"])
    if results.empty:
        return pd.DataFrame(columns=["games", "avg_moves"])

    labels = results.apply(
        lambda r: f"player {r['winner']} won" if r["outcome"] == "win" else r["outcome"],
        axis=1,
    )
    out = results.assign(result=labels).groupby("result").agg(
        games=("moves", "size"),
        avg_moves=("moves", "mean"),
    )
    return out.sort_values("games", ascending=False)
