from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

import pandas as pd

from chipdrop.core.persistence import decode_move_lines, read_move_lines

MOVE_COLS = ["game", "ply", "player", "column"]


@dataclass(frozen=True)
class LoadSpec:
    saves_dir: Path
    pattern: str = "*.txt"


def load_game_file(path: Path) -> pd.DataFrame:
    moves, _skipped = decode_move_lines(read_move_lines(path))
    rows = [
        {"game": path.stem, "ply": i + 1, "player": m.player, "column": m.column}
        for i, m in enumerate(moves)
    ]
    return pd.DataFrame(rows, columns=MOVE_COLS)


def load_game_logs(spec: LoadSpec) -> pd.DataFrame:
    """
    One row per saved move across every save file in the directory.
    Unreadable lines are dropped the same way the engine's loader drops them.
    """
    if not spec.saves_dir.exists():
        raise FileNotFoundError(f"Saves directory not found: {spec.saves_dir}")

    # Filenames end in a timestamp, lexicographic sort is chronological
    files = sorted(spec.saves_dir.glob(spec.pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {spec.pattern} in {spec.saves_dir}")

    frames: List[pd.DataFrame] = [load_game_file(p) for p in files]
    frames = [f for f in frames if not f.empty]
    if not frames:
        return pd.DataFrame(columns=MOVE_COLS)

    df = pd.concat(frames, ignore_index=True)
    for c in ("ply", "player", "column"):
        df[c] = pd.to_numeric(df[c], errors="coerce").astype("int64")
    return df
