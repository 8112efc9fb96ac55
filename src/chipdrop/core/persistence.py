# src/chipdrop/core/persistence.py

"""
Flat text move log: one `Player <p>, Column <c>` line per move.

Saving writes `<base>_<YYYYMMDDHHMMSS>.txt`. Loading is lenient; lines that
don't have the two expected fields are skipped, and the caller is told how
many.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from loguru import logger

from chipdrop.config import SAVE_ENCODING, SAVE_EXTENSION, SAVE_TIMESTAMP_FORMAT
from chipdrop.core.movelog import Move, MoveLog

PathLike = Union[str, Path]

_PLAYER_RE = re.compile(r"Player (\d+)")
_COLUMN_RE = re.compile(r"Column (\d+)")


@dataclass(frozen=True)
class LoadReport:
    path: Path
    applied: int
    skipped: int


def format_move(move: Move) -> str:
    return f"Player {move.player}, Column {move.column}"


def encode_move_log(log: Iterable[Move]) -> str:
    return "".join(format_move(m) + "\n" for m in log)


def parse_move_line(line: str) -> Optional[Move]:
    """Parse one saved line. None if it isn't `Player N, Column M`."""
    parts = line.strip().split(",")
    if len(parts) != 2:
        return None

    pm = _PLAYER_RE.fullmatch(parts[0].strip())
    cm = _COLUMN_RE.fullmatch(parts[1].strip())
    if pm is None or cm is None:
        return None

    return Move(int(pm.group(1)), int(cm.group(1)))  # type: ignore[arg-type]


def decode_move_lines(lines: Iterable[str]) -> Tuple[List[Move], int]:
    """Returns (moves, skipped). Blank lines are ignored and not counted."""
    moves: List[Move] = []
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        move = parse_move_line(line)
        if move is None:
            skipped += 1
            continue
        moves.append(move)
    return moves, skipped


def save_path_for(base: PathLike, now: Optional[datetime] = None) -> Path:
    now = now or datetime.now()
    base = Path(base)
    return base.with_name(f"{base.name}_{now.strftime(SAVE_TIMESTAMP_FORMAT)}{SAVE_EXTENSION}")


def write_move_log(log: MoveLog, base: PathLike, now: Optional[datetime] = None) -> Path:
    path = save_path_for(base, now)
    path.write_text(encode_move_log(log), encoding=SAVE_ENCODING)
    logger.info("Saved {} moves to {}", len(log), path)
    return path


def read_move_lines(path: PathLike) -> List[str]:
    # Undecodable bytes become U+FFFD so that line fails to parse and is skipped
    return Path(path).read_text(encoding=SAVE_ENCODING, errors="replace").splitlines()
