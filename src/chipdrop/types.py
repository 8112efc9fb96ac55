# src/chipdrop/types.py

from __future__ import annotations
from enum import Enum
from typing import Literal, Optional, NewType

PlayerId = Literal[1, 2]
Cell = Optional[PlayerId]
Column = NewType("Column", int)   # column index 0..6


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"

    @classmethod
    def parse(cls, raw: str) -> "Difficulty":
        s = raw.strip().lower()
        for d in cls:
            if s in {d.value, d.value[0]}:
                return d
        raise ValueError(f"Unknown difficulty: {raw!r} (expected easy or hard).")
