# src/chipdrop/errors.py

from __future__ import annotations


class ChipDropError(Exception):
    """Base class for engine errors."""


class InvalidColumnError(ChipDropError, ValueError):
    def __init__(self, column: int, columns: int) -> None:
        super().__init__(f"Invalid column {column!r} (expected an integer 0..{columns - 1}).")
        self.column = column


class InvalidPlayerError(ChipDropError, ValueError):
    def __init__(self, player: object) -> None:
        super().__init__(f"Unknown player {player!r} (expected 1 or 2).")
        self.player = player


class NoValidMovesError(ChipDropError):
    pass
