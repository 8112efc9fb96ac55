# src/chipdrop/core/board.py

from __future__ import annotations
import operator
from dataclasses import dataclass, field
from typing import List, Optional

from chipdrop.config import ROWS, COLUMNS, PLAYERS
from chipdrop.errors import InvalidColumnError, InvalidPlayerError
from chipdrop.types import Column, PlayerId


@dataclass(slots=True)
class Board:
    """
    Column stacks, one per column index, each filled bottom-to-top.

    stacks[c][0] is the bottom chip of column c. A stack never holds more
    than `rows` chips and only shrinks through reset().
    """
    rows: int = ROWS
    cols: int = COLUMNS
    stacks: List[List[PlayerId]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.stacks:
            self.stacks = [[] for _ in range(self.cols)]

    def _check_column(self, column: int) -> int:
        # Integers only: no floats, no bools
        if isinstance(column, bool):
            raise InvalidColumnError(column, self.cols)
        try:
            c = operator.index(column)
        except TypeError:
            raise InvalidColumnError(column, self.cols) from None
        if c < 0 or c >= self.cols:
            raise InvalidColumnError(c, self.cols)
        return c

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [s[:] for s in self.stacks])

    def height(self, column: int) -> int:
        return len(self.stacks[self._check_column(column)])

    def is_column_full(self, column: int) -> bool:
        return self.height(column) >= self.rows

    def valid_moves(self) -> List[Column]:
        return [Column(c) for c in range(self.cols) if len(self.stacks[c]) < self.rows]

    def is_full(self) -> bool:
        return all(len(s) == self.rows for s in self.stacks)

    def chip_count(self) -> int:
        return sum(len(s) for s in self.stacks)

    def place_chip(self, column: int, player: PlayerId) -> bool:
        c = self._check_column(column)
        if isinstance(player, bool) or player not in PLAYERS:
            raise InvalidPlayerError(player)

        stack = self.stacks[c]
        if len(stack) >= self.rows:
            return False

        stack.append(player)
        return True

    def chip_at(self, column: int, row: int) -> Optional[PlayerId]:
        """Owner of the chip at (column, row), row 0 being the bottom. None if empty."""
        stack = self.stacks[self._check_column(column)]
        if 0 <= row < len(stack):
            return stack[row]
        return None

    def reset(self) -> None:
        for stack in self.stacks:
            stack.clear()
