from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from chipdrop.config import PREFERRED_COLUMNS
from chipdrop.core.board import Board
from chipdrop.core.rules import check_for_win
from chipdrop.types import Column, PlayerId


def winning_move(board: Board, player: PlayerId) -> Optional[Column]:
    """
    First column (lowest index) where a chip from `player` would complete four.
    Each trial runs on a copy; `board` is left as it was.
    """
    for c in board.valid_moves():
        b2 = board.copy()
        b2.place_chip(c, player)
        if check_for_win(b2, c, player):
            return c
    return None


@dataclass
class TacticalAgent:
    """
    Hard opponent, one ply deep:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Otherwise the first open column from a center-out preference list,
         or column 0 when none is open

    Deterministic: the same board always gives the same column.
    """
    name: str = "Tactical"
    preferred: Sequence[int] = PREFERRED_COLUMNS

    def choose_move(self, board: Board, me: PlayerId, opponent: PlayerId) -> Column:
        # 1) win now
        m = winning_move(board, me)
        if m is not None:
            logger.debug("{}: winning move at column {}", self.name, m)
            return m

        # 2) block opponent win
        m = winning_move(board, opponent)
        if m is not None:
            logger.debug("{}: blocking column {}", self.name, m)
            return m

        # 3) center preference
        for c in self.preferred:
            if not board.is_column_full(c):
                logger.debug("{}: preferred column {}", self.name, c)
                return Column(c)

        # every preferred column is full
        return Column(0)
