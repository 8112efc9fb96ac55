from __future__ import annotations
import random
from dataclasses import dataclass, field

from loguru import logger

from chipdrop.core.board import Board
from chipdrop.errors import NoValidMovesError
from chipdrop.types import Column, PlayerId


@dataclass
class RandomAgent:
    """Easy opponent: any column with room left, uniformly."""
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, board: Board, me: PlayerId, opponent: PlayerId) -> Column:
        if board.is_full():
            raise NoValidMovesError("No valid moves.")

        # Resample until the column has room
        while True:
            col = self.rng.randrange(board.cols)
            if not board.is_column_full(col):
                logger.debug("{} picked column {}", self.name, col)
                return Column(col)
