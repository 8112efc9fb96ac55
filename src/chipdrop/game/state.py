from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from chipdrop.core.board import Board
from chipdrop.core.movelog import MoveLog
from chipdrop.types import Difficulty


class GamePhase(str, Enum):
    PLAYING = "playing"
    WON = "won"
    DRAW = "draw"


@dataclass(slots=True)
class GameSession:
    """
    One game: the board, its move log and the win flag.

    `board` and `move_log` change together (placement), are cleared together
    (reset) and are swapped together (load), so len(move_log) always equals
    board.chip_count().
    """
    difficulty: Difficulty = Difficulty.HARD
    board: Board = field(default_factory=Board)
    move_log: MoveLog = field(default_factory=MoveLog)
    game_won: bool = False

    @property
    def phase(self) -> GamePhase:
        if self.game_won:
            return GamePhase.WON
        if self.board.is_full():
            return GamePhase.DRAW
        return GamePhase.PLAYING

    @property
    def is_over(self) -> bool:
        return self.phase is not GamePhase.PLAYING
