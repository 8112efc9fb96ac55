from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from chipdrop.game.state import GamePhase


class PlaceResult(str, Enum):
    PLACED = "placed"
    COLUMN_FULL = "column_full"
    GAME_ALREADY_DECIDED = "game_already_decided"

    @property
    def ok(self) -> bool:
        return self is PlaceResult.PLACED


@dataclass(frozen=True)
class TurnReport:
    """What happened during one human move plus the opponent's reply."""
    human_result: PlaceResult
    human_column: int
    ai_column: Optional[int] = None
    winner: Optional[int] = None
    phase: GamePhase = GamePhase.PLAYING

    @property
    def draw(self) -> bool:
        return self.phase is GamePhase.DRAW
