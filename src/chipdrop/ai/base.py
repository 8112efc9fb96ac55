from __future__ import annotations
from typing import Protocol

from chipdrop.core.board import Board
from chipdrop.types import Column, PlayerId


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board, me: PlayerId, opponent: PlayerId) -> Column:
        ...
