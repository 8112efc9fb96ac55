# src/chipdrop/core/movelog.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from chipdrop.types import PlayerId


@dataclass(frozen=True, slots=True)
class Move:
    player: PlayerId
    column: int


@dataclass(slots=True)
class MoveLog:
    """Chronological record of successful placements. Append-only during play."""
    moves: List[Move] = field(default_factory=list)

    def record(self, player: PlayerId, column: int) -> Move:
        move = Move(player, column)
        self.moves.append(move)
        return move

    def clear(self) -> None:
        self.moves.clear()

    def last(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)
