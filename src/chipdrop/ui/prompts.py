from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional

from chipdrop.types import Column, Difficulty

CommandKind = Literal["drop", "save", "load", "reset", "quit"]

HELP = "1-7 drop | s [name] save | l <file> load | r reset | q quit"


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    column: Optional[Column] = None
    arg: Optional[str] = None


def parse_command(raw: str, cols: int) -> Command:
    s = raw.strip()
    if not s:
        raise ValueError(f"Enter a column or a command ({HELP}).")

    head, _, rest = s.partition(" ")
    head = head.lower()
    rest = rest.strip() or None

    if head in {"q", "quit", "exit"}:
        return Command("quit")
    if head in {"r", "reset"}:
        return Command("reset")
    if head in {"s", "save"}:
        return Command("save", arg=rest)
    if head in {"l", "load"}:
        if rest is None:
            raise ValueError("Load needs a file path: l <file>")
        return Command("load", arg=rest)

    if not head.isdigit():
        raise ValueError(f"Invalid input ({HELP}).")
    col = int(head) - 1
    if col < 0 or col >= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Command("drop", column=Column(col))


def parse_difficulty(raw: str) -> Difficulty:
    s = raw.strip()
    if s == "1":
        return Difficulty.EASY
    if s == "2":
        return Difficulty.HARD
    return Difficulty.parse(s)
