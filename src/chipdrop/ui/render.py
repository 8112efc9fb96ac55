from __future__ import annotations
from typing import Optional, Iterable, List, Tuple, Set

from chipdrop.config import CLEAR_SCREEN, USE_COLOR
from chipdrop.core.board import Board
from chipdrop.types import Cell
from chipdrop.ui.prompts import HELP

Coord = Tuple[int, int]  # (col, row), row 0 at the bottom

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # marks the winning four
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

# Player 1 red, player 2 yellow
PLAYER_COLORS = {1: "\033[31m", 2: "\033[33m"}


def c(s: str, code: str) -> str:
    return f"{code}{s}{RESET}" if USE_COLOR else s


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    return c("●", PLAYER_COLORS[cell])


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()
    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]

    for row in range(board.rows - 1, -1, -1):
        parts = []
        for col in range(board.cols):
            p = _piece(board.chip_at(col, row))
            if (col, row) in hl:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")

    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   {HELP}", DIM))
