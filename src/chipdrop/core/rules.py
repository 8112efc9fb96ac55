# src/chipdrop/core/rules.py

from __future__ import annotations
from typing import Optional, List, Tuple

from chipdrop.config import CONNECT_N
from chipdrop.core.board import Board
from chipdrop.types import Cell, PlayerId

Coord = Tuple[int, int]  # (col, row), row 0 at the bottom

DIAGONAL_DIRECTIONS = (1, -1)  # up-right, up-left


def _cell(board: Board, col: int, row: int) -> Cell:
    # Off-board reads as empty so it never matches a player
    if col < 0 or col >= board.cols or row < 0 or row >= board.rows:
        return None
    return board.chip_at(col, row)


def check_vertical(board: Board, column: int, player: PlayerId) -> bool:
    """
    Only the column just played can have a new vertical four, and only at
    the top of its stack.
    """
    if board.height(column) < CONNECT_N:
        return False
    stack = board.stacks[column]

    count = 0
    for chip in reversed(stack):
        if chip != player:
            break
        count += 1
        if count >= CONNECT_N:
            return True
    return False


def check_horizontal(board: Board, player: PlayerId) -> bool:
    for row in range(board.rows):
        count = 0
        for col in range(board.cols):
            count = count + 1 if _cell(board, col, row) == player else 0
            if count >= CONNECT_N:
                return True
    return False


def _diagonal_from(board: Board, col: int, row: int, direction: int, player: PlayerId) -> Optional[List[Coord]]:
    line: List[Coord] = []
    for i in range(CONNECT_N):
        c = col + i * direction
        r = row + i
        if _cell(board, c, r) != player:
            return None
        line.append((c, r))
    return line


def check_diagonal_direction(board: Board, player: PlayerId, direction: int) -> bool:
    for col in range(board.cols):
        for row in range(board.rows):
            if _diagonal_from(board, col, row, direction, player):
                return True
    return False


def check_diagonal(board: Board, player: PlayerId) -> bool:
    return any(check_diagonal_direction(board, player, d) for d in DIAGONAL_DIRECTIONS)


def check_for_win(board: Board, last_column: int, player: PlayerId) -> bool:
    """True if `player`, who just dropped into `last_column`, has four in a row."""
    return (
        check_vertical(board, last_column, player)
        or check_horizontal(board, player)
        or check_diagonal(board, player)
    )


def winning_line(board: Board, player: PlayerId) -> Optional[List[Coord]]:
    """First four-in-a-row owned by `player`, as (col, row) cells, or None."""
    for col in range(board.cols):
        for row in range(board.rows):
            # Vertical, horizontal, then both diagonals
            for dc, dr in ((0, 1), (1, 0), (1, 1), (-1, 1)):
                line = [(col + i * dc, row + i * dr) for i in range(CONNECT_N)]
                if all(_cell(board, c, r) == player for c, r in line):
                    return line
    return None
