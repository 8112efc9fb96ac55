"""
Session operations used by the front-end.

Everything that touches a GameSession goes through here so the board, the
move log and the win flag stay in step.
"""

from __future__ import annotations

import random
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from loguru import logger

from chipdrop.ai.pick import agent_for
from chipdrop.config import AI_PLAYER, HUMAN_PLAYER
from chipdrop.core import persistence
from chipdrop.core import rules
from chipdrop.core.board import Board
from chipdrop.core.movelog import MoveLog
from chipdrop.core.persistence import LoadReport
from chipdrop.errors import ChipDropError
from chipdrop.game.results import PlaceResult, TurnReport
from chipdrop.game.state import GamePhase, GameSession
from chipdrop.types import Column, Difficulty, PlayerId


def new_session(difficulty: Difficulty = Difficulty.HARD) -> GameSession:
    return GameSession(difficulty=difficulty)


def is_board_full(session: GameSession) -> bool:
    return session.board.is_full()


def check_for_win(session: GameSession, last_column: int, player: PlayerId) -> bool:
    """
    Run the win detector for the move just made. A win marks the session as
    won; a non-win never clears an earlier win.
    """
    won = rules.check_for_win(session.board, last_column, player)
    if won and not session.game_won:
        session.game_won = True
        logger.info("Player {} wins (last column {})", player, last_column)
    return won


def place_chip(session: GameSession, column: int, player: PlayerId) -> PlaceResult:
    if session.is_over:
        return PlaceResult.GAME_ALREADY_DECIDED

    if not session.board.place_chip(column, player):
        return PlaceResult.COLUMN_FULL

    session.move_log.record(player, int(column))
    logger.debug("Player {} -> column {} (move {})", player, column, len(session.move_log))

    check_for_win(session, column, player)
    return PlaceResult.PLACED


def choose_opponent_move(
    session: GameSession,
    ai_player: PlayerId = AI_PLAYER,
    human_player: PlayerId = HUMAN_PLAYER,
    rng: Optional[random.Random] = None,
) -> Column:
    agent = agent_for(session.difficulty, rng)
    return agent.choose_move(session.board, ai_player, human_player)


def play_turn(
    session: GameSession,
    column: int,
    human_player: PlayerId = HUMAN_PLAYER,
    ai_player: PlayerId = AI_PLAYER,
    rng: Optional[random.Random] = None,
    before_reply: Optional[Callable[[], None]] = None,
) -> TurnReport:
    """
    Human drops into `column`; if that leaves the game open, the opponent replies.

    `before_reply` runs after the human move is committed and before the
    opponent's column is chosen (the front-end uses it to redraw and pause).
    """
    result = place_chip(session, column, human_player)
    if not result.ok:
        return TurnReport(result, column, phase=session.phase)

    if session.game_won:
        return TurnReport(result, column, winner=human_player, phase=session.phase)
    if session.is_over:
        return TurnReport(result, column, phase=session.phase)

    if before_reply is not None:
        before_reply()

    ai_col = choose_opponent_move(session, ai_player, human_player, rng)
    place_chip(session, ai_col, ai_player)
    winner = ai_player if session.game_won else None
    return TurnReport(result, column, ai_column=int(ai_col), winner=winner, phase=session.phase)


def reset_session(session: GameSession) -> None:
    session.board.reset()
    session.move_log.clear()
    session.game_won = False
    logger.info("Session reset")


def save_session(
    session: GameSession,
    base_path: Union[str, Path],
    now: Optional[datetime] = None,
) -> Path:
    """Write the move log to `<base_path>_<timestamp>.txt`. OSError propagates."""
    return persistence.write_move_log(session.move_log, base_path, now)


def load_session(session: GameSession, file_path: Union[str, Path]) -> LoadReport:
    """
    Replace the session's board and move log with the game saved at
    `file_path`.

    The replay runs on a fresh board and log; the session is only touched
    once the file has been read in full, so an OSError leaves it as it was.
    Moves are replayed without win checks; `game_won` starts over as False.
    """
    path = Path(file_path)
    moves, skipped = persistence.decode_move_lines(persistence.read_move_lines(path))

    board = Board(session.board.rows, session.board.cols)
    log = MoveLog()
    for move in moves:
        try:
            placed = board.place_chip(move.column, move.player)
        except ChipDropError as e:
            logger.debug("Skipping {}: {}", persistence.format_move(move), e)
            placed = False
        if not placed:
            skipped += 1
            continue
        log.record(move.player, move.column)

    session.board = board
    session.move_log = log
    session.game_won = False

    if skipped:
        logger.warning("Loaded {} moves from {}, skipped {} line(s)", len(log), path, skipped)
    else:
        logger.info("Loaded {} moves from {}", len(log), path)
    return LoadReport(path=path, applied=len(log), skipped=skipped)


__all__ = [
    "GamePhase",
    "GameSession",
    "LoadReport",
    "PlaceResult",
    "TurnReport",
    "check_for_win",
    "choose_opponent_move",
    "is_board_full",
    "load_session",
    "new_session",
    "place_chip",
    "play_turn",
    "reset_session",
    "save_session",
]
