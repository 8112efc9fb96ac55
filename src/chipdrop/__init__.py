"""Connect 4 engine: board, win detection, opponent and move-log saves."""

from loguru import logger

from chipdrop.config import COLUMNS, ROWS
from chipdrop.core.board import Board
from chipdrop.core.movelog import Move, MoveLog
from chipdrop.core.persistence import LoadReport
from chipdrop.errors import ChipDropError, InvalidColumnError, InvalidPlayerError, NoValidMovesError
from chipdrop.game.actions import (
    check_for_win,
    choose_opponent_move,
    is_board_full,
    load_session,
    new_session,
    place_chip,
    play_turn,
    reset_session,
    save_session,
)
from chipdrop.game.results import PlaceResult, TurnReport
from chipdrop.game.state import GamePhase, GameSession
from chipdrop.types import Difficulty

# Quiet unless the application calls chipdrop.log.configure_logging()
logger.disable("chipdrop")

__all__ = [
    "Board",
    "COLUMNS",
    "ChipDropError",
    "Difficulty",
    "GamePhase",
    "GameSession",
    "InvalidColumnError",
    "InvalidPlayerError",
    "LoadReport",
    "Move",
    "MoveLog",
    "NoValidMovesError",
    "PlaceResult",
    "ROWS",
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
