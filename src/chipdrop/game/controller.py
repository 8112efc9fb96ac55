from __future__ import annotations

from chipdrop.config import AI_PLAYER, DEFAULT_SAVE_BASE, HUMAN_PLAYER
from chipdrop.core.rules import winning_line
from chipdrop.game import actions
from chipdrop.game.results import PlaceResult, TurnReport
from chipdrop.game.state import GamePhase, GameSession
from chipdrop.ui.effects import ai_thinking
from chipdrop.ui.prompts import parse_command
from chipdrop.ui.render import render


def _status_with_header(session: GameSession, status: str) -> str:
    """Persistent header line with who is who, plus the latest message."""
    header = f"You: Player {HUMAN_PLAYER} | AI ({session.difficulty.value}): Player {AI_PLAYER}"
    if status:
        return f"{header}\n{status}"
    return header


def _highlight(session: GameSession):
    if not session.game_won:
        return None
    last = session.move_log.last()
    return winning_line(session.board, last.player) if last else None


def turn_status(report: TurnReport) -> str:
    """One-line message describing how a turn went."""
    if report.human_result is PlaceResult.GAME_ALREADY_DECIDED:
        if report.phase is GamePhase.DRAW:
            return "The game is a draw! Reset (r) or load a game (l)."
        return "The game has already been won. Reset (r) or load a game (l)."
    if report.human_result is PlaceResult.COLUMN_FULL:
        return "That column is full. Please try again."

    if report.ai_column is None:
        if report.winner == HUMAN_PLAYER:
            return f"Player {HUMAN_PLAYER} wins!"
        return "The game is a draw!"

    ai = f"AI chose {report.ai_column + 1}."
    if report.winner == AI_PLAYER:
        return f"{ai} AI wins!"
    if report.draw:
        return f"{ai} The game is a draw!"
    return f"{ai} Your turn."


def _drop(session: GameSession, column: int, show_thinking: bool) -> str:
    def before_reply() -> None:
        render(session.board, _status_with_header(session, f"You chose {column + 1}"))
        if show_thinking:
            ai_thinking("AI is thinking")

    report = actions.play_turn(session, column, HUMAN_PLAYER, AI_PLAYER, before_reply=before_reply)
    return turn_status(report)


def run_game(session: GameSession, show_thinking: bool = True) -> None:
    status = f"Player {HUMAN_PLAYER} starts."

    while True:
        render(session.board, _status_with_header(session, status), highlight=_highlight(session))

        raw = input(f"Player {HUMAN_PLAYER} move: ")
        try:
            cmd = parse_command(raw, session.board.cols)

            if cmd.kind == "quit":
                render(session.board, _status_with_header(session, "Game quit."), highlight=_highlight(session))
                return

            if cmd.kind == "reset":
                actions.reset_session(session)
                status = "New game. Your move."

            elif cmd.kind == "save":
                path = actions.save_session(session, cmd.arg or DEFAULT_SAVE_BASE)
                status = f"Game saved to {path}"

            elif cmd.kind == "load":
                report = actions.load_session(session, cmd.arg)
                status = f"Loaded {report.applied} moves from {report.path}"
                if report.skipped:
                    status += f" ({report.skipped} unreadable line(s) skipped)"

            else:
                status = _drop(session, cmd.column, show_thinking)

        except ValueError as e:
            status = str(e)
        except OSError as e:
            status = f"File error: {e}"
