from __future__ import annotations

import argparse
import time
from typing import List, Optional

from chipdrop.config import LOG_LEVEL
from chipdrop.game.actions import new_session
from chipdrop.game.controller import run_game
from chipdrop.log import configure_logging
from chipdrop.types import Difficulty
from chipdrop.ui.menu import choose_difficulty


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="chipdrop", description="Play Connect 4 against the computer.")
    ap.add_argument("--difficulty", type=Difficulty.parse, default=None, help="easy or hard (asks if omitted)")
    ap.add_argument("--no-thinking", action="store_true", help="Skip the pause before the AI's reply")
    ap.add_argument("--log-level", type=str, default=None, help=f"Enable engine logs at this level (e.g. {LOG_LEVEL}, DEBUG)")
    ap.add_argument("--log-file", type=str, default=None, help="Also write engine logs to this file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    if args.log_level or args.log_file:
        configure_logging(args.log_level or LOG_LEVEL, args.log_file)

    difficulty = args.difficulty or choose_difficulty()
    session = new_session(difficulty)

    print(f"\nStarting game: You vs {difficulty.value.title()} AI")
    if not args.no_thinking:
        time.sleep(1)

    run_game(session, show_thinking=not args.no_thinking)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
