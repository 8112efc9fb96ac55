from __future__ import annotations
import itertools
import sys
import time

from chipdrop.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC


def ai_thinking(label: str = "AI is thinking", delay: float = AI_THINK_DELAY_SEC) -> None:
    """
    Pacing pause before the opponent's reply is shown. Purely cosmetic: the
    move itself is computed afterwards from the board as it stands.
    """
    if delay <= 0:
        return
    if not AI_THINKING_SPINNER or not sys.stdout.isatty():
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    for frame in itertools.cycle("|/-\\"):
        if time.monotonic() >= deadline:
            break
        sys.stdout.write(f"\r{label}... {frame}")
        sys.stdout.flush()
        time.sleep(0.08)

    sys.stdout.write("\r" + " " * (len(label) + 10) + "\r")
    sys.stdout.flush()
