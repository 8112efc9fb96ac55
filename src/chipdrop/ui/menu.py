from __future__ import annotations

from chipdrop.types import Difficulty
from chipdrop.ui.prompts import parse_difficulty


def choose_difficulty() -> Difficulty:
    print("Select the difficulty level of the AI:")
    print("1) Easy")
    print("2) Hard")

    choice = input("Choice: ")
    try:
        return parse_difficulty(choice)
    except ValueError:
        print("\nInvalid choice. Defaulting to Hard.\n")
        return Difficulty.HARD
