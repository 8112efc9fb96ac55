from __future__ import annotations

import random
from typing import Optional

from chipdrop.ai.base import Agent
from chipdrop.ai.random_agent import RandomAgent
from chipdrop.ai.tactical_agent import TacticalAgent
from chipdrop.types import Difficulty


def agent_for(difficulty: Difficulty, rng: Optional[random.Random] = None) -> Agent:
    """Opponent for a difficulty setting. `rng` only matters for Easy."""
    if difficulty == Difficulty.EASY:
        return RandomAgent(rng=rng or random.Random())
    if difficulty == Difficulty.HARD:
        return TacticalAgent()
    raise ValueError(f"Unknown difficulty: {difficulty!r}")
