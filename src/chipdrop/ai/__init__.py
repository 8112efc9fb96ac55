from chipdrop.ai.base import Agent
from chipdrop.ai.pick import agent_for
from chipdrop.ai.random_agent import RandomAgent
from chipdrop.ai.tactical_agent import TacticalAgent, winning_move

__all__ = ["Agent", "RandomAgent", "TacticalAgent", "agent_for", "winning_move"]
