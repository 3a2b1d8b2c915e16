"""Agent modules: one move selector per difficulty tier."""

from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .greedy_agent import GreedyAgent
from .corner_agent import CornerSafetyAgent
from .minimax_agent import MinimaxAgent
from .strategy import AIStrategy, select_move
from ..config.schema import ADVANCED, BEGINNER, EXTREME, INTERMEDIATE
from ..registry import list_agents, register_agent

if BEGINNER not in list_agents():
    register_agent(BEGINNER, RandomAgent)
if INTERMEDIATE not in list_agents():
    register_agent(INTERMEDIATE, GreedyAgent)
if ADVANCED not in list_agents():
    register_agent(ADVANCED, CornerSafetyAgent)
if EXTREME not in list_agents():
    register_agent(EXTREME, MinimaxAgent)

__all__ = [
    "AIStrategy",
    "BaseAgent",
    "CornerSafetyAgent",
    "GreedyAgent",
    "MinimaxAgent",
    "RandomAgent",
    "select_move",
]
