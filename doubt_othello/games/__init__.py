"""Game rules: the generic turn-based interface and Othello."""

from .turn_based_game import TurnBasedGame
from .othello import OthelloGame
from ..registry import list_games, register_game

if "othello" not in list_games():
    register_game("othello", OthelloGame)

__all__ = ["TurnBasedGame", "OthelloGame"]
