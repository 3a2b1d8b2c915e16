"""Search algorithms (minimax) and value functions."""

from .action_policy import ActionPolicy
from .value_fn import StateValueFn
from .minimax_policy import MinimaxPolicy, MinimaxConfig
from .othello_value_fn import OthelloPositionalValueFn

__all__ = [
    "ActionPolicy",
    "StateValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "OthelloPositionalValueFn",
]
