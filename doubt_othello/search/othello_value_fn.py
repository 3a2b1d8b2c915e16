"""Positional value function for Othello minimax."""

from __future__ import annotations

from typing import Any, Optional

from ..games.othello.eval import DEFAULT_WEIGHTS, EvalWeights, evaluate_board, terminal_score
from ..games.othello.state import OthelloState
from ..games.turn_based_game import TurnBasedGame
from .value_fn import StateValueFn


class OthelloPositionalValueFn(StateValueFn[OthelloState]):
    """Heuristic board evaluation; terminal positions scale the final disc differential."""

    def __init__(self, weights: Optional[EvalWeights] = None) -> None:
        self.weights = weights or DEFAULT_WEIGHTS

    def evaluate(
        self,
        game: TurnBasedGame[OthelloState, Any],
        state: OthelloState,
    ) -> float:
        player = game.current_player(state)
        if game.is_terminal(state):
            return terminal_score(state.board, player, self.weights)
        return evaluate_board(state.board, player, self.weights)
