"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, TypeVar

import math
import numpy as np

from ..games.turn_based_game import TurnBasedGame
from .action_policy import ActionPolicy
from .value_fn import StateValueFn

StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


@dataclass
class MinimaxConfig:
    depth: int = 3
    use_alpha_beta: bool = True
    random_tiebreak: bool = True
    value_epsilon: float = 1e-6


class MinimaxPolicy(ActionPolicy[StateT, ActionT], Generic[StateT, ActionT]):
    """
    Negamax-based minimax policy over TurnBasedGame + StateValueFn.

    A side without legal moves passes and the search continues at the same
    depth; a position where neither side can move is evaluated as terminal.
    """

    def __init__(
        self,
        value_fn: StateValueFn[StateT],
        config: Optional[MinimaxConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.value_fn = value_fn
        self.config = config or MinimaxConfig()
        self.rng = rng or np.random.default_rng()
        self.last_search_nodes = 0
        self.last_best_value = -math.inf

    def select_action(
        self,
        game: TurnBasedGame[StateT, ActionT],
        state: StateT,
        legal_actions: Optional[Sequence[ActionT]] = None,
    ) -> ActionT:
        if self.config.depth <= 0:
            raise ValueError("Minimax depth must be >= 1")

        if legal_actions is None:
            legal_actions = list(game.legal_actions(state))

        if not legal_actions:
            raise ValueError("No legal actions available for minimax")

        self.last_search_nodes = 0
        best_value = -math.inf
        best_actions: List[ActionT] = []
        root_alpha = -math.inf  # Track best value for root-level pruning

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            value = -self._search(
                game=game,
                state=next_state,
                depth=self.config.depth - 1,
                alpha=-math.inf,
                beta=-root_alpha,  # Tell child: beat -root_alpha or I don't care
            )

            if value > best_value + self.config.value_epsilon:
                best_value = value
                best_actions = [action]
            elif abs(value - best_value) <= self.config.value_epsilon:
                best_actions.append(action)

            # Update root_alpha for subsequent iterations
            if self.config.use_alpha_beta:
                root_alpha = max(root_alpha, value)

        self.last_best_value = best_value

        # Fallback if all values were -inf (edge case)
        if not best_actions:
            return legal_actions[0]

        if len(best_actions) == 1 or not self.config.random_tiebreak:
            return best_actions[0]

        return best_actions[int(self.rng.integers(len(best_actions)))]

    def _search(
        self,
        game: TurnBasedGame[StateT, ActionT],
        state: StateT,
        depth: int,
        alpha: float,
        beta: float,
    ) -> float:
        self.last_search_nodes += 1

        if game.is_terminal(state):
            return self.value_fn.evaluate(game, state)
        if depth == 0:
            return self.value_fn.evaluate(game, state)

        legal_actions = list(game.legal_actions(state))
        if not legal_actions:
            # Forced pass: the opponent still has a move because the state is not terminal.
            return -self._search(
                game=game,
                state=game.pass_turn(state),
                depth=depth,
                alpha=-beta,
                beta=-alpha,
            )

        value = -math.inf

        for action in legal_actions:
            next_state = game.apply_action(state, action)
            child_value = -self._search(
                game=game,
                state=next_state,
                depth=depth - 1,
                alpha=-beta,
                beta=-alpha,
            )

            if child_value > value:
                value = child_value

            if self.config.use_alpha_beta:
                if value > alpha:
                    alpha = value
                if beta <= alpha:
                    break

        return value
