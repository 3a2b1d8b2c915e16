"""Minimax agent: alpha-beta search over the positional evaluation."""

from typing import List, Optional

import numpy as np

from ..games.othello import EvalWeights, Move, OthelloState
from ..registry import make_game
from ..search import MinimaxConfig, MinimaxPolicy, OthelloPositionalValueFn
from .base_agent import BaseAgent


class MinimaxAgent(BaseAgent):
    """Extreme tier."""

    def __init__(
        self,
        depth: int = 3,
        use_alpha_beta: bool = True,
        weights: Optional[EvalWeights] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(rng=rng, seed=seed)
        if depth <= 0:
            raise ValueError("Minimax depth must be >= 1")
        self.game = make_game("othello")
        # Siblings cut at the root report bounds, so ties are not trustworthy.
        config = MinimaxConfig(depth=depth, use_alpha_beta=use_alpha_beta, random_tiebreak=False)
        self.policy = MinimaxPolicy(
            value_fn=OthelloPositionalValueFn(weights),
            config=config,
            rng=self.rng,
        )

    @property
    def depth(self) -> int:
        return self.policy.config.depth

    def choose(self, board: np.ndarray, side: int, moves: List[Move]) -> Move:
        state = OthelloState(board=board, side_to_move=side)
        return self.policy.select_action(self.game, state, legal_actions=moves)
