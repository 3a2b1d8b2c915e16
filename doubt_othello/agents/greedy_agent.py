"""Greedy flip-count agent."""

from typing import List, Optional

import numpy as np

from ..games.othello import Move
from .base_agent import BaseAgent


class GreedyAgent(BaseAgent):
    """
    Intermediate tier: usually takes the move flipping the most stones,
    otherwise plays a random legal move.
    """

    def __init__(
        self,
        greedy_probability: float = 0.7,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(rng=rng, seed=seed)
        if not 0.0 <= greedy_probability <= 1.0:
            raise ValueError(f"greedy_probability must be in [0, 1], got {greedy_probability}")
        self.greedy_probability = greedy_probability

    def choose(self, board: np.ndarray, side: int, moves: List[Move]) -> Move:
        if self.rng.random() < self.greedy_probability:
            return max(moves, key=lambda m: m.num_flips)
        return self._pick(moves)
