"""Random agent implementation."""

from typing import List

import numpy as np

from ..games.othello import Move
from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects moves uniformly among the legal ones (Beginner)."""

    def choose(self, board: np.ndarray, side: int, moves: List[Move]) -> Move:
        return self._pick(moves)
