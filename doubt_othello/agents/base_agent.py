"""Base agent interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from ..games.othello import Move, legal_moves


class BaseAgent(ABC):
    """Base class for all move selectors."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        """
        Args:
            rng: Shared random generator. Takes precedence over ``seed``.
            seed: Seed for a private generator when ``rng`` is not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def select_move(self, board: np.ndarray, side: int) -> Optional[Move]:
        """Return a legal move for ``side`` or None when it has to pass."""
        moves = legal_moves(board, side)
        if not moves:
            return None
        return self.choose(board, side, moves)

    @abstractmethod
    def choose(self, board: np.ndarray, side: int, moves: List[Move]) -> Move:
        """Pick one of ``moves`` (never empty)."""

    def _pick(self, moves: List[Move]) -> Move:
        return moves[int(self.rng.integers(len(moves)))]
