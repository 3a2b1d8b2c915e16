"""Corner-aware heuristic agent for Othello."""

from typing import List

import numpy as np

from ..games.othello import Move, apply_move, legal_moves
from ..games.othello.utils import is_corner
from .base_agent import BaseAgent


class CornerSafetyAgent(BaseAgent):
    """
    Advanced tier.

    Strategy:
    1. Take a corner whenever one is available
    2. Otherwise avoid moves that let the opponent take a corner next turn
    3. Among what is left, flip as many stones as possible
    """

    def choose(self, board: np.ndarray, side: int, moves: List[Move]) -> Move:
        corner_moves = [m for m in moves if is_corner(m.position)]
        if corner_moves:
            return self._most_flips(corner_moves)

        safe_moves = [m for m in moves if not self.gives_corner(board, m, side)]
        if safe_moves:
            return self._most_flips(safe_moves)

        return self._most_flips(moves)

    @staticmethod
    def gives_corner(board: np.ndarray, move: Move, side: int) -> bool:
        """True if after ``move`` the opponent has a legal corner move."""
        after = apply_move(board, move, side)
        return any(is_corner(reply.position) for reply in legal_moves(after, -side))

    def _most_flips(self, moves: List[Move]) -> Move:
        best = max(m.num_flips for m in moves)
        return self._pick([m for m in moves if m.num_flips == best])
