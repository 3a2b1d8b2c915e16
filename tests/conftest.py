"""Shared test fixtures: reproducible positions reached by random play."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Tuple

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from doubt_othello.games.othello import BLACK, apply_move, initial_board, legal_moves


def random_position(seed: int, plies: int) -> Tuple[np.ndarray, int]:
    """Play ``plies`` random legal moves from the opening; returns (board, side to move)."""
    rng = np.random.default_rng(seed)
    board = initial_board()
    side = BLACK
    for _ in range(plies):
        moves = legal_moves(board, side)
        if not moves:
            side = -side
            moves = legal_moves(board, side)
            if not moves:
                break
        move = moves[int(rng.integers(len(moves)))]
        board = apply_move(board, move, side)
        side = -side
    if not legal_moves(board, side):
        side = -side
    return board, side


@pytest.fixture
def midgame_positions() -> List[Tuple[np.ndarray, int]]:
    """A spread of non-terminal positions between the opening and the late midgame."""
    positions = []
    for seed in range(12):
        board, side = random_position(seed, plies=8 + 3 * seed)
        if legal_moves(board, side):
            positions.append((board, side))
    return positions
