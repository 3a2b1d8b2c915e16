"""Othello evaluation functions for search algorithms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set

import numpy as np

from .board import legal_moves
from .utils import BLACK, CORNERS, EMPTY, OTHELLO_SIZE, Position, count_pieces

POSITION_WEIGHTS_8x8 = np.array([
    [100, -20,  10,   5,   5,  10, -20, 100],
    [-20, -50,  -2,  -2,  -2,  -2, -50, -20],
    [ 10,  -2,   5,   1,   1,   5,  -2,  10],
    [  5,  -2,   1,   0,   0,   1,  -2,   5],
    [  5,  -2,   1,   0,   0,   1,  -2,   5],
    [ 10,  -2,   5,   1,   1,   5,  -2,  10],
    [-20, -50,  -2,  -2,  -2,  -2, -50, -20],
    [100, -20,  10,   5,   5,  10, -20, 100],
], dtype=np.float32)

# X- and C-squares next to each corner.
CORNER_NEIGHBOURS = {
    (0, 0): ((0, 1), (1, 0), (1, 1)),
    (0, 7): ((0, 6), (1, 7), (1, 6)),
    (7, 0): ((6, 0), (7, 1), (6, 1)),
    (7, 7): ((7, 6), (6, 7), (6, 6)),
}

_EDGE_MASK = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=bool)
_EDGE_MASK[0, 2:6] = _EDGE_MASK[-1, 2:6] = True
_EDGE_MASK[2:6, 0] = _EDGE_MASK[2:6, -1] = True


@dataclass(frozen=True, eq=False)
class EvalWeights:
    """
    Weights of the positional evaluation.

    Attributes:
        opening_max_stones: Stones on board up to which the game is in the opening.
        midgame_max_stones: Stones on board up to which the game is in the midgame.
        opening_disc: Disc-differential weight in the opening (negative: fewer is better).
        midgame_disc: Disc-differential weight in the midgame.
        endgame_disc: Disc-differential weight in the endgame.
        position: Multiplier of the positional matrix score.
        stability: Per stable disc anchored to an owned corner.
        mobility: Per legal move more than the opponent.
        edge: Per owned edge cell (corners and C-squares excluded).
        terminal_scale: Multiplier of the final disc differential.
        matrix: Positional weights, corners high and X/C-squares penalised.
    """

    opening_max_stones: int = 20
    midgame_max_stones: int = 50
    opening_disc: float = -1.0
    midgame_disc: float = 1.0
    endgame_disc: float = 8.0
    position: float = 1.0
    stability: float = 15.0
    mobility: float = 5.0
    edge: float = 3.0
    terminal_scale: float = 1000.0
    matrix: np.ndarray = field(default_factory=lambda: POSITION_WEIGHTS_8x8.copy())

    def disc_weight(self, stones: int) -> float:
        if stones <= self.opening_max_stones:
            return self.opening_disc
        if stones <= self.midgame_max_stones:
            return self.midgame_disc
        return self.endgame_disc


DEFAULT_WEIGHTS = EvalWeights()


def positional_score(board: np.ndarray, player: int, matrix: np.ndarray) -> float:
    """Matrix score for ``player``; squares next to an occupied corner lose their penalty."""
    weights = matrix.copy()
    for corner, adjacent in CORNER_NEIGHBOURS.items():
        if board[corner] != EMPTY:
            for cell in adjacent:
                weights[cell] = 0.0
    return float(np.sum(weights * board)) * player


def stable_discs(board: np.ndarray, player: int) -> Set[Position]:
    """Discs joined to an owned corner by an unbroken run along a rank or file."""
    size = board.shape[0]
    stable: Set[Position] = set()
    for row, col in CORNERS:
        if board[row, col] != player:
            continue
        step_r = 1 if row == 0 else -1
        step_c = 1 if col == 0 else -1

        c = col
        while 0 <= c < size and board[row, c] == player:
            stable.add((row, c))
            c += step_c

        r = row
        while 0 <= r < size and board[r, col] == player:
            stable.add((r, col))
            r += step_r
    return stable


def edge_score(board: np.ndarray, player: int) -> int:
    return int(np.sum(board[_EDGE_MASK])) * player


def terminal_score(board: np.ndarray, player: int, weights: EvalWeights = DEFAULT_WEIGHTS) -> float:
    black, white = count_pieces(board)
    diff = black - white if player == BLACK else white - black
    return weights.terminal_scale * diff


def evaluate_board(board: np.ndarray, player: int, weights: EvalWeights = DEFAULT_WEIGHTS) -> float:
    """
    Heuristic value of a non-terminal board for ``player`` (higher is better).

    Combines the phase-weighted disc differential, the positional matrix,
    corner-anchored stability, mobility and edge control.
    """
    black, white = count_pieces(board)
    disc = black - white if player == BLACK else white - black
    score = weights.disc_weight(black + white) * disc

    score += weights.position * positional_score(board, player, weights.matrix)

    stability = len(stable_discs(board, player)) - len(stable_discs(board, -player))
    score += weights.stability * stability

    mobility = len(legal_moves(board, player)) - len(legal_moves(board, -player))
    score += weights.mobility * mobility

    score += weights.edge * edge_score(board, player)
    return score
