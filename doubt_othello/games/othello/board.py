"""Board model: pure functions over immutable 8x8 snapshots."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .state import Move
from .utils import (
    BLACK,
    DIRECTIONS,
    EMPTY,
    OTHELLO_SIZE,
    WHITE,
    Position,
    check_position,
    count_pieces,
    freeze,
    get_flips,
)


def initial_board(size: int = OTHELLO_SIZE) -> np.ndarray:
    """Canonical opening: White on the main diagonal of the centre, Black on the other."""
    board = np.zeros((size, size), dtype=np.int8)

    mid = size // 2
    board[mid - 1, mid - 1] = WHITE
    board[mid - 1, mid] = BLACK
    board[mid, mid - 1] = BLACK
    board[mid, mid] = WHITE

    return freeze(board)


def _frontier(board: np.ndarray, side: int) -> List[Position]:
    """Empty cells touching at least one opponent stone, in row-major order."""
    size = board.shape[0]
    other = -side
    cells = []
    for row in range(size):
        for col in range(size):
            if board[row, col] != EMPTY:
                continue
            for dr, dc in DIRECTIONS:
                r, c = row + dr, col + dc
                if 0 <= r < size and 0 <= c < size and board[r, c] == other:
                    cells.append((row, col))
                    break
    return cells


def legal_moves(board: np.ndarray, side: int) -> List[Move]:
    """
    All legal moves for ``side`` in row-major order.

    An empty list means ``side`` has to pass.
    """
    size = board.shape[0]
    moves = []
    for row, col in _frontier(board, side):
        flips = get_flips(board, row, col, side, size)
        if flips:
            moves.append(Move(position=(row, col), flips=tuple(flips)))
    return moves


def has_legal_move(board: np.ndarray, side: int) -> bool:
    size = board.shape[0]
    return any(get_flips(board, row, col, side, size) for row, col in _frontier(board, side))


def find_move(board: np.ndarray, side: int, position: Sequence[int]) -> Optional[Move]:
    """Return the legal move for ``side`` at ``position``, or None if it is not legal."""
    row, col = check_position(position, board.shape[0])
    flips = get_flips(board, row, col, side, board.shape[0])
    if not flips:
        return None
    return Move(position=(row, col), flips=tuple(flips))


def apply_move(board: np.ndarray, move: Move, side: int) -> np.ndarray:
    """New board with the target and every listed flip set to ``side``."""
    new_board = board.copy()
    new_board[move.position] = side
    for flip in move.flips:
        new_board[flip] = side
    return freeze(new_board)


def score(board: np.ndarray) -> Tuple[int, int]:
    """(black, white) stone counts."""
    return count_pieces(board)


def is_terminal(board: np.ndarray) -> bool:
    return not has_legal_move(board, BLACK) and not has_legal_move(board, WHITE)


def winner(board: np.ndarray) -> Optional[int]:
    """1 Black, -1 White, 0 draw, None while either side can still move."""
    if not is_terminal(board):
        return None
    return stone_leader(board)


def stone_leader(board: np.ndarray) -> int:
    black, white = count_pieces(board)
    if black > white:
        return BLACK
    if white > black:
        return WHITE
    return 0
