"""Shared utilities for Othello game logic."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

OTHELLO_SIZE = 8

BLACK = 1
WHITE = -1
EMPTY = 0

Position = Tuple[int, int]

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]
CORNERS: Tuple[Position, ...] = ((0, 0), (0, 7), (7, 0), (7, 7))

_SYMBOLS = {BLACK: "B", WHITE: "W", EMPTY: "."}
_TOKENS = {"B": BLACK, "X": BLACK, "W": WHITE, "O": WHITE, ".": EMPTY, "-": EMPTY}


class InvalidPositionError(ValueError):
    """A position outside the board was passed in. Always a caller bug."""


def opponent(side: int) -> int:
    return -side


def in_bounds(row: int, col: int, size: int = OTHELLO_SIZE) -> bool:
    return 0 <= row < size and 0 <= col < size


def check_position(position: Sequence[int], size: int = OTHELLO_SIZE) -> Position:
    """
    Validate a ``(row, col)`` pair and return it as a tuple of ints.

    Raises:
        InvalidPositionError: if the pair is malformed or off the board.
    """
    try:
        row, col = position
    except (TypeError, ValueError):
        raise InvalidPositionError(f"Position must be a (row, col) pair, got {position!r}")
    if not isinstance(row, (int, np.integer)) or not isinstance(col, (int, np.integer)):
        raise InvalidPositionError(f"Position coordinates must be integers, got {position!r}")
    if not in_bounds(row, col, size):
        raise InvalidPositionError(f"Position {position!r} is outside the {size}x{size} board")
    return int(row), int(col)


def freeze(board: np.ndarray) -> np.ndarray:
    """Mark ``board`` read-only and return it."""
    board.flags.writeable = False
    return board


def get_flips(
    board: np.ndarray,
    row: int,
    col: int,
    player: int,
    size: int = OTHELLO_SIZE,
) -> List[Position]:
    """
    Get all pieces that would be flipped by placing a piece at (row, col).

    Args:
        board: Game board array.
        row: Row position.
        col: Column position.
        player: Player token (1 or -1).
        size: Board size.

    Returns:
        List of (row, col) positions that would be flipped.
    """
    if board[row, col] != EMPTY:
        return []

    other = -player
    flips = []

    for dr, dc in DIRECTIONS:
        temp_flips = []
        r, c = row + dr, col + dc

        while 0 <= r < size and 0 <= c < size and board[r, c] == other:
            temp_flips.append((r, c))
            r += dr
            c += dc

        if 0 <= r < size and 0 <= c < size and board[r, c] == player and temp_flips:
            flips.extend(temp_flips)

    return flips


def count_pieces(board: np.ndarray) -> Tuple[int, int]:
    """
    Count pieces for each player.

    Args:
        board: Game board array.

    Returns:
        Tuple of (black_count, white_count).
    """
    black_count = np.sum(board == BLACK)
    white_count = np.sum(board == WHITE)
    return int(black_count), int(white_count)


def neighbours(row: int, col: int, size: int = OTHELLO_SIZE) -> Iterable[Position]:
    for dr, dc in DIRECTIONS:
        r, c = row + dr, col + dc
        if 0 <= r < size and 0 <= c < size:
            yield r, c


def is_corner(position: Position) -> bool:
    return position in CORNERS


def is_edge(position: Position, size: int = OTHELLO_SIZE) -> bool:
    """Edge cell that is not a corner."""
    row, col = position
    if is_corner(position):
        return False
    return row == 0 or row == size - 1 or col == 0 or col == size - 1


def parse_board(rows: Sequence[str]) -> np.ndarray:
    """
    Build a read-only board from text rows.

    ``B``/``X`` is Black, ``W``/``O`` is White, ``.``/``-`` is empty.
    Whitespace inside a row is ignored.
    """
    if len(rows) != OTHELLO_SIZE:
        raise ValueError(f"Expected {OTHELLO_SIZE} rows, got {len(rows)}")
    board = np.zeros((OTHELLO_SIZE, OTHELLO_SIZE), dtype=np.int8)
    for r, line in enumerate(rows):
        cells = line.replace(" ", "")
        if len(cells) != OTHELLO_SIZE:
            raise ValueError(f"Row {r} must have {OTHELLO_SIZE} cells: {line!r}")
        for c, ch in enumerate(cells):
            if ch not in _TOKENS:
                raise ValueError(f"Unknown cell symbol {ch!r} in row {r}")
            board[r, c] = _TOKENS[ch]
    return freeze(board)


def render_board(board: np.ndarray, highlight: Iterable[Position] = ()) -> str:
    """Text rendering with row/column indices. Highlighted cells are shown as ``*``."""
    marks = set(highlight)
    size = board.shape[0]
    lines = ["  " + " ".join(str(i) for i in range(size))]
    for row in range(size):
        cells = []
        for col in range(size):
            if (row, col) in marks and board[row, col] == EMPTY:
                cells.append("*")
            else:
                cells.append(_SYMBOLS[int(board[row, col])])
        lines.append(f"{row} " + " ".join(cells))
    return "\n".join(lines)
