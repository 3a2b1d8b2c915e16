"""Othello rules package."""

from .board import (
    apply_move,
    find_move,
    has_legal_move,
    initial_board,
    is_terminal,
    legal_moves,
    score,
    winner,
)
from .eval import EvalWeights, evaluate_board
from .game import OthelloGame
from .state import Move, OthelloState
from .utils import (
    BLACK,
    EMPTY,
    OTHELLO_SIZE,
    WHITE,
    InvalidPositionError,
    Position,
    opponent,
    parse_board,
    render_board,
)

__all__ = [
    "BLACK",
    "EMPTY",
    "EvalWeights",
    "InvalidPositionError",
    "Move",
    "OTHELLO_SIZE",
    "OthelloGame",
    "OthelloState",
    "Position",
    "WHITE",
    "apply_move",
    "evaluate_board",
    "find_move",
    "has_legal_move",
    "initial_board",
    "is_terminal",
    "legal_moves",
    "opponent",
    "parse_board",
    "render_board",
    "score",
    "winner",
]
