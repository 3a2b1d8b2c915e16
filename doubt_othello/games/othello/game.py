"""Othello game rules (immutable state, for search algorithms)."""

from __future__ import annotations

from typing import Optional, Sequence

from ..turn_based_game import TurnBasedGame
from .board import apply_move, has_legal_move, initial_board, legal_moves, stone_leader
from .state import Move, OthelloState
from .utils import BLACK, OTHELLO_SIZE


class OthelloGame(TurnBasedGame[OthelloState, Move]):
    """
    Pure Othello rules without session bookkeeping: only state transitions.
    """

    def __init__(self, size: int = OTHELLO_SIZE) -> None:
        self.size = size

    def initial_state(self) -> OthelloState:
        return OthelloState(board=initial_board(self.size), side_to_move=BLACK)

    def legal_actions(self, state: OthelloState) -> Sequence[Move]:
        return legal_moves(state.board, state.side_to_move)

    def apply_action(self, state: OthelloState, action: Move) -> OthelloState:
        if not action.flips:
            raise ValueError(f"Invalid move at {action.position}")
        board = apply_move(state.board, action, state.side_to_move)
        return OthelloState(
            board=board,
            side_to_move=-state.side_to_move,
            last_move=action.position,
        )

    def pass_turn(self, state: OthelloState) -> OthelloState:
        return OthelloState(board=state.board, side_to_move=-state.side_to_move)

    def current_player(self, state: OthelloState) -> int:
        return state.side_to_move

    def is_terminal(self, state: OthelloState) -> bool:
        return not has_legal_move(state.board, BLACK) and not has_legal_move(state.board, -BLACK)

    def winner(self, state: OthelloState) -> Optional[int]:
        if not self.is_terminal(state):
            return None
        return stone_leader(state.board)
