"""Immutable game state snapshots handed to the UI layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from ..cheating import CheatRecord
from ..games.othello import BLACK, WHITE, Move, Position, legal_moves

END_NO_MOVES = "no_moves"
END_CHALLENGE_SUCCEEDED = "challenge_succeeded"
END_CHALLENGE_FAILED = "challenge_failed"

WIN = "win"
LOSS = "loss"
DRAW = "draw"


@dataclass(frozen=True, eq=False)
class ChallengeWindow:
    """The most recent AI ply, open to a doubt until the player moves."""

    board_before: np.ndarray
    move: Move


@dataclass(frozen=True, eq=False)
class GameState:
    board: np.ndarray
    side_to_move: int
    black_count: int
    white_count: int
    turn: int
    difficulty: str
    last_move: Optional[Position] = None
    cheat_record: Optional[CheatRecord] = None
    challenge_window: Optional[ChallengeWindow] = None
    cheat_history: Tuple[CheatRecord, ...] = ()
    is_terminal: bool = False
    winner: Optional[int] = None
    successful_challenges: int = 0
    end_reason: Optional[str] = None

    @property
    def can_challenge(self) -> bool:
        return self.challenge_window is not None and not self.is_terminal

    @property
    def is_player_turn(self) -> bool:
        return not self.is_terminal and self.side_to_move == BLACK

    @property
    def legal_moves(self) -> List[Move]:
        if self.is_terminal:
            return []
        return legal_moves(self.board, self.side_to_move)

    @property
    def result(self) -> Optional[str]:
        """Outcome from the human (Black) player's point of view."""
        if not self.is_terminal:
            return None
        if self.winner == BLACK:
            return WIN
        if self.winner == WHITE:
            return LOSS
        return DRAW


@dataclass(frozen=True)
class GameOutcome:
    """Per-game report for the statistics layer."""

    result: str
    difficulty: str
    black_count: int
    white_count: int
    challenge_succeeded: bool
    turns: int
