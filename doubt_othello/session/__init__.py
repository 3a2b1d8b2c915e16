"""Game session: state machine, immutable states and errors."""

from .errors import (
    GameError,
    GameOverError,
    IllegalMoveError,
    InvalidPositionError,
    NoActiveCheatWindowError,
    OutOfTurnError,
)
from .game_session import AI_SIDE, PLAYER_SIDE, GameSession
from .state import (
    DRAW,
    END_CHALLENGE_FAILED,
    END_CHALLENGE_SUCCEEDED,
    END_NO_MOVES,
    LOSS,
    WIN,
    ChallengeWindow,
    GameOutcome,
    GameState,
)

__all__ = [
    "AI_SIDE",
    "ChallengeWindow",
    "DRAW",
    "END_CHALLENGE_FAILED",
    "END_CHALLENGE_SUCCEEDED",
    "END_NO_MOVES",
    "GameError",
    "GameOutcome",
    "GameOverError",
    "GameSession",
    "GameState",
    "IllegalMoveError",
    "InvalidPositionError",
    "LOSS",
    "NoActiveCheatWindowError",
    "OutOfTurnError",
    "PLAYER_SIDE",
    "WIN",
]
