"""Errors raised by the game session."""

from __future__ import annotations

from typing import Optional

from ..games.othello import InvalidPositionError, Position


class GameError(Exception):
    """Base class for recoverable game-flow errors."""


class IllegalMoveError(GameError):
    """The player targeted a cell that is not a legal move."""

    def __init__(self, position: Position, message: Optional[str] = None):
        self.position = position
        super().__init__(message or f"{position} is not a legal move")


class NoActiveCheatWindowError(GameError):
    """A doubt was raised while no AI move is open to challenge."""


class OutOfTurnError(GameError):
    """An action was attempted by the side that is not to move."""


class GameOverError(GameError):
    """An action was attempted on a finished game."""


__all__ = [
    "GameError",
    "GameOverError",
    "IllegalMoveError",
    "InvalidPositionError",
    "NoActiveCheatWindowError",
    "OutOfTurnError",
]
