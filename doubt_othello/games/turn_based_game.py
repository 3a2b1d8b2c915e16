from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

S = TypeVar("S")  # state type
A = TypeVar("A")  # action type


class TurnBasedGame(ABC, Generic[S, A]):
    """
    Common interface for a deterministic two-player game with perfect information.
    No environments, only "pure" rules.
    """

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[A]:
        """All legal actions in the given state."""

    @abstractmethod
    def apply_action(self, state: S, action: A) -> S:
        """Return a new state after the action."""

    @abstractmethod
    def pass_turn(self, state: S) -> S:
        """Return the state with the other side to move and nothing played."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """
        Which player moves now:
        1 for Black and -1 for White.
        """

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Is the state final (nobody can move)?"""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * 1: the player with token +1
        * -1: the player with token -1
        * 0: draw
        * None: not finished yet
        """
