from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from ..games.turn_based_game import TurnBasedGame

S = TypeVar("S")
A = TypeVar("A")


class ActionPolicy(ABC, Generic[S, A]):
    """
    Abstract policy that selects actions using the game rules and state.

    Knows only about:
      - ``TurnBasedGame[S, A]``
      - a concrete ``S`` game state
      - optionally a list of legal actions
    """

    @abstractmethod
    def select_action(
        self,
        game: TurnBasedGame[S, A],
        state: S,
        legal_actions: Optional[Sequence[A]] = None,
    ) -> A:
        """
        Choose an action for ``state``.

        Args:
            game: rules / transitions implementation.
            state: current state.
            legal_actions: optional cached legal moves (fallbacks to
                ``game.legal_actions`` when ``None``).
        """
        raise NotImplementedError
