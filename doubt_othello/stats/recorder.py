"""Win/loss bookkeeping across games."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..config.schema import check_difficulty
from .store import KeyValueStore

if TYPE_CHECKING:
    from ..session.state import GameOutcome


@dataclass(frozen=True)
class PlayerStats:
    total_games: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    successful_doubts: int = 0

    @property
    def win_rate(self) -> float:
        if self.total_games == 0:
            return 0.0
        return self.wins / self.total_games


class StatsRecorder:
    """
    Counts finished games in a :class:`KeyValueStore`.

    Keys: ``<scope>.games``, ``<scope>.win|loss|draw``, ``<scope>.doubts``
    where scope is ``all`` or a difficulty name.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def record(self, outcome: "GameOutcome") -> None:
        for scope in ("all", check_difficulty(outcome.difficulty)):
            self.store.increment(f"{scope}.games")
            self.store.increment(f"{scope}.{outcome.result}")
            if outcome.challenge_succeeded:
                self.store.increment(f"{scope}.doubts")

    def summary(self, difficulty: Optional[str] = None) -> PlayerStats:
        scope = "all" if difficulty is None else check_difficulty(difficulty)
        get = self.store.get
        return PlayerStats(
            total_games=int(get(f"{scope}.games", 0)),
            wins=int(get(f"{scope}.win", 0)),
            losses=int(get(f"{scope}.loss", 0)),
            draws=int(get(f"{scope}.draw", 0)),
            successful_doubts=int(get(f"{scope}.doubts", 0)),
        )
