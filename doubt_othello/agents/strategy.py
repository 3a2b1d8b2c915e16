"""Difficulty-tier dispatch for the AI opponent."""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np

from ..config.schema import ADVANCED, BEGINNER, EXTREME, INTERMEDIATE, AIConfig, check_difficulty
from ..games.othello import Move
from ..registry import make_agent
from .base_agent import BaseAgent


class AIStrategy:
    """
    Picks the AI's move for any difficulty.

    One agent per tier is built lazily through the agent registry; all of
    them draw from the same injected generator, so a seeded strategy replays
    the same game.
    """

    def __init__(
        self,
        config: Optional[AIConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config or AIConfig()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._agents: Dict[str, BaseAgent] = {}

    def agent_for(self, difficulty: str) -> BaseAgent:
        check_difficulty(difficulty)
        if difficulty not in self._agents:
            self._agents[difficulty] = make_agent(difficulty, **self._agent_kwargs(difficulty))
        return self._agents[difficulty]

    def select_move(self, board: np.ndarray, side: int, difficulty: str) -> Optional[Move]:
        """Move for ``side`` at ``difficulty``; None means a forced pass."""
        return self.agent_for(difficulty).select_move(board, side)

    def _agent_kwargs(self, difficulty: str) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"rng": self.rng}
        if difficulty == INTERMEDIATE:
            kwargs["greedy_probability"] = self.config.greedy_probability
        elif difficulty == EXTREME:
            kwargs["depth"] = self.config.minimax_depth
            kwargs["use_alpha_beta"] = self.config.use_alpha_beta
        elif difficulty not in (BEGINNER, ADVANCED):
            raise ValueError(f"No agent settings for difficulty '{difficulty}'")
        return kwargs


def select_move(
    board: np.ndarray,
    side: int,
    difficulty: str,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Move]:
    """One-shot helper around :class:`AIStrategy` with default settings."""
    return AIStrategy(rng=rng).select_move(board, side, difficulty)
