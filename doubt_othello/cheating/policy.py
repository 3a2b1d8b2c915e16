"""When the AI is allowed to cheat."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from ..config.schema import EXTREME, CheatConfig, check_difficulty

DEFAULT_CHEAT_CONFIG = CheatConfig()

MIN_CHEAT_TURN = DEFAULT_CHEAT_CONFIG.min_turn
CHEAT_COOLDOWN_TURNS = DEFAULT_CHEAT_CONFIG.cooldown_turns
LATE_GAME_TURN = DEFAULT_CHEAT_CONFIG.late_game_turn
CHEAT_PROBABILITY = dict(DEFAULT_CHEAT_CONFIG.probability)
MAX_CHEATS_PER_GAME = dict(DEFAULT_CHEAT_CONFIG.max_cheats)


def cheat_probability(difficulty: str, turn: int, config: Optional[CheatConfig] = None) -> float:
    """Base probability for ``difficulty`` scaled up linearly with game progress."""
    config = config or DEFAULT_CHEAT_CONFIG
    base = config.probability[check_difficulty(difficulty)]
    span = max(1, config.full_scale_turn - config.min_turn)
    progress = min(1.0, max(0.0, (turn - config.min_turn) / span))
    return min(config.max_probability, base * (1.0 + config.turn_scaling * progress))


def should_cheat(
    difficulty: str,
    turn: int,
    cheat_history: Sequence[Any],
    rng: Optional[np.random.Generator] = None,
    config: Optional[CheatConfig] = None,
) -> bool:
    """
    Decide whether the AI corrupts its move on ``turn``.

    Args:
        difficulty: Difficulty name.
        turn: Current turn number (1-based, counts every ply).
        cheat_history: Cheats made so far this game, oldest first. Only
            ``len()`` and the last item's ``turn`` attribute are used.
        rng: Generator for the probability gate.
        config: Policy thresholds; module defaults when omitted.
    """
    config = config or DEFAULT_CHEAT_CONFIG
    check_difficulty(difficulty)

    if not config.enabled:
        return False
    if turn < config.min_turn:
        return False
    if len(cheat_history) >= config.max_cheats[difficulty]:
        return False
    if difficulty == EXTREME and turn > config.late_game_turn:
        return True
    if cheat_history and turn - cheat_history[-1].turn < config.cooldown_turns:
        return False

    rng = rng if rng is not None else np.random.default_rng()
    return bool(rng.random() < cheat_probability(difficulty, turn, config))
