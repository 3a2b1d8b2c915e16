"""Cheat injection, bookkeeping and verification."""

from .engine import CheatEngine, audit_move, is_sound_corruption, verify_challenge
from .policy import (
    CHEAT_COOLDOWN_TURNS,
    CHEAT_PROBABILITY,
    LATE_GAME_TURN,
    MAX_CHEATS_PER_GAME,
    MIN_CHEAT_TURN,
    cheat_probability,
    should_cheat,
)
from .record import CheatRecord, CorruptionKind
from .strategies import KIND_WEIGHTS

__all__ = [
    "CHEAT_COOLDOWN_TURNS",
    "CHEAT_PROBABILITY",
    "CheatEngine",
    "CheatRecord",
    "CorruptionKind",
    "KIND_WEIGHTS",
    "LATE_GAME_TURN",
    "MAX_CHEATS_PER_GAME",
    "MIN_CHEAT_TURN",
    "audit_move",
    "cheat_probability",
    "is_sound_corruption",
    "should_cheat",
    "verify_challenge",
]
