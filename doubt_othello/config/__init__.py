"""Config package exports."""

from .schema import (
    ADVANCED,
    BEGINNER,
    DIFFICULTIES,
    EXTREME,
    INTERMEDIATE,
    AIConfig,
    AppConfig,
    ChallengeConfig,
    CheatConfig,
    check_difficulty,
    load_config,
)

__all__ = [
    "ADVANCED",
    "BEGINNER",
    "DIFFICULTIES",
    "EXTREME",
    "INTERMEDIATE",
    "AIConfig",
    "AppConfig",
    "ChallengeConfig",
    "CheatConfig",
    "check_difficulty",
    "load_config",
]
