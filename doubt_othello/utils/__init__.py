"""Utility modules."""

from .metrics import MetricsLogger
from .match import MatchResult, play_game, play_match, should_doubt

__all__ = ["MatchResult", "MetricsLogger", "play_game", "play_match", "should_doubt"]
