"""Statistics: injected storage and per-game outcome recording."""

from .recorder import PlayerStats, StatsRecorder
from .store import InMemoryStore, KeyValueStore, YamlFileStore

__all__ = ["InMemoryStore", "KeyValueStore", "PlayerStats", "StatsRecorder", "YamlFileStore"]
