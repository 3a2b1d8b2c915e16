"""Key/value storage behind the statistics recorder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


class KeyValueStore(ABC):
    """Minimal storage interface; the game core never touches files or globals directly."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""

    def increment(self, key: str, amount: int = 1) -> int:
        """Add ``amount`` to the integer under ``key`` (missing counts as 0)."""
        value = int(self.get(key, 0)) + amount
        self.set(key, value)
        return value


class InMemoryStore(KeyValueStore):
    def __init__(self, data: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._data)


class YamlFileStore(InMemoryStore):
    """
    In-memory store mirrored to a YAML mapping on disk.

    The whole file is rewritten after every change.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        data: Dict[str, Any] = {}
        if self.path.exists():
            with self.path.open() as f:
                loaded = yaml.safe_load(f)
            if loaded is not None and not isinstance(loaded, dict):
                raise ValueError(f"Stats file must be a YAML mapping, got {type(loaded)}")
            data = loaded or {}
        super().__init__(data)

    def set(self, key: str, value: Any) -> None:
        super().set(key, value)
        self._flush()

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w") as f:
            yaml.safe_dump(self.as_dict(), f, sort_keys=True)
