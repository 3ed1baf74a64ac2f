"""
In-memory configuration repository.

Plain dict storage. This is the default store behind a configuration;
durability, if needed, comes from SQLiteConfigRepository snapshots.
"""

from typing import Any, Dict, Mapping, Optional

from domain.repositories.config_repository import IConfigRepository


class InMemoryConfigRepository(IConfigRepository):
    """Dict-backed implementation of the configuration store."""

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial) if initial else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def remove(self, key: str) -> Any:
        return self._data.pop(key, None)

    def contains(self, key: str) -> bool:
        return key in self._data

    def get_all(self) -> Dict[str, Any]:
        return dict(self._data)

    def get_by_prefix(self, prefix: str) -> Dict[str, Any]:
        return {k: v for k, v in self._data.items() if k.startswith(prefix)}

    def clear(self) -> None:
        self._data.clear()
