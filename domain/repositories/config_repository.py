"""
Configuration Repository Interface

The untyped key-value store a configuration is built on. Implementations
only move raw values in and out; typing and coercion live in the
configuration entity.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IConfigRepository(ABC):
    """Interface for configuration key-value storage."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Get a raw value by key."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite a value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> Any:
        """Remove a key. Returns the previous value, or None if absent."""
        pass

    @abstractmethod
    def contains(self, key: str) -> bool:
        """Check whether a key is present."""
        pass

    @abstractmethod
    def get_all(self) -> Dict[str, Any]:
        """Get a copy of all key-value pairs."""
        pass

    @abstractmethod
    def get_by_prefix(self, prefix: str) -> Dict[str, Any]:
        """Get all values whose key starts with prefix."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every key."""
        pass
