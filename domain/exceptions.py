"""
Configuration domain exceptions.
"""

from typing import Any, Optional


class ConfigurationError(Exception):
    """Base exception for configuration errors"""
    pass


class TypeCoercionError(ConfigurationError, TypeError):
    """
    Raised when a stored value is read with a type it does not have.

    Signals a programming mistake: an option written with one type and
    read back (via unset or get) with another, incompatible one.
    """

    def __init__(self, key: Optional[str], expected_type: Any, actual_type: type):
        self.key = key
        self.expected_type = expected_type
        self.actual_type = actual_type
        where = f" for key '{key}'" if key is not None else ""
        super().__init__(
            f"Cannot coerce value of type {_type_name(actual_type)}"
            f" to {_type_name(expected_type)}{where}"
        )


def _type_name(tp: Any) -> str:
    if isinstance(tp, tuple):
        return " | ".join(_type_name(t) for t in tp)
    return getattr(tp, "__name__", None) or str(tp)
