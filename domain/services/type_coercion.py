"""
Runtime type coercion for stored configuration values.

Coercion here is a checked cast: the stored value is returned as-is when
its runtime type matches the requested one, otherwise TypeCoercionError
is raised. Nothing is ever converted or deserialized.
"""

import types
import typing
from typing import Any, Optional

from domain.exceptions import TypeCoercionError

# Requested types that accept any stored value
_ANY_TYPES = (object, Any)

# typing.Union and, on 3.10+, the X | Y form
_UNION_ORIGINS = tuple(
    u for u in (typing.Union, getattr(types, "UnionType", None)) if u is not None
)


def coerce(value: Any, expected_type: Any, key: Optional[str] = None) -> Any:
    """
    Check that value has expected_type and return it unchanged.

    Args:
        value: Stored value (None is the absence marker and always passes)
        expected_type: A class, a tuple of classes, or a parameterised
            generic such as List[str] (checked against its origin only)
        key: Configuration key, used in the error message

    Returns:
        The value itself

    Raises:
        TypeCoercionError: If the value's runtime type is incompatible
    """
    if value is None or expected_type in _ANY_TYPES or expected_type is None:
        return value

    target = _normalize(expected_type)
    if _is_instance(value, target):
        return value
    raise TypeCoercionError(key, expected_type, type(value))


def _normalize(expected_type: Any) -> Any:
    if isinstance(expected_type, tuple):
        return tuple(_normalize(t) for t in expected_type)

    origin = typing.get_origin(expected_type)
    if origin in _UNION_ORIGINS:
        return tuple(_normalize(t) for t in typing.get_args(expected_type))
    if origin is not None:
        return origin
    return expected_type


def _is_instance(value: Any, target: Any) -> bool:
    if isinstance(target, tuple):
        return any(_is_instance(value, t) for t in target)
    if target in _ANY_TYPES:
        return True
    if not isinstance(target, type):
        raise TypeError(f"Unsupported type for coercion: {target!r}")

    # bool is an int subclass; a flag is not a number
    if isinstance(value, bool) and target is not bool and target in (int, float):
        return False
    # int is not implicitly widened to float
    if target is float and isinstance(value, int):
        return False
    return isinstance(value, target)
