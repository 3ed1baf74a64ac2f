"""Option value object.

A typed, immutable handle on a configuration key.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

E = TypeVar("E")


@dataclass(frozen=True)
class Option(Generic[E]):
    """
    Named reference to a configuration key with an expected value type.

    The option owns no data: it only tells a configuration which key to
    use and which type to coerce the stored value to when reading.
    Equality and hashing use the key alone, so two options pointing at
    the same key are interchangeable.

    value_type must be passed explicitly: a subscript such as
    Option[int]("retries") is only a static hint and leaves value_type
    as object, so reads through it are not type-checked.

    Example:
        DEBUG = Option("app.debug", bool, default=False)
        config.enable(DEBUG)
        config.is_enabled(DEBUG)  # True
    """

    key: str
    value_type: Any = field(default=object, compare=False)
    default: Optional[E] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise ValueError("Option key must be a non-empty string")

    def __str__(self) -> str:
        return self.key
