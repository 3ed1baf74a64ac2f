"""
Configuration Entity

Key-value configuration with typed Option handles layered over raw
string keys. Every typed operation resolves to one of two untyped
primitives on the underlying repository: set a key, or remove it.

Values are never converted on the way in. Reads (get, unset) coerce the
stored value to the requested type and fail with TypeCoercionError when
the runtime type does not match.

Usage:
    DEBUG = Option("app.debug", bool)
    TIMEOUT = Option("http.timeout", float, default=30.0)

    config = MutableConfiguration(InMemoryConfigRepository())
    config.enable(DEBUG).set(TIMEOUT, 12.5).set("app.name", "demo")

    config.get(TIMEOUT)             # 12.5
    config.unset("app.name", str)   # "demo"
"""

import logging
from typing import Any, Dict, List, Union

from domain.exceptions import TypeCoercionError
from domain.repositories.config_repository import IConfigRepository
from domain.services.type_coercion import coerce
from domain.value_objects.option import Option

logger = logging.getLogger(__name__)

KeyOrOption = Union[str, Option]


def _resolve_key(key_or_option: KeyOrOption) -> str:
    """Return the raw key an Option points at, or the key itself."""
    if isinstance(key_or_option, Option):
        return key_or_option.key
    return key_or_option


class Configuration:
    """Read access to a configuration store."""

    def __init__(self, repository: IConfigRepository):
        self._repo = repository

    @property
    def repository(self) -> IConfigRepository:
        return self._repo

    def get(
        self,
        key_or_option: KeyOrOption,
        as_type: Any = None,
        default: Any = None,
    ) -> Any:
        """
        Read a value, coerced to the requested type.

        Args:
            key_or_option: Raw key or Option
            as_type: Requested type. Defaults to the option's value type,
                or object (no check) for raw keys
            default: Returned when the key is absent. For an Option the
                option's own default is used when this is None

        Raises:
            TypeCoercionError: If the stored value has another type
        """
        key = _resolve_key(key_or_option)
        if isinstance(key_or_option, Option):
            if as_type is None:
                as_type = key_or_option.value_type
            if default is None:
                default = key_or_option.default

        if not self._repo.contains(key):
            return default
        return coerce(self._repo.get(key), as_type, key)

    def is_enabled(self, key_or_option: KeyOrOption) -> bool:
        """Read a flag. Absent flags fall back to the option default, else False."""
        default = False
        if isinstance(key_or_option, Option) and key_or_option.default is not None:
            default = key_or_option.default
        return self.get(key_or_option, as_type=bool, default=default)

    def contains(self, key_or_option: KeyOrOption) -> bool:
        return self._repo.contains(_resolve_key(key_or_option))

    def keys(self) -> List[str]:
        return list(self._repo.get_all().keys())

    def with_prefix(self, prefix: str) -> Dict[str, Any]:
        """Raw entries whose key starts with prefix, e.g. "http."."""
        return self._repo.get_by_prefix(prefix)

    def as_dict(self) -> Dict[str, Any]:
        """Copy of all raw entries."""
        return self._repo.get_all()

    def __contains__(self, key_or_option: KeyOrOption) -> bool:
        return self.contains(key_or_option)

    def __len__(self) -> int:
        return len(self._repo.get_all())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_dict()!r})"


class MutableConfiguration(Configuration):
    """
    Configuration with chainable mutation operations.

    Every mutator returns the configuration itself so calls can be chained:
        config.set("a", 1).enable("b").disable("c")
    """

    # === Primitives ===

    def set(self, key_or_option: KeyOrOption, value: Any) -> "MutableConfiguration":
        """
        Insert or overwrite a value.

        The value is stored as given. For an Option it is not checked
        against the option's value type; mismatches surface on read.
        """
        key = _resolve_key(key_or_option)
        self._repo.set(key, value)
        logger.debug(f"Config set: {key} = {value!r}")
        return self

    def unset(self, key_or_option: KeyOrOption, as_type: Any = None) -> Any:
        """
        Remove a value and return what was stored.

        Args:
            key_or_option: Raw key or Option
            as_type: Type the previous value must have. Defaults to the
                option's value type, or object (no check) for raw keys

        Returns:
            The previous value, or None if the key was never set

        Raises:
            TypeCoercionError: If the stored value has another type. The
                entry stays in the store in that case
        """
        key = _resolve_key(key_or_option)
        if as_type is None and isinstance(key_or_option, Option):
            as_type = key_or_option.value_type

        if not self._repo.contains(key):
            return None

        try:
            value = coerce(self._repo.get(key), as_type, key)
        except TypeCoercionError as e:
            logger.debug(f"Config unset refused for {key}: {e}")
            raise

        self._repo.remove(key)
        logger.debug(f"Config unset: {key}")
        return value

    # === Sugar ===

    def enable(self, key_or_option: KeyOrOption) -> "MutableConfiguration":
        """Set a flag to True."""
        return self.set(key_or_option, True)

    def disable(self, key_or_option: KeyOrOption) -> "MutableConfiguration":
        """Set a flag to False."""
        return self.set(key_or_option, False)

    def clear(self) -> "MutableConfiguration":
        """Remove every entry."""
        self._repo.clear()
        logger.debug("Config cleared")
        return self
