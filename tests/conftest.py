"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest

from domain.entities.configuration import MutableConfiguration
from domain.value_objects.option import Option
from infrastructure.persistence.in_memory_config_repository import InMemoryConfigRepository


# ============================================================================
# Option Fixtures
# ============================================================================

@pytest.fixture
def debug_option() -> Option:
    """Create a boolean flag option."""
    return Option("app.debug", bool, default=False)


@pytest.fixture
def timeout_option() -> Option:
    """Create a float option with a default."""
    return Option("http.timeout", float, default=30.0)


@pytest.fixture
def name_option() -> Option:
    """Create a string option."""
    return Option("app.name", str)


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def repository() -> InMemoryConfigRepository:
    """Create an empty in-memory store."""
    return InMemoryConfigRepository()


@pytest.fixture
def config(repository: InMemoryConfigRepository) -> MutableConfiguration:
    """Create a configuration over the in-memory store."""
    return MutableConfiguration(repository)
