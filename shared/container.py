"""
Dependency Injection Container

Centralizes creation and wiring of the configuration store and its
collaborators.

Usage:
    container = Container()
    container.setup_logging()
    config = container.configuration()
    await container.snapshot_repository().restore(config)
"""

import logging
from typing import Optional

from shared.config.settings import Settings

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container.

    Each component is created lazily and cached (singleton pattern).
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self._cache = {}

    def setup_logging(self) -> None:
        """Apply logging settings."""
        from shared.logging.config import setup_logging
        setup_logging(
            level=self.settings.logging.level,
            log_dir=self.settings.logging.log_dir,
        )

    # === Repository Layer ===

    def config_repository(self):
        """Get or create the in-memory configuration store"""
        if "config_repository" not in self._cache:
            from infrastructure.persistence.in_memory_config_repository import InMemoryConfigRepository
            self._cache["config_repository"] = InMemoryConfigRepository()
        return self._cache["config_repository"]

    def snapshot_repository(self):
        """Get or create SQLiteConfigRepository"""
        if "snapshot_repository" not in self._cache:
            from infrastructure.persistence.sqlite_config_repository import SQLiteConfigRepository
            self._cache["snapshot_repository"] = SQLiteConfigRepository(
                self.settings.storage.db_path
            )
        return self._cache["snapshot_repository"]

    # === Domain ===

    def configuration(self):
        """Get or create the MutableConfiguration"""
        if "configuration" not in self._cache:
            from domain.entities.configuration import MutableConfiguration
            self._cache["configuration"] = MutableConfiguration(self.config_repository())
            logger.debug("Configuration created")
        return self._cache["configuration"]
