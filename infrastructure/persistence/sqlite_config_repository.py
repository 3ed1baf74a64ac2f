"""
SQLite-based configuration snapshot repository.

Persists the entries of a configuration store in a SQLite table so they
survive restarts. Values are stored as JSON strings; anything JSON cannot
represent is stored as its str() form, and values that fail to decode
come back as raw strings.
"""

import json
import logging
import os
from typing import Any, Dict

import aiosqlite

from domain.entities.configuration import MutableConfiguration

logger = logging.getLogger(__name__)


class SQLiteConfigRepository:
    """SQLite snapshot storage for configuration entries."""

    def __init__(self, db_path: str = "data/config.db"):
        self.db_path = db_path
        self._initialized = False

    async def init_db(self) -> None:
        """Create the config table if it doesn't exist."""
        if self._initialized:
            return
        db_dir = os.path.dirname(self.db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("""
                CREATE TABLE IF NOT EXISTS runtime_config (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)
            await db.commit()
        self._initialized = True

    async def save(self, entries: Dict[str, Any]) -> None:
        """Replace the stored snapshot with the given entries."""
        await self.init_db()
        rows = [(key, json.dumps(value, default=str)) for key, value in entries.items()]
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM runtime_config")
            await db.executemany(
                """INSERT INTO runtime_config (key, value, updated_at)
                   VALUES (?, ?, CURRENT_TIMESTAMP)""",
                rows,
            )
            await db.commit()
        logger.info(f"Config snapshot saved: {len(rows)} entries to {self.db_path}")

    async def load(self) -> Dict[str, Any]:
        """Load the stored snapshot."""
        await self.init_db()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT key, value FROM runtime_config")
            rows = await cursor.fetchall()
        result = {}
        for key, value in rows:
            try:
                result[key] = json.loads(value)
            except (json.JSONDecodeError, TypeError):
                result[key] = value
        return result

    async def restore(self, configuration: MutableConfiguration) -> MutableConfiguration:
        """Set every stored entry on the configuration."""
        entries = await self.load()
        for key, value in entries.items():
            configuration.set(key, value)
        logger.info(f"Config snapshot restored: {len(entries)} entries from {self.db_path}")
        return configuration
