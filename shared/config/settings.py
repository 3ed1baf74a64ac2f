from dataclasses import dataclass
import os
from dotenv import load_dotenv

load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    log_dir: str = ""

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        level = os.getenv("CONFIG_LOG_LEVEL", "INFO").upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"CONFIG_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level}")
        return cls(
            level=level,
            log_dir=os.getenv("CONFIG_LOG_DIR", ""),
        )


@dataclass
class StorageConfig:
    """Snapshot storage configuration"""
    db_path: str = "data/config.db"

    @classmethod
    def from_env(cls) -> "StorageConfig":
        return cls(db_path=os.getenv("CONFIG_DB_PATH", "data/config.db"))


@dataclass
class Settings:
    """Application settings"""
    logging: LoggingConfig
    storage: StorageConfig

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            logging=LoggingConfig.from_env(),
            storage=StorageConfig.from_env(),
        )
