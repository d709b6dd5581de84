"""Configuration models for tally."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

# Default config directory
TALLY_DIR = Path(".tally")
CONFIG_FILE = TALLY_DIR / "config.json"
DATA_FILE = TALLY_DIR / "tasks.txt"
LOG_FILE = TALLY_DIR / "tally.log"


class StorageConfig(BaseModel):
    """Configuration for the task file."""

    data_file: str = str(DATA_FILE)
    on_corrupt: Literal["skip", "abort"] = "skip"


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file: str = str(LOG_FILE)


class DisplayConfig(BaseModel):
    """Configuration for console output."""

    greet: bool = True


class TallyConfig(BaseModel):
    """Main configuration for tally."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TallyConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)
