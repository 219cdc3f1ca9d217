# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

- One Settings object for the whole process.
- Nothing is required: every value has a default.
- The tasks file path is handed to TaskStore explicitly, never read as a global.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_CLI"

DEFAULT_TASKS_FILE = "tasks.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw.strip()).expanduser()


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.WARNING


@dataclass(frozen=True, slots=True)
class Settings:
    tasks_file: Path
    log_level: str
    log_file: Path | None

    @property
    def console_level(self) -> int:
        return _level(self.log_level)

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            tasks_file=_env_path(_k("TASKS_FILE"), None) or Path(DEFAULT_TASKS_FILE),
            log_level=_env(_k("LOG_LEVEL"), DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL,
            log_file=_env_path(_k("LOG_FILE"), None),
        )


# Real environment always wins over .env.
load_dotenv(override=False)

SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
