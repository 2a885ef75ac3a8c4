# src/task_tracker/config.py

"""Settings loaded from environment variables (+ optional .env).

With nothing set, the tracker uses `tasks.json` in the working directory
and only logs warnings and errors.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"


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
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    store_path: Path
    log_level: str
    log_file: Path | None

    @staticmethod
    def from_env() -> "Settings":
        store_path = _env_path(_k("STORE_PATH"), Path("tasks.json")) or Path("tasks.json")
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_path(_k("LOG_FILE"), None)

        return Settings(
            store_path=store_path,
            log_level=log_level,
            log_file=log_file,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once per process; .env values never override the environment."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
