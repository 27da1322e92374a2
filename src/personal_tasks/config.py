# src/personal_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is read at import time; get_settings() builds it on first use.
- Paths are explicit values handed to the store, never module constants.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PTASKS"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    console_log: bool

    # ---- Presentation ----
    locale: str

    # ---- Local data paths ----
    data_dir: Path
    tasks_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "personal-tasks").strip() or "personal-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        console_log = _env_bool(_k("CONSOLE_LOG"), True)

        locale = _env(_k("LOCALE"), "en").strip() or "en"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/personal-tasks"))
        # The task document lives in the working directory unless overridden.
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), Path("tasks_database.json"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_log=console_log,
            locale=locale,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
