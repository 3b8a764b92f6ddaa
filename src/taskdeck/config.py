# src/taskdeck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a sane default; a fresh install needs no configuration.
- Paths default to the per-user data directory of the current platform.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKDECK"
APP_DIR_NAME = "taskdeck"
TASKS_FILE_NAME = "tasks.json"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def default_data_dir() -> Path:
    """Per-user data directory for the app (XDG on Linux, Application Support, APPDATA)."""
    if sys.platform.startswith("win"):
        base = os.getenv("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        xdg = os.getenv("XDG_DATA_HOME")
        root = Path(xdg).expanduser() if xdg else Path.home() / ".local" / "share"
    return root / APP_DIR_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    file_logging: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path
    log_dir: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), APP_DIR_NAME).strip() or APP_DIR_NAME
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        file_logging = _env_bool(_k("FILE_LOGGING"), True)

        data_dir = _env_path(_k("DATA_DIR"), default_data_dir())
        tasks_path = _env_path(_k("TASKS_PATH"), data_dir / TASKS_FILE_NAME)
        log_dir = _env_path(_k("LOG_DIR"), data_dir)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            file_logging=file_logging,
            data_dir=data_dir,
            tasks_path=tasks_path,
            log_dir=log_dir,
        )


def get_settings(*, use_dotenv: bool = True) -> Settings:
    """
    Read settings from the environment.

    A local .env file is loaded first (without overriding real env vars).
    """
    if use_dotenv:
        load_dotenv(override=False)
    return Settings.from_env()
