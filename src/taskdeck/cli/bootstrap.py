# src/taskdeck/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures the local data directory exists,
- loads the task store from disk (or starts empty on first run),
- wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks import persistence

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    Load errors (OSError, TaskFileCorruptError) propagate: starting with an empty
    store would overwrite the user's file on the first save.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = persistence.load(settings.tasks_path)
    return AppState(settings=settings, task_store=store, tasks_path=settings.tasks_path)
