# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdeck.core.state import AppState
from taskdeck.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the user's environment and .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="taskdeck-test",
        log_level="DEBUG",
        file_logging=False,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_dir=data_dir,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState with a fresh in-memory store and a tmp task file path."""
    return AppState(settings=settings, task_store=store, tasks_path=settings.tasks_path)
