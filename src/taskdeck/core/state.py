# src/taskdeck/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..tasks import persistence
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Everything one run of the app works on.

    The store is owned here and passed explicitly to command handlers; there is
    no module-level store.
    """

    # Settings object (or a test double with the same attributes).
    settings: object

    task_store: TaskStore
    tasks_path: Path

    def save(self) -> None:
        persistence.save(self.task_store, self.tasks_path)
