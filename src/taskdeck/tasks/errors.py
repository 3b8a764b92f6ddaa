# src/taskdeck/tasks/errors.py

from __future__ import annotations

from pathlib import Path


class TaskdeckError(Exception):
    """Base class for all taskdeck errors."""


class TaskNotFoundError(TaskdeckError, KeyError):
    """An operation referenced a task id that is not in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task #{self.task_id} not found."


class TaskParseError(TaskdeckError, ValueError):
    """User input or persisted data could not be parsed."""


class DueDateParseError(TaskParseError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid due date {raw!r}. Use YYYY-MM-DD.")
        self.raw = raw


class TaskFileCorruptError(TaskParseError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Task file {path} is corrupt: {reason}")
        self.path = Path(path)
        self.reason = reason
