# src/taskdeck/tasks/__init__.py

from .errors import (
    DueDateParseError,
    TaskdeckError,
    TaskFileCorruptError,
    TaskNotFoundError,
    TaskParseError,
)
from .persistence import load, save
from .task_models import DisplayStatus, Task, classify_status, parse_due_date, parse_tags
from .task_store import TaskStore

__all__ = [
    "DisplayStatus",
    "DueDateParseError",
    "Task",
    "TaskFileCorruptError",
    "TaskNotFoundError",
    "TaskParseError",
    "TaskStore",
    "TaskdeckError",
    "classify_status",
    "load",
    "parse_due_date",
    "parse_tags",
    "save",
]
