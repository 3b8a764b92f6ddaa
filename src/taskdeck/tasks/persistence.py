# src/taskdeck/tasks/persistence.py

"""
JSON persistence for TaskStore.

File layout (field names are stable, keep them backward compatible):

    {
      "tasks": [
        {"id": 1, "description": "...", "completed": false,
         "tags": ["home"], "due_date": "2024-01-01"}
      ],
      "next_id": 2
    }

A missing file is a fresh store, not an error. Anything unreadable or malformed
raises instead of being replaced by an empty store, so user data is never
silently overwritten on the next save.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from .errors import DueDateParseError, TaskFileCorruptError
from .task_models import Task, format_due_date, parse_due_date
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "description": task.description,
        "completed": task.completed,
        "tags": list(task.tags),
        "due_date": format_due_date(task.due_date),
    }


def to_dict(store: TaskStore) -> dict[str, Any]:
    return {
        "tasks": [_task_to_dict(t) for t in store],
        "next_id": store.next_id,
    }


def _task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise ValueError("task entry is not an object")

    tid = raw.get("id")
    # bool is an int subclass; reject it explicitly
    if not isinstance(tid, int) or isinstance(tid, bool):
        raise ValueError(f"task id must be an integer, got {tid!r}")

    description = raw.get("description")
    if not isinstance(description, str):
        raise ValueError(f"task {tid}: description must be a string")

    completed = raw.get("completed", False)
    if not isinstance(completed, bool):
        raise ValueError(f"task {tid}: completed must be a boolean")

    tags = raw.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValueError(f"task {tid}: tags must be a list of strings")

    due_raw = raw.get("due_date")
    if due_raw is not None and not isinstance(due_raw, str):
        raise ValueError(f"task {tid}: due_date must be a string or null")
    try:
        due_date = parse_due_date(due_raw)
    except DueDateParseError as e:
        raise ValueError(f"task {tid}: {e}") from None

    return Task(
        id=tid,
        description=description,
        completed=completed,
        tags=list(tags),
        due_date=due_date,
    )


def from_dict(data: Any) -> TaskStore:
    """Build a TaskStore from decoded JSON. Raises ValueError on bad shapes."""
    if not isinstance(data, dict):
        raise ValueError("top-level value is not an object")

    raw_tasks = data.get("tasks", [])
    if not isinstance(raw_tasks, list):
        raise ValueError("'tasks' must be a list")

    next_id = data.get("next_id", 1)
    if not isinstance(next_id, int) or isinstance(next_id, bool):
        raise ValueError(f"'next_id' must be an integer, got {next_id!r}")

    tasks = [_task_from_dict(raw) for raw in raw_tasks]
    return TaskStore.from_tasks(tasks, next_id=next_id)


def save(store: TaskStore, path: str | Path) -> None:
    """
    Write the whole store to `path`, replacing previous contents.

    The JSON goes to a sibling .tmp file first and is then moved over the target.
    OSError (permissions, disk full, ...) propagates to the caller.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(to_dict(store), ensure_ascii=False, indent=2)

    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(payload + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError:
        logger.exception("Failed to save tasks to %s", path)
        tmp.unlink(missing_ok=True)
        raise
    logger.info("Saved %d tasks to %s (next_id=%s)", len(store), path, store.next_id)


def load(path: str | Path) -> TaskStore:
    """
    Load a TaskStore from `path`.

    Missing file -> empty store with next_id=1.
    Corrupt content -> TaskFileCorruptError. Read failures -> OSError.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No task file at %s; starting with an empty store.", path)
        return TaskStore()

    raw = path.read_bytes()
    try:
        store = from_dict(json.loads(raw.decode("utf-8")))
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueError subclasses too.
        # RecursionError comes from absurdly deep nesting.
        logger.error("Task file %s is corrupt: %s", path, e)
        raise TaskFileCorruptError(path, str(e)) from e

    logger.info("Loaded %d tasks from %s (next_id=%s)", len(store), path, store.next_id)
    return store
