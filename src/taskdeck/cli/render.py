# src/taskdeck/cli/render.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from ..tasks.task_models import DisplayStatus, Task, classify_status, format_due_date

STATUS_MARKERS: dict[DisplayStatus, str] = {
    DisplayStatus.DONE: "[x]",
    DisplayStatus.OVERDUE: "[!]",
    DisplayStatus.DUE_TODAY: "[~]",
    DisplayStatus.PENDING: "[ ]",
}

EMPTY_LISTING = "No tasks."


def render_task(task: Task, today: date | None = None) -> str:
    """One line per task: `[x] #1 Buy milk (2024-01-01) [home, errand]`."""
    status = classify_status(task, today)
    parts = [STATUS_MARKERS[status], f"#{task.id}", task.description or "<untitled>"]
    if task.due_date is not None:
        parts.append(f"({format_due_date(task.due_date)})")
    if task.tags:
        parts.append(f"[{', '.join(task.tags)}]")
    return " ".join(parts)


def render_tasks(tasks: Iterable[Task], today: date | None = None) -> str:
    if today is None:
        today = date.today()
    lines = [render_task(t, today) for t in tasks]
    return "\n".join(lines) if lines else EMPTY_LISTING
