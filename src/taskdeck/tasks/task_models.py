# src/taskdeck/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

from .errors import DueDateParseError

DATE_FORMAT = "%Y-%m-%d"


class DisplayStatus(StrEnum):
    """
    Derived status shown next to a task in listings.

    Never persisted: it depends on "today", so it is recomputed on every listing.
    """

    DONE = "done"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    PENDING = "pending"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False
    tags: list[str] = field(default_factory=list)
    due_date: date | None = None

    def matches(self, needle: str) -> bool:
        """Exact tag match or case-insensitive substring of the description."""
        lowered = needle.lower()
        return lowered in self.tags or lowered in self.description.lower()


def parse_tags(raw: str | Iterable[str] | None) -> list[str]:
    """
    Normalize user tag input.

    Accepts a comma-separated string or an iterable of strings (each of which may
    itself contain commas). Tags are trimmed and lowercased; empties are dropped.
    Order is kept and duplicates are not removed.
    """
    if raw is None:
        return []
    chunks = [raw] if isinstance(raw, str) else list(raw)
    out: list[str] = []
    for chunk in chunks:
        for part in str(chunk).split(","):
            tag = part.strip().lower()
            if tag:
                out.append(tag)
    return out


def parse_due_date(raw: str | date | None) -> date | None:
    """
    Parse an ISO YYYY-MM-DD due date.

    None and blank strings mean "no due date". Anything else that is not a valid
    date raises DueDateParseError instead of being silently dropped.
    """
    if raw is None:
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise DueDateParseError(raw) from None


def format_due_date(value: date | None) -> str | None:
    return value.strftime(DATE_FORMAT) if value is not None else None


def classify_status(task: Task, today: date | None = None) -> DisplayStatus:
    if task.completed:
        return DisplayStatus.DONE
    if task.due_date is None:
        return DisplayStatus.PENDING
    if today is None:
        today = date.today()
    if task.due_date < today:
        return DisplayStatus.OVERDUE
    if task.due_date == today:
        return DisplayStatus.DUE_TODAY
    return DisplayStatus.PENDING
