# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from taskdeck.tasks.errors import DueDateParseError, TaskParseError
from taskdeck.tasks.task_models import DisplayStatus, Task, classify_status, parse_due_date, parse_tags

TODAY = date(2024, 6, 15)


def test_parse_tags_normalizes_and_keeps_order() -> None:
    assert parse_tags(["Home, Errand"]) == ["home", "errand"]
    assert parse_tags("  Work ,, URGENT , ") == ["work", "urgent"]
    assert parse_tags(["b", "a", "b"]) == ["b", "a", "b"]
    assert parse_tags(None) == []
    assert parse_tags("") == []


def test_parse_due_date_accepts_iso_and_blank() -> None:
    assert parse_due_date("2024-01-01") == date(2024, 1, 1)
    assert parse_due_date(" 2024-01-01 ") == date(2024, 1, 1)
    assert parse_due_date("") is None
    assert parse_due_date("   ") is None
    assert parse_due_date(None) is None
    assert parse_due_date(date(2024, 2, 3)) == date(2024, 2, 3)
    assert parse_due_date(datetime(2024, 2, 3, 10, 30)) == date(2024, 2, 3)


@pytest.mark.parametrize("raw", ["tomorrow", "2024-13-01", "2024-02-30", "01/02/2024"])
def test_parse_due_date_rejects_malformed_input(raw: str) -> None:
    with pytest.raises(DueDateParseError) as exc:
        parse_due_date(raw)
    assert exc.value.raw == raw
    assert isinstance(exc.value, TaskParseError)
    assert isinstance(exc.value, ValueError)


def test_classify_status_covers_all_states() -> None:
    overdue = Task(id=1, description="a", due_date=date(2024, 6, 14))
    due_today = Task(id=2, description="b", due_date=TODAY)
    future = Task(id=3, description="c", due_date=date(2024, 6, 16))
    undated = Task(id=4, description="d")

    assert classify_status(overdue, TODAY) is DisplayStatus.OVERDUE
    assert classify_status(due_today, TODAY) is DisplayStatus.DUE_TODAY
    assert classify_status(future, TODAY) is DisplayStatus.PENDING
    assert classify_status(undated, TODAY) is DisplayStatus.PENDING


def test_completed_task_is_done_regardless_of_due_date() -> None:
    task = Task(id=1, description="late", due_date=date(2024, 1, 1))
    assert classify_status(task, TODAY) is DisplayStatus.OVERDUE

    task.completed = True
    assert classify_status(task, TODAY) is DisplayStatus.DONE


def test_classify_status_defaults_to_today() -> None:
    task = Task(id=1, description="x", due_date=date.today())
    assert classify_status(task) is DisplayStatus.DUE_TODAY
