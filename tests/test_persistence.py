# tests/test_persistence.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from taskdeck.tasks import persistence
from taskdeck.tasks.errors import TaskFileCorruptError, TaskParseError
from taskdeck.tasks.task_store import TaskStore


def _as_tuples(store: TaskStore) -> list[tuple]:
    return [(t.id, t.description, t.completed, list(t.tags), t.due_date) for t in store]


def test_load_missing_file_returns_empty_store(tmp_path: Path) -> None:
    store = persistence.load(tmp_path / "nope" / "tasks.json")
    assert len(store) == 0
    assert store.next_id == 1


def test_save_then_load_round_trips(tmp_path: Path) -> None:
    store = TaskStore()
    store.create("Buy milk", ["Home, Errand"], "2024-01-01")
    store.create("Write report", "work")
    store.create("Ünïcode ✓")
    store.complete(2)
    store.delete(3)
    store.edit(1, "Buy oat milk", "home, home", "")

    path = tmp_path / "nested" / "tasks.json"
    persistence.save(store, path)
    loaded = persistence.load(path)

    assert _as_tuples(loaded) == _as_tuples(store)
    assert loaded.next_id == store.next_id == 4
    # deleted id 3 must stay retired after reload
    assert loaded.create("fresh").id == 4


def test_saved_file_uses_stable_field_names(tmp_path: Path) -> None:
    store = TaskStore()
    store.create("Buy milk", "home", "2024-01-01")
    path = tmp_path / "tasks.json"
    persistence.save(store, path)

    data = json.loads(path.read_text("utf-8"))
    assert data == {
        "tasks": [
            {
                "id": 1,
                "description": "Buy milk",
                "completed": False,
                "tags": ["home"],
                "due_date": "2024-01-01",
            }
        ],
        "next_id": 2,
    }
    assert not path.with_suffix(".json.tmp").exists()


def test_save_overwrites_previous_contents(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text('{"garbage": true, "padding": "' + "x" * 500 + '"}', "utf-8")

    store = TaskStore()
    store.create("only")
    persistence.save(store, path)

    assert [t.description for t in persistence.load(path)] == ["only"]


def test_load_accepts_file_written_by_older_versions(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps(
            {
                "tasks": [
                    {"id": 4, "description": "a", "completed": True, "tags": [], "due_date": None},
                    {"id": 9, "description": "b", "completed": False, "tags": ["x"], "due_date": "2030-12-31"},
                ],
                "next_id": 10,
            }
        ),
        "utf-8",
    )
    store = persistence.load(path)
    assert [t.id for t in store] == [4, 9]
    assert store.get(9).due_date == date(2030, 12, 31)
    assert store.next_id == 10


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"tasks": {}, "next_id": 1}',
        '{"tasks": [], "next_id": "1"}',
        '{"tasks": [{"id": "1", "description": "a"}], "next_id": 2}',
        '{"tasks": [{"id": 1, "description": 5}], "next_id": 2}',
        '{"tasks": [{"id": 1, "description": "a", "completed": "no"}], "next_id": 2}',
        '{"tasks": [{"id": 1, "description": "a", "tags": "x"}], "next_id": 2}',
        '{"tasks": [{"id": 1, "description": "a", "due_date": "yesterday"}], "next_id": 2}',
        '{"tasks": [{"id": 1, "description": "a"}, {"id": 1, "description": "b"}], "next_id": 2}',
        '{"tasks": [{"id": 0, "description": "a"}], "next_id": 2}',
    ],
)
def test_load_corrupt_file_raises_parse_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")

    with pytest.raises(TaskFileCorruptError) as exc:
        persistence.load(path)

    assert isinstance(exc.value, TaskParseError)
    assert exc.value.path == path
    # the broken file is left alone for the user to inspect
    assert path.read_text("utf-8") == content


def test_load_non_utf8_file_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(TaskFileCorruptError):
        persistence.load(path)


def test_load_unreadable_path_raises_os_error(tmp_path: Path) -> None:
    # a directory where the file should be
    path = tmp_path / "tasks.json"
    path.mkdir()
    with pytest.raises(OSError):
        persistence.load(path)


def test_save_to_unwritable_location_raises_os_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", "utf-8")
    with pytest.raises(OSError):
        persistence.save(TaskStore(), blocker / "tasks.json")


def test_load_deeply_nested_file_is_corrupt(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("[" * 100_000 + "]" * 100_000, "utf-8")
    with pytest.raises(TaskFileCorruptError):
        persistence.load(path)


def test_failed_save_removes_temp_file_and_keeps_old_contents(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "tasks.json"
    path.write_text('{"tasks": [], "next_id": 5}', "utf-8")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(persistence.os, "replace", failing_replace)

    store = TaskStore()
    store.create("lost")
    with pytest.raises(OSError):
        persistence.save(store, path)

    assert not path.with_suffix(".json.tmp").exists()
    assert persistence.load(path).next_id == 5
