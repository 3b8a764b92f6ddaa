# src/taskdeck/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from .errors import TaskNotFoundError
from .task_models import Task, parse_due_date, parse_tags

logger = logging.getLogger(__name__)

TagsInput = str | Iterable[str] | None
DueInput = str | date | None


class TaskStore:
    """
    In-memory task store.

    Owns the ordered task list and the id counter:
    - ids are handed out by the store and never reused, even after delete
    - next_id is always greater than any id ever assigned
    - tags are normalized (trim + lowercase, no empties) on every write

    Persistence lives in tasks/persistence.py; this class never touches the disk.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1

    @classmethod
    def from_tasks(cls, tasks: Iterable[Task], next_id: int = 1) -> TaskStore:
        """
        Rebuild a store from persisted tasks.

        Raises ValueError on duplicate or non-positive ids. A next_id that is too
        low is raised to max(id) + 1 so restored ids can never be handed out again.
        """
        store = cls()
        seen: set[int] = set()
        for task in tasks:
            if task.id < 1:
                raise ValueError(f"task id must be positive, got {task.id}")
            if task.id in seen:
                raise ValueError(f"duplicate task id {task.id}")
            seen.add(task.id)
            store._tasks.append(task)

        floor = max(seen) + 1 if seen else 1
        if next_id < floor:
            logger.warning("next_id=%s is not above stored ids; raising to %s", next_id, floor)
            next_id = floor
        store._next_id = next_id
        return store

    # ---- introspection ----

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the tasks in store order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def _index_of(self, task_id: int) -> int:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    # ---- mutations ----

    def create(self, description: str, tags: TagsInput = None, due_date: DueInput = None) -> Task:
        # Parse before allocating, so a bad date leaves the counter untouched.
        due = parse_due_date(due_date)
        task = Task(
            id=self._next_id,
            description=description,
            completed=False,
            tags=parse_tags(tags),
            due_date=due,
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Task created id=%s tags=%s due=%s", task.id, task.tags, task.due_date)
        return task

    def complete(self, task_id: int) -> Task:
        task = self.get(task_id)
        task.completed = True
        logger.debug("Task completed id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        task = self._tasks.pop(self._index_of(task_id))
        logger.debug("Task deleted id=%s", task_id)
        return task

    def edit(
        self,
        task_id: int,
        new_description: str,
        new_tags: TagsInput = None,
        new_due_date: DueInput = None,
    ) -> Task:
        """Replace description, tags and due date. None or "" clears the due date."""
        task = self.get(task_id)
        due = parse_due_date(new_due_date)
        task.description = new_description
        task.tags = parse_tags(new_tags)
        task.due_date = due
        logger.debug("Task edited id=%s tags=%s due=%s", task_id, task.tags, task.due_date)
        return task

    # ---- queries ----

    def query(self, filter: str | None = None) -> Iterator[Task]:
        """
        Lazily yield tasks in store order.

        Without a filter (or with a blank one) every task is yielded. Otherwise a
        task is yielded if one of its tags equals the lowercased filter, or its
        description contains the filter case-insensitively.
        """
        needle = (filter or "").strip()
        for task in self._tasks:
            if not needle or task.matches(needle):
                yield task
