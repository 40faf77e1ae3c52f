# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import itertools
import logging
from dataclasses import replace
from datetime import datetime

from .task_models import Priority, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    The collection keeps insertion order (used as the tie-break when sorting).
    Snapshots are tuples and every mutator swaps in a new one, so a snapshot
    handed out earlier never changes under the caller.

    Ids come from a per-store counter and are never reused, even after delete.
    """

    def __init__(self) -> None:
        self._tasks: tuple[Task, ...] = ()
        self._ids = itertools.count(1)
        logger.debug("TaskStore ready")

    # ---- read API ----

    def list_tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def count_tasks(self) -> int:
        return len(self._tasks)

    def get_task(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- mutators ----

    def add_task(self, *, title: str, priority: Priority, deadline: datetime) -> Task:
        """
        Append a new task. Input is assumed to be validated by the caller
        (non-empty title, deadline present).
        """
        task = Task(
            id=next(self._ids),
            title=title,
            priority=priority,
            deadline=deadline,
        )
        self._tasks = (*self._tasks, task)
        logger.debug(
            "Task added id=%s priority=%s deadline=%s",
            task.id,
            task.priority.value,
            task.deadline.isoformat(),
        )
        return task

    def delete_task(self, task_id: int) -> bool:
        """Remove the task with this id. Unknown ids are a no-op (returns False)."""
        kept = tuple(t for t in self._tasks if t.id != task_id)
        if len(kept) == len(self._tasks):
            logger.debug("delete_task: no task id=%s", task_id)
            return False
        self._tasks = kept
        logger.debug("Task deleted id=%s", task_id)
        return True

    def complete_task(self, task_id: int) -> bool:
        """
        Mark the task as completed.

        Returns True only when the collection changed: unknown ids and
        already-completed tasks are no-ops.
        """
        changed = False
        out: list[Task] = []
        for t in self._tasks:
            if t.id == task_id and not t.completed:
                t = replace(t, completed=True)
                changed = True
            out.append(t)

        if not changed:
            logger.debug("complete_task: nothing to do for id=%s", task_id)
            return False

        self._tasks = tuple(out)
        logger.debug("Task completed id=%s", task_id)
        return True
