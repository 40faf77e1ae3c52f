# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API.

The API layer depends on a Protocol instead of the concrete store,
so tests can swap in their own collection.
"""

from datetime import datetime
from typing import Protocol

from ..tasks.task_models import Priority, Task


class TaskRepo(Protocol):
    def list_tasks(self) -> tuple[Task, ...]: ...
    def count_tasks(self) -> int: ...
    def get_task(self, task_id: int) -> Task | None: ...

    def add_task(self, *, title: str, priority: Priority, deadline: datetime) -> Task: ...
    def delete_task(self, task_id: int) -> bool: ...
    def complete_task(self, task_id: int) -> bool: ...
