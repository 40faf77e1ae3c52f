# src/task_tracker/tasks/task_sorting.py

"""
Ordering of the active task list.

Both functions are pure: inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .task_models import Priority, SortOrder, SortSpec, SortType, Task

PRIORITY_RANK: dict[Priority, int] = {
    Priority.LOW: 1,
    Priority.MEDIUM: 2,
    Priority.HIGH: 3,
}


def priority_rank(priority: Priority) -> int:
    return PRIORITY_RANK[priority]


def _sort_key(sort_type: SortType) -> Callable[[Task], Any]:
    if sort_type == SortType.PRIORITY:
        return lambda t: priority_rank(t.priority)
    return lambda t: t.deadline


def sort_tasks(spec: SortSpec, tasks: Iterable[Task]) -> list[Task]:
    """
    Return a new list ordered by `spec`.

    sorted() is stable in both directions (reverse=True keeps equal items in
    input order), so insertion order stays the tie-break for asc and desc.
    """
    return sorted(
        tasks,
        key=_sort_key(spec.type),
        reverse=spec.order == SortOrder.DESC,
    )


def toggle_sort(spec: SortSpec, requested: SortType) -> SortSpec:
    """
    Same type -> flip the order.
    Other type -> switch to it, ascending.
    """
    if requested == spec.type:
        return SortSpec(type=spec.type, order=spec.order.flipped())
    return SortSpec(type=requested, order=SortOrder.ASC)
