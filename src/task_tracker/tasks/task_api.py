# src/task_tracker/tasks/task_api.py

"""
High-level task operations used by the presentation layer.

Every function takes the owning AppState first. Mutators go through
state.task_store / state.sort_spec / state.visibility; views are derived
on each call and never cached.
"""

from __future__ import annotations

import logging
from datetime import datetime

from ..core.state import AppState
from . import task_sorting
from .task_models import Priority, Section, SortSpec, SortType, Task

logger = logging.getLogger(__name__)


# ---- mutators ----


def create_task(
    state: AppState,
    *,
    title: str,
    priority: Priority,
    deadline: datetime,
) -> Task:
    task = state.task_store.add_task(title=title, priority=priority, deadline=deadline)
    logger.debug("Created task id=%s priority=%s", task.id, task.priority.value)
    return task


def delete_task(state: AppState, task_id: int) -> bool:
    removed = state.task_store.delete_task(task_id)
    if removed:
        logger.debug("Deleted task id=%s", task_id)
    else:
        logger.debug("Delete ignored, no task id=%s", task_id)
    return removed


def complete_task(state: AppState, task_id: int) -> bool:
    changed = state.task_store.complete_task(task_id)
    if changed:
        logger.debug("Completed task id=%s", task_id)
    else:
        logger.debug("Complete ignored, no open task id=%s", task_id)
    return changed


def toggle_sort(state: AppState, sort_type: SortType) -> SortSpec:
    state.sort_spec = task_sorting.toggle_sort(state.sort_spec, sort_type)
    logger.debug(
        "Sort spec now type=%s order=%s",
        state.sort_spec.type.value,
        state.sort_spec.order.value,
    )
    return state.sort_spec


def toggle_section(state: AppState, section: Section) -> bool:
    return state.visibility.toggle(section)


# ---- derived views ----


def active_tasks_sorted(state: AppState) -> list[Task]:
    active = [t for t in state.task_store.list_tasks() if not t.completed]
    return task_sorting.sort_tasks(state.sort_spec, active)


def completed_tasks(state: AppState) -> list[Task]:
    """Completed tasks in insertion order (never re-sorted)."""
    return [t for t in state.task_store.list_tasks() if t.completed]


def section_visibility(state: AppState) -> dict[Section, bool]:
    return state.visibility.snapshot()


def sort_specification(state: AppState) -> SortSpec:
    return state.sort_spec
