# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks.task_models import Priority
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    A SimpleNamespace keeps tests independent of the real environment / .env.
    """
    return SimpleNamespace(
        app_name="tasks",
        log_level="INFO",
        data_dir=tmp_path / "data",
        default_priority=Priority.LOW,
        deadline_format="%Y-%m-%d %H:%M",
        console_color=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, task_store=TaskStore())


@pytest.fixture()
def scenario_state(state: AppState) -> AppState:
    """The three-task scenario: two tasks share a deadline, two share a priority."""
    store = state.task_store
    store.add_task(title="Write report", priority=Priority.HIGH, deadline=datetime(2024, 1, 10, 9, 0))
    store.add_task(title="Buy milk", priority=Priority.LOW, deadline=datetime(2024, 1, 5, 8, 0))
    store.add_task(title="Call client", priority=Priority.HIGH, deadline=datetime(2024, 1, 5, 8, 0))
    return state
