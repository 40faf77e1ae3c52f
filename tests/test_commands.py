# tests/test_commands.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from task_tracker.cli.commands import (
    CommandRegistry,
    parse_add_args,
    parse_deadline,
    registry,
)
from task_tracker.tasks import task_api
from task_tracker.tasks.task_models import Priority, Section, SortOrder, SortType


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return "a:" + ",".join(args)

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a x y") == "a:x,y"
    assert reg.handle(state, "/ALPHA") == "a:"
    assert called["a"] == 2


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_parse_deadline_accepts_iso_forms() -> None:
    assert parse_deadline("2024-01-10T09:00") == datetime(2024, 1, 10, 9, 0)
    assert parse_deadline(" 2024-01-10 09:00 ") == datetime(2024, 1, 10, 9, 0)
    assert parse_deadline("2024-01-10") == datetime(2024, 1, 10)


@pytest.mark.parametrize("raw", ["", "   ", "tomorrow", "2024-13-01 09:00"])
def test_parse_deadline_rejects_missing_or_invalid(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_deadline(raw)


@pytest.mark.parametrize("raw", ["2024-01-10T09:00+02:00", "2024-01-10T07:00Z"])
def test_parse_deadline_converts_offset_to_naive_local(raw: str) -> None:
    expected = datetime(2024, 1, 10, 7, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    deadline = parse_deadline(raw)

    assert deadline.tzinfo is None
    assert deadline == expected


def test_mixed_offset_and_plain_deadlines_sort_and_render(state) -> None:
    registry.handle(state, "/add a | low | 2024-01-10T09:00+02:00")
    registry.handle(state, "/add b | low | 2024-01-10 09:00")
    registry.handle(state, "/add c | low | 2024-01-01 00:00")

    active = task_api.active_tasks_sorted(state)
    assert [t.title for t in active][0] == "c"
    assert {t.title for t in active} == {"a", "b", "c"}

    board = registry.handle(state, "/list") or ""
    assert "#1 a [low]" in board
    assert "#2 b [low]" in board


def test_registry_passes_raw_text_to_raw_handlers(state) -> None:
    reg = CommandRegistry()
    reg.register("echo", lambda state, args: repr(args), "echo", raw=True)

    assert reg.handle(state, "/echo  a\t  b |  c ") == repr(["a\t  b |  c "])
    assert reg.handle(state, "/echo") == repr([""])


def test_parse_add_args_with_and_without_priority() -> None:
    title, prio, due = parse_add_args("Write report | high | 2024-01-10 09:00", Priority.LOW)
    assert (title, prio, due) == ("Write report", Priority.HIGH, datetime(2024, 1, 10, 9, 0))

    title, prio, due = parse_add_args("Buy milk | 2024-01-05 08:00", Priority.MEDIUM)
    assert (title, prio) == ("Buy milk", Priority.MEDIUM)

    title, prio, due = parse_add_args("Buy milk | | 2024-01-05 08:00", Priority.LOW)
    assert prio == Priority.LOW


@pytest.mark.parametrize(
    "line",
    [
        " | high | 2024-01-10 09:00",
        "Write report | high | ",
        "Write report | urgent | 2024-01-10 09:00",
        "Write report",
        "a | b | c | d",
    ],
)
def test_parse_add_args_rejects_bad_input(line: str) -> None:
    with pytest.raises(ValueError):
        parse_add_args(line, Priority.LOW)


def test_add_command_creates_task(state) -> None:
    reply = registry.handle(state, "/add Write report | high | 2024-01-10 09:00")
    assert reply is not None and reply.startswith("Added task #1")

    (task,) = state.task_store.list_tasks()
    assert task.title == "Write report"
    assert task.priority == Priority.HIGH
    assert task.deadline == datetime(2024, 1, 10, 9, 0)


def test_add_command_rejects_empty_title_without_touching_store(state) -> None:
    reply = registry.handle(state, "/add  | low | 2024-01-10 09:00")
    assert reply == "Title must not be empty."
    assert state.task_store.count_tasks() == 0


def test_add_command_uses_default_priority(state) -> None:
    state.settings.default_priority = Priority.MEDIUM
    registry.handle(state, "/add Buy milk | 2024-01-05 08:00")
    assert state.task_store.list_tasks()[0].priority == Priority.MEDIUM


def test_add_command_keeps_inner_whitespace_of_title(state) -> None:
    registry.handle(state, "/add   Buy   milk\tnow  | low | 2024-01-05 08:00")

    (task,) = state.task_store.list_tasks()
    assert task.title == "Buy   milk\tnow"


def test_done_and_delete_commands(scenario_state) -> None:
    reply = registry.handle(scenario_state, "/done 2 99")
    assert reply == "Completed task #2.\nNo task with id 99."
    assert registry.handle(scenario_state, "/done #2") == "Task #2 is already completed."
    assert [t.title for t in task_api.completed_tasks(scenario_state)] == ["Buy milk"]

    reply = registry.handle(scenario_state, "/del 1 1")
    assert reply == "Deleted task #1.\nNo task with id 1."
    assert scenario_state.task_store.count_tasks() == 2

    assert "Invalid task id" in (registry.handle(scenario_state, "/del abc") or "")
    assert "At least one task id" in (registry.handle(scenario_state, "/done") or "")


def test_sort_command_toggles(state) -> None:
    assert registry.handle(state, "/sort date") == "Sort: [By Date ↓] | By Priority"
    assert state.sort_spec.order == SortOrder.DESC

    assert registry.handle(state, "/sort priority") == "Sort: By Date | [By Priority ↑]"
    assert state.sort_spec.type == SortType.PRIORITY
    assert state.sort_spec.order == SortOrder.ASC

    assert "Unknown sort type" in (registry.handle(state, "/sort title") or "")


def test_toggle_command(state) -> None:
    assert registry.handle(state, "/toggle form") == "Section creation_form is now shown."
    assert registry.handle(state, "/toggle completed") == "Section completed_list is now hidden."
    assert task_api.section_visibility(state) == {
        Section.CREATION_FORM: True,
        Section.ACTIVE_LIST: True,
        Section.COMPLETED_LIST: False,
    }
    assert "Unknown section" in (registry.handle(state, "/toggle footer") or "")


def test_status_and_help(scenario_state) -> None:
    status = registry.handle(scenario_state, "/status") or ""
    assert "Active tasks: 3" in status
    assert "Completed tasks: 0" in status

    help_text = registry.handle(scenario_state, "/help") or ""
    for name in ("add", "done", "del", "sort", "toggle", "list"):
        assert f"/{name} " in help_text
