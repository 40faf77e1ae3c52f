# src/task_tracker/cli/commands.py

"""
Slash commands for the console connector.

Input validation lives here: the task store assumes a non-empty title and a
present deadline, so anything else is rejected before it reaches the core.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Priority, Section, SortType
from .render import render_board, sort_indicator

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: /add <title> | [low|medium|high] | <YYYY-MM-DD HH:MM>"


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        # Handlers that take the argument text verbatim as args[0].
        self._raw: set[CommandHandler] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        if raw:
            self._raw.add(handler)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = [rest] if handler in self._raw else rest.split()
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- input parsing (presentation boundary) ----


def parse_deadline(raw: str) -> datetime:
    """
    Parse a deadline such as "2024-01-10 09:00" or "2024-01-10T09:00".
    A bare date means midnight.

    Deadlines are naive local time. Input with a UTC offset
    ("2024-01-10T09:00+02:00", "...Z") is converted to local time and the
    offset dropped, so every stored deadline compares with every other.
    """
    text = (raw or "").strip()
    if not text:
        raise ValueError("Deadline is required.")
    try:
        deadline = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid deadline: {text!r} (expected YYYY-MM-DD HH:MM)") from None
    if deadline.tzinfo is not None:
        deadline = deadline.astimezone().replace(tzinfo=None)
    return deadline


def parse_add_args(
    text: str, default_priority: Priority
) -> tuple[str, Priority, datetime]:
    """
    "<title> | <priority> | <deadline>" or "<title> | <deadline>".

    Only the padding around each "|" is stripped; the title keeps its inner
    whitespace as typed. Raises ValueError with a user-facing message.
    """
    fields = [f.strip() for f in text.split("|")]
    if len(fields) == 2:
        title, prio_raw, deadline_raw = fields[0], "", fields[1]
    elif len(fields) == 3:
        title, prio_raw, deadline_raw = fields
    else:
        raise ValueError(ADD_USAGE)

    if not title:
        raise ValueError("Title must not be empty.")

    priority = Priority.from_str(prio_raw) if prio_raw else default_priority
    return title, priority, parse_deadline(deadline_raw)


def _parse_ids(args: list[str]) -> list[int]:
    if not args:
        raise ValueError("At least one task id is required.")
    ids: list[int] = []
    for a in args:
        try:
            ids.append(int(a.lstrip("#")))
        except ValueError:
            raise ValueError(f"Invalid task id: {a!r}") from None
    return ids


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_board(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    active = task_api.active_tasks_sorted(state)
    done = task_api.completed_tasks(state)
    vis = task_api.section_visibility(state)
    shown = ", ".join(f"{s.value}={'shown' if v else 'hidden'}" for s, v in vis.items())
    return (
        "Status:\n"
        f"  Active tasks: {len(active)}\n"
        f"  Completed tasks: {len(done)}\n"
        f"  Sort: {sort_indicator(task_api.sort_specification(state))}\n"
        f"  Sections: {shown}"
    )


def cmd_add(state: AppState, args: list[str]) -> str:
    default_priority = getattr(state.settings, "default_priority", Priority.LOW)
    try:
        title, priority, deadline = parse_add_args(args[0] if args else "", default_priority)
    except ValueError as e:
        logger.debug("Rejected /add input: %s", e)
        return str(e)

    task = task_api.create_task(state, title=title, priority=priority, deadline=deadline)
    return f"Added task #{task.id}: {task.title} [{task.priority.value}]"


def cmd_done(state: AppState, args: list[str]) -> str:
    try:
        ids = _parse_ids(args)
    except ValueError as e:
        return f"{e} Usage: /done <id> [<id> ...]"

    lines: list[str] = []
    for task_id in ids:
        existing = state.task_store.get_task(task_id)
        if existing is None:
            lines.append(f"No task with id {task_id}.")
        elif task_api.complete_task(state, task_id):
            lines.append(f"Completed task #{task_id}.")
        else:
            lines.append(f"Task #{task_id} is already completed.")
    return "\n".join(lines)


def cmd_delete(state: AppState, args: list[str]) -> str:
    try:
        ids = _parse_ids(args)
    except ValueError as e:
        return f"{e} Usage: /del <id> [<id> ...]"

    lines: list[str] = []
    for task_id in ids:
        if task_api.delete_task(state, task_id):
            lines.append(f"Deleted task #{task_id}.")
        else:
            lines.append(f"No task with id {task_id}.")
    return "\n".join(lines)


def cmd_sort(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Sort: {sort_indicator(task_api.sort_specification(state))}. Usage: /sort date|priority"
    try:
        sort_type = SortType.from_str(args[0])
    except ValueError as e:
        return str(e)

    spec = task_api.toggle_sort(state, sort_type)
    return f"Sort: {sort_indicator(spec)}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle form|active|completed"
    try:
        section = Section.from_str(args[0])
    except ValueError as e:
        return str(e)

    shown = task_api.toggle_section(state, section)
    return f"Section {section.value} is now {'shown' if shown else 'hidden'}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task sections.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show counts, sort and section state.")
registry.register(
    "add", cmd_add, help_text="Add a task: /add <title> | [priority] | <deadline>.", raw=True
)
registry.register("done", cmd_done, help_text="Complete tasks: /done <id> [<id> ...].", aliases=["complete"])
registry.register("del", cmd_delete, help_text="Delete tasks: /del <id> [<id> ...].", aliases=["delete", "rm"])
registry.register("sort", cmd_sort, help_text="Sort active tasks: /sort date | /sort priority (again flips order).")
registry.register("toggle", cmd_toggle, help_text="Show/hide a section: /toggle form|active|completed.")
