# src/task_tracker/cli/render.py

"""
Plain-text rendering of the three sections.

Only reads state through task_api views; hidden sections print their header
and a hint, never their content.
"""

from __future__ import annotations

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import Priority, Section, SortOrder, SortSpec, SortType, Task

BOLD = "\033[1m"
RESET = "\033[0m"
PRIORITY_COLOR: dict[Priority, str] = {
    Priority.LOW: "\033[32m",
    Priority.MEDIUM: "\033[33m",
    Priority.HIGH: "\033[31m",
}

SORT_LABELS: dict[SortType, str] = {
    SortType.DATE: "By Date",
    SortType.PRIORITY: "By Priority",
}

FORM_HINT = "/add <title> | <low|medium|high> | <YYYY-MM-DD HH:MM>"

_TOGGLE_NAMES: dict[Section, str] = {
    Section.CREATION_FORM: "form",
    Section.ACTIVE_LIST: "active",
    Section.COMPLETED_LIST: "completed",
}


def _color_enabled(state: AppState) -> bool:
    return bool(getattr(state.settings, "console_color", False))


def _deadline_format(state: AppState) -> str:
    return str(getattr(state.settings, "deadline_format", "%Y-%m-%d %H:%M"))


def sort_indicator(spec: SortSpec) -> str:
    """'By Date ↑ | By Priority': arrow only on the active sort type."""
    parts: list[str] = []
    for sort_type, label in SORT_LABELS.items():
        if sort_type == spec.type:
            arrow = "↑" if spec.order == SortOrder.ASC else "↓"
            parts.append(f"[{label} {arrow}]")
        else:
            parts.append(label)
    return " | ".join(parts)


def render_task(state: AppState, task: Task) -> str:
    prio = task.priority.value
    if _color_enabled(state):
        prio = f"{PRIORITY_COLOR[task.priority]}{prio}{RESET}"
    due = task.deadline.strftime(_deadline_format(state))
    return f"  #{task.id} {task.title} [{prio}] Due: {due}"


def _header(state: AppState, title: str, section: Section, shown: bool) -> str:
    marker = "-" if shown else "+"
    text = f"{title} [{marker}]"
    if _color_enabled(state):
        text = f"{BOLD}{text}{RESET}"
    if not shown:
        text += f"  (hidden, /toggle {_TOGGLE_NAMES[section]})"
    return text


def render_board(state: AppState) -> str:
    vis = task_api.section_visibility(state)
    lines: list[str] = []

    app_name = str(getattr(state.settings, "app_name", "tasks"))
    lines.append(_header(state, f"{app_name}: new task", Section.CREATION_FORM, vis[Section.CREATION_FORM]))
    if vis[Section.CREATION_FORM]:
        lines.append(f"  {FORM_HINT}")

    lines.append("")
    lines.append(_header(state, "Tasks", Section.ACTIVE_LIST, vis[Section.ACTIVE_LIST]))
    lines.append(f"  Sort: {sort_indicator(task_api.sort_specification(state))}")
    if vis[Section.ACTIVE_LIST]:
        active = task_api.active_tasks_sorted(state)
        if not active:
            lines.append("  (no active tasks)")
        lines.extend(render_task(state, t) for t in active)

    lines.append("")
    lines.append(_header(state, "Completed tasks", Section.COMPLETED_LIST, vis[Section.COMPLETED_LIST]))
    if vis[Section.COMPLETED_LIST]:
        done = task_api.completed_tasks(state)
        if not done:
            lines.append("  (no completed tasks)")
        lines.extend(render_task(state, t) for t in done)

    return "\n".join(lines)
