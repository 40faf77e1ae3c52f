# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import SortSpec
from .ports import TaskRepo
from .visibility import SectionVisibility


@dataclass
class AppState:
    # Settings are kept on the state so commands/rendering can read them.
    settings: object

    task_store: TaskRepo
    sort_spec: SortSpec = field(default_factory=SortSpec)
    visibility: SectionVisibility = field(default_factory=SectionVisibility)
