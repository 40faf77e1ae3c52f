# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_str(cls, raw: str) -> Priority:
        """
        Parse user-facing priority text.

        Accepts the full name or its first letter ("h" -> high), any case.
        """
        key = (raw or "").strip().lower()
        for p in cls:
            if key in (p.value, p.value[0]):
                return p
        raise ValueError(f"Unknown priority: {raw!r} (expected low, medium or high)")


class SortType(StrEnum):
    DATE = "date"
    PRIORITY = "priority"

    @classmethod
    def from_str(cls, raw: str) -> SortType:
        key = (raw or "").strip().lower()
        if key in ("date", "deadline", "d"):
            return cls.DATE
        if key in ("priority", "prio", "p"):
            return cls.PRIORITY
        raise ValueError(f"Unknown sort type: {raw!r} (expected date or priority)")


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortOrder:
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


class Section(StrEnum):
    """UI sections whose visibility is toggled independently."""

    CREATION_FORM = "creation_form"
    ACTIVE_LIST = "active_list"
    COMPLETED_LIST = "completed_list"

    @classmethod
    def from_str(cls, raw: str) -> Section:
        key = (raw or "").strip().lower().replace("-", "_")
        aliases = {
            "form": cls.CREATION_FORM,
            "creation_form": cls.CREATION_FORM,
            "active": cls.ACTIVE_LIST,
            "active_list": cls.ACTIVE_LIST,
            "tasks": cls.ACTIVE_LIST,
            "completed": cls.COMPLETED_LIST,
            "completed_list": cls.COMPLETED_LIST,
            "done": cls.COMPLETED_LIST,
        }
        try:
            return aliases[key]
        except KeyError:
            raise ValueError(
                f"Unknown section: {raw!r} (expected form, active or completed)"
            ) from None


@dataclass(frozen=True, slots=True)
class SortSpec:
    type: SortType = SortType.DATE
    order: SortOrder = SortOrder.ASC


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    priority: Priority
    deadline: datetime
    completed: bool = False
