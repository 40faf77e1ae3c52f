# src/task_tracker/core/visibility.py

from __future__ import annotations

import logging

from ..tasks.task_models import Section

logger = logging.getLogger(__name__)

# Form starts collapsed; both lists start expanded.
DEFAULT_VISIBILITY: dict[Section, bool] = {
    Section.CREATION_FORM: False,
    Section.ACTIVE_LIST: True,
    Section.COMPLETED_LIST: True,
}


class SectionVisibility:
    """Independent show/hide flag per UI section."""

    def __init__(self, initial: dict[Section, bool] | None = None) -> None:
        self._shown: dict[Section, bool] = dict(DEFAULT_VISIBILITY)
        if initial:
            self._shown.update(initial)

    def is_visible(self, section: Section) -> bool:
        return self._shown[section]

    def toggle(self, section: Section) -> bool:
        """Flip one section and return its new state. Other sections are untouched."""
        self._shown[section] = not self._shown[section]
        logger.debug("Section %s visible=%s", section.value, self._shown[section])
        return self._shown[section]

    def snapshot(self) -> dict[Section, bool]:
        return dict(self._shown)
