# src/personal_tasks/connectors/console_presenter.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..i18n import message, normalize_locale, priority_choices
from ..tasks.errors import TaskIntakeError
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

Writer = Callable[[str], None]


class ConsolePresenter:
    """
    Presenter that prints localized outcome messages.

    `write` defaults to print(); tests pass a list's append instead.
    """

    def __init__(self, locale: str = "en", write: Writer | None = None) -> None:
        self.locale = normalize_locale(locale)
        self._write: Writer = write or print

    def task_added(self, task: Task) -> None:
        self._write(message(self.locale, "task_added", id=task.id))

    def intake_failed(self, error: TaskIntakeError) -> None:
        logger.debug("Presenting intake error kind=%s", error.kind)
        self._write(
            message(
                self.locale,
                error.kind,
                priorities=priority_choices(self.locale),
                cause=getattr(error, "cause", ""),
                title=getattr(error, "title", ""),
                due_date=getattr(error, "due_date", ""),
            )
        )

    def store_unreadable(self, path: Path, reason: str) -> None:
        self._write(message(self.locale, "store_unreadable", path=path, reason=reason))
