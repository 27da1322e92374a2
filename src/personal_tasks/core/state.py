# src/personal_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..connectors.console_presenter import ConsolePresenter
from ..tasks.intake import TaskIntake
from ..tasks.task_store import JsonTaskStore


@dataclass
class AppState:
    # Settings object (or a SimpleNamespace in tests) for modules that need config.
    settings: Any

    store: JsonTaskStore
    intake: TaskIntake
    presenter: ConsolePresenter

    @property
    def locale(self) -> str:
        return self.presenter.locale
