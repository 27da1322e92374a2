# src/personal_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local directories exist,
- wires concrete implementations into AppState (store/presenter/intake).
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..connectors.console_presenter import ConsolePresenter, Writer
from ..core.ports import Clock, IdSource
from ..core.state import AppState
from ..tasks.intake import TaskIntake
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    Path(settings.data_dir).mkdir(parents=True, exist_ok=True)
    Path(settings.tasks_db_path).parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    write: Writer | None = None,
    clock: Clock | None = None,
    ids: IdSource | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    presenter = ConsolePresenter(locale=getattr(settings, "locale", "en"), write=write)
    store = JsonTaskStore(settings.tasks_db_path, presenter=presenter)
    intake = TaskIntake(store, clock=clock, ids=ids, presenter=presenter)

    logger.debug("State ready db=%s locale=%s", store.path, presenter.locale)
    return AppState(settings=settings, store=store, intake=intake, presenter=presenter)
