# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from personal_tasks.cli.bootstrap import create_initial_state
from personal_tasks.core.state import AppState
from personal_tasks.tasks.intake import TaskIntake
from personal_tasks.tasks.task_store import JsonTaskStore

from .fakes import FixedClock, RecordingPresenter, SequentialIdSource


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="personal-tasks-test",
        log_level="DEBUG",
        console_log=False,
        locale="en",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "tasks_database.json",
    )


@pytest.fixture()
def db_path(settings: SimpleNamespace) -> Path:
    return settings.tasks_db_path


@pytest.fixture()
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture()
def store(db_path: Path, presenter: RecordingPresenter) -> JsonTaskStore:
    return JsonTaskStore(db_path, presenter=presenter)


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def intake(store: JsonTaskStore, clock: FixedClock, presenter: RecordingPresenter) -> TaskIntake:
    return TaskIntake(store, clock=clock, ids=SequentialIdSource(), presenter=presenter)


@pytest.fixture()
def output() -> list[str]:
    return []


@pytest.fixture()
def state(settings: SimpleNamespace, output: list[str], clock: FixedClock) -> AppState:
    """
    AppState wired with a deterministic clock/id source and captured console output.

    NOTE: the real JSON store is used because its behaviour is part of what we test.
    """
    return create_initial_state(
        settings=settings,
        write=output.append,
        clock=clock,
        ids=SequentialIdSource(),
    )
