# tests/test_intake.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from personal_tasks.tasks.errors import (
    BadDueDateFormatError,
    BadPriorityError,
    DuplicateTaskError,
    EmptyTitleError,
    ErrorKind,
    PersistenceFailedError,
)
from personal_tasks.tasks.intake import TaskIntake
from personal_tasks.tasks.task_models import Priority, TaskStatus
from personal_tasks.tasks.task_store import JsonTaskStore

from .fakes import FailingStore, FixedClock, RecordingPresenter, SequentialIdSource

BUY_BOOKS = ("Buy books", "SE textbook", "2025-07-20", "High", False)
EXERCISE = ("Exercise", "Gym 1h", "2025-07-21", "Medium", True)

FIELDS = {
    "id": str,
    "title": str,
    "description": str,
    "due_date": str,
    "priority": str,
    "status": str,
    "created_at": str,
    "last_updated_at": str,
    "is_recurring": bool,
}


def _document(path: Path) -> list[dict]:
    return json.loads(path.read_text("utf-8"))


def test_first_add_creates_document(
    intake: TaskIntake, db_path: Path, presenter: RecordingPresenter
) -> None:
    assert not db_path.exists()

    task = intake.add(*BUY_BOOKS)

    # The missing document is reported once, then treated as empty.
    assert [path for path, _reason in presenter.unreadable] == [db_path]

    assert task.id == "id-1"
    assert task.priority is Priority.HIGH
    assert task.status is TaskStatus.PENDING
    assert _document(db_path) == [
        {
            "id": "id-1",
            "title": "Buy books",
            "description": "SE textbook",
            "due_date": "2025-07-20",
            "priority": "High",
            "status": "Pending",
            "created_at": "2025-07-20T10:00:00",
            "last_updated_at": "2025-07-20T10:00:00",
            "is_recurring": False,
        }
    ]


def test_duplicate_is_rejected_and_document_untouched(intake: TaskIntake, db_path: Path) -> None:
    intake.add(*BUY_BOOKS)
    before = db_path.read_bytes()

    with pytest.raises(DuplicateTaskError):
        intake.add(*BUY_BOOKS)
    with pytest.raises(DuplicateTaskError):
        intake.add("  BUY BOOKS ", "other text", "2025-07-20", "Low", True)

    assert db_path.read_bytes() == before


def test_tasks_are_appended_in_call_order(intake: TaskIntake, db_path: Path) -> None:
    first = intake.add(*BUY_BOOKS)
    second = intake.add(*EXERCISE)
    third = intake.add("Buy books", "", "2025-07-22", "Low", False)

    doc = _document(db_path)
    assert [r["id"] for r in doc] == [first.id, second.id, third.id]
    assert doc == [first.to_dict(), second.to_dict(), third.to_dict()]
    assert doc[1]["is_recurring"] is True


def test_persisted_records_are_complete_and_unique(intake: TaskIntake, db_path: Path) -> None:
    intake.add(*BUY_BOOKS)
    intake.add(*EXERCISE)
    with pytest.raises(DuplicateTaskError):
        intake.add("exercise", "again", "2025-07-21", "High", False)

    doc = _document(db_path)
    for record in doc:
        for name, typ in FIELDS.items():
            assert isinstance(record[name], typ), name
        assert record["created_at"] <= record["last_updated_at"]
    assert len({r["id"] for r in doc}) == len(doc)
    assert len({(r["title"].lower(), r["due_date"]) for r in doc}) == len(doc)


@pytest.mark.parametrize(
    ("args", "error"),
    [
        (("", "No title", "2025-07-22", "Low", False), EmptyTitleError),
        (("   ", "Blank", "2025-07-22", "Low", False), EmptyTitleError),
        (("Cook", "Dinner", "22-07-2025", "High", False), BadDueDateFormatError),
        (("Cook", "Dinner", "2025-13-01", "High", False), BadDueDateFormatError),
        (("Study", "Midterm", "2025-07-23", "Very high", False), BadPriorityError),
        (("Study", "Midterm", "2025-07-23", "very high", False), BadPriorityError),
    ],
)
def test_invalid_input_leaves_document_unchanged(intake: TaskIntake, db_path: Path, args, error) -> None:
    intake.add(*BUY_BOOKS)
    before = db_path.read_bytes()

    with pytest.raises(error):
        intake.add(*args)

    assert db_path.read_bytes() == before


def test_validation_error_does_not_touch_store(presenter: RecordingPresenter) -> None:
    store = FailingStore()
    intake = TaskIntake(store, clock=FixedClock(), ids=SequentialIdSource(), presenter=presenter)

    with pytest.raises(EmptyTitleError):
        intake.add("", "", "2025-07-20", "High")

    assert store.save_calls == 0


def test_persistence_failure_is_reported(presenter: RecordingPresenter) -> None:
    store = FailingStore()
    intake = TaskIntake(store, clock=FixedClock(), ids=SequentialIdSource(), presenter=presenter)

    with pytest.raises(PersistenceFailedError) as exc:
        intake.add(*BUY_BOOKS)

    assert exc.value.cause == "disk full"
    assert store.save_calls == 1
    assert presenter.added == []
    assert [e.kind for e in presenter.failures] == [ErrorKind.PERSISTENCE_FAILED]


def test_corrupt_document_is_treated_as_empty(
    intake: TaskIntake, db_path: Path, presenter: RecordingPresenter
) -> None:
    db_path.write_text("{broken", "utf-8")

    task = intake.add(*BUY_BOOKS)

    assert len(presenter.unreadable) == 1
    assert _document(db_path) == [task.to_dict()]


def test_presenter_hears_each_outcome(intake: TaskIntake, presenter: RecordingPresenter) -> None:
    task = intake.add(*BUY_BOOKS)
    with pytest.raises(DuplicateTaskError):
        intake.add(*BUY_BOOKS)
    with pytest.raises(BadPriorityError):
        intake.add("Study", "", "2025-07-23", "Urgent")

    assert [t.id for t in presenter.added] == [task.id]
    assert [e.kind for e in presenter.failures] == [ErrorKind.DUPLICATE, ErrorKind.BAD_PRIORITY]


def test_defaults_use_system_clock_and_uuid(db_path: Path) -> None:
    task = TaskIntake(JsonTaskStore(db_path)).add("Plan", None, "2030-01-01", "Low")

    assert len(task.id) == 36
    assert task.description == ""
    assert task.created_at == task.last_updated_at
