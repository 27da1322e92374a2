# src/personal_tasks/tasks/errors.py

"""
Typed errors raised by the task-intake pipeline.

Each error carries a stable `kind` so presenters can pick a localized
message without matching on class names.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    EMPTY_TITLE = "empty_title"
    EMPTY_DUE_DATE = "empty_due_date"
    BAD_DUE_DATE_FORMAT = "bad_due_date_format"
    BAD_PRIORITY = "bad_priority"
    DUPLICATE = "duplicate"
    PERSISTENCE_FAILED = "persistence_failed"


class TaskIntakeError(Exception):
    """Base class for every error `TaskIntake.add` can raise."""

    kind: ErrorKind


class ValidationError(TaskIntakeError):
    """Raised before the store is touched; `value` is the rejected raw input."""

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class EmptyTitleError(ValidationError):
    kind = ErrorKind.EMPTY_TITLE


class EmptyDueDateError(ValidationError):
    kind = ErrorKind.EMPTY_DUE_DATE


class BadDueDateFormatError(ValidationError):
    kind = ErrorKind.BAD_DUE_DATE_FORMAT


class BadPriorityError(ValidationError):
    kind = ErrorKind.BAD_PRIORITY


class DuplicateTaskError(TaskIntakeError):
    kind = ErrorKind.DUPLICATE

    def __init__(self, title: str, due_date: str) -> None:
        super().__init__(f"task already exists: {title!r} due {due_date}")
        self.title = title
        self.due_date = due_date


class PersistenceFailedError(TaskIntakeError):
    kind = ErrorKind.PERSISTENCE_FAILED

    def __init__(self, cause: str) -> None:
        super().__init__(f"failed to save tasks: {cause}")
        self.cause = cause
