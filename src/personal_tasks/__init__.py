"""Personal task manager: validated, duplicate-free task intake into a JSON document."""

from .tasks.errors import (
    BadDueDateFormatError,
    BadPriorityError,
    DuplicateTaskError,
    EmptyDueDateError,
    EmptyTitleError,
    ErrorKind,
    PersistenceFailedError,
    TaskIntakeError,
    ValidationError,
)
from .tasks.intake import TaskIntake
from .tasks.task_models import Priority, Task, TaskDraft, TaskStatus
from .tasks.task_store import JsonTaskStore

__all__ = [
    "BadDueDateFormatError",
    "BadPriorityError",
    "DuplicateTaskError",
    "EmptyDueDateError",
    "EmptyTitleError",
    "ErrorKind",
    "JsonTaskStore",
    "PersistenceFailedError",
    "Priority",
    "Task",
    "TaskDraft",
    "TaskIntake",
    "TaskIntakeError",
    "TaskStatus",
    "ValidationError",
]
