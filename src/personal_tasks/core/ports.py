# src/personal_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The intake pipeline depends on Protocols instead of concrete implementations.
This keeps storage/presentation/time sources swappable and makes testing easier.
"""

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..tasks.errors import TaskIntakeError
    from ..tasks.task_models import Task

TaskRecord = dict[str, Any]
# Raw JSON object as stored in the document; unknown keys are kept.


class Clock(Protocol):
    """Local wall-clock time source."""
    def now(self) -> datetime: ...


class IdSource(Protocol):
    """Unique task identifiers. Collisions are not handled by the core."""
    def next(self) -> str: ...


class Presenter(Protocol):
    """
    Output-side port: how the core reports outcomes to the user.

    The core only hands over structured values; wording and locale are
    decided by the implementation.
    """

    def task_added(self, task: Task) -> None: ...
    def intake_failed(self, error: TaskIntakeError) -> None: ...
    def store_unreadable(self, path: Path, reason: str) -> None: ...


class TaskRepo(Protocol):
    # Read-all / write-all; no partial updates.
    def load(self) -> list[TaskRecord]: ...
    def save(self, tasks: list[TaskRecord]) -> None: ...
