# src/personal_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..core.ports import Clock, IdSource

DATE_FORMAT = "%Y-%m-%d"


class Priority(StrEnum):
    """
    Task urgency.

    Values are the canonical labels written to the JSON document.
    Localized labels are a presentation concern (see i18n.py).
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskStatus(StrEnum):
    PENDING = "Pending"
    DONE = "Done"


def format_timestamp(value: datetime) -> str:
    """ISO-8601 local date-time, e.g. 2025-07-20T10:00:00."""
    return value.isoformat(timespec="seconds")


@dataclass(frozen=True, slots=True)
class TaskDraft:
    """Validated input that has no identity or timestamps yet."""

    title: str
    description: str
    due_date: date
    priority: Priority
    is_recurring: bool = False


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    due_date: date
    priority: Priority
    status: TaskStatus
    created_at: datetime
    last_updated_at: datetime
    is_recurring: bool

    @classmethod
    def from_draft(cls, draft: TaskDraft, *, clock: Clock, ids: IdSource) -> Task:
        # One clock read for both timestamps keeps created_at == last_updated_at.
        now = clock.now()
        return cls(
            id=ids.next(),
            title=draft.title,
            description=draft.description,
            due_date=draft.due_date,
            priority=draft.priority,
            status=TaskStatus.PENDING,
            created_at=now,
            last_updated_at=now,
            is_recurring=draft.is_recurring,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date.strftime(DATE_FORMAT),
            "priority": str(self.priority),
            "status": str(self.status),
            "created_at": format_timestamp(self.created_at),
            "last_updated_at": format_timestamp(self.last_updated_at),
            "is_recurring": self.is_recurring,
        }
