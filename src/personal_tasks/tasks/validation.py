# src/personal_tasks/tasks/validation.py

"""
Input validation for new tasks.

Checks run in a fixed order and stop at the first failure:
title, due date presence, due date format, priority.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from .errors import BadDueDateFormatError, BadPriorityError, EmptyDueDateError, EmptyTitleError
from .task_models import DATE_FORMAT, Priority, TaskDraft

# strptime alone accepts "2025-7-1"; the regex pins the 4-2-2 shape.
_DUE_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_due_date(raw: str) -> date:
    if not _DUE_DATE_RE.fullmatch(raw):
        raise BadDueDateFormatError(f"due date must be YYYY-MM-DD, got {raw!r}", raw)
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        raise BadDueDateFormatError(f"due date is not a calendar date: {raw!r}", raw) from e


def parse_priority(raw: str | None) -> Priority:
    # Exact, case-sensitive match on the canonical labels.
    if raw is None:
        raise BadPriorityError("priority is required", raw)
    try:
        return Priority(raw)
    except ValueError as e:
        allowed = ", ".join(p.value for p in Priority)
        raise BadPriorityError(f"priority must be one of: {allowed}; got {raw!r}", raw) from e


def validate_task_input(
    title: str | None,
    due_date: str | None,
    priority: str | None,
    *,
    description: str | None = None,
    is_recurring: bool = False,
) -> TaskDraft:
    """
    Turn raw user input into a TaskDraft.

    Raises:
        EmptyTitleError: title missing or blank.
        EmptyDueDateError: due date missing or blank.
        BadDueDateFormatError: due date is not a valid YYYY-MM-DD date.
        BadPriorityError: priority is not one of Low / Medium / High.
    """
    title_clean = (title or "").strip()
    if not title_clean:
        raise EmptyTitleError("title must not be empty", title)

    if due_date is None or not due_date.strip():
        raise EmptyDueDateError("due date must not be empty", due_date)

    due = parse_due_date(due_date)
    prio = parse_priority(priority)

    return TaskDraft(
        title=title_clean,
        description=description if description is not None else "",
        due_date=due,
        priority=prio,
        is_recurring=bool(is_recurring),
    )
