# src/personal_tasks/tasks/duplicates.py

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .task_models import DATE_FORMAT, TaskDraft


def is_duplicate(tasks: Iterable[Any], draft: TaskDraft) -> bool:
    """
    True if a stored task has the same title (case-insensitive) and due date.

    Entries that are not JSON objects, or lack a title/due_date, never match.
    """
    title = draft.title.lower()
    due = draft.due_date.strftime(DATE_FORMAT)
    for existing in tasks:
        if not isinstance(existing, dict):
            continue
        raw_title = existing.get("title")
        raw_due = existing.get("due_date")
        if raw_title is None or raw_due is None:
            continue
        if str(raw_title).lower() == title and str(raw_due) == due:
            return True
    return False
