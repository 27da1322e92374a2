# src/personal_tasks/core/sources.py

from __future__ import annotations

import uuid
from datetime import datetime


class SystemClock:
    """Naive local time, matching what the user sees on the wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class UuidIdSource:
    def next(self) -> str:
        return str(uuid.uuid4())
