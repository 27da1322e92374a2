# src/personal_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import PersistenceFailedError

if TYPE_CHECKING:
    from ..core.ports import Presenter, TaskRecord

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    JSON document task store.

    The whole task list lives in one file as a JSON array:
    - load() reads everything, save() replaces everything
    - records are kept as raw dicts so unknown keys survive a round-trip

    Durability:
    - save() writes a sibling temp file and os.replace()s it over the target,
      so readers see either the old or the new document, never a partial one

    A missing or unreadable document loads as an empty list (fresh start)
    and is reported to the presenter.
    """

    def __init__(self, db_path: str | Path, *, presenter: Presenter | None = None) -> None:
        self._db_path = Path(db_path)
        self.presenter = presenter
        logger.info("TaskStore ready db=%s", self._db_path)

    @property
    def path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _tmp_path(self) -> Path:
        return self._db_path.with_name(self._db_path.name + ".tmp")

    def _report_unreadable(self, reason: str) -> None:
        logger.warning("Cannot read task database %s (%s); starting from an empty list.", self._db_path, reason)
        if self.presenter is not None:
            self.presenter.store_unreadable(self._db_path, reason)

    # ---- public API ----

    def load(self) -> list[TaskRecord]:
        try:
            with open(self._db_path, encoding="utf-8") as f:
                raw = f.read()
        except (OSError, UnicodeDecodeError) as e:
            self._report_unreadable(str(e))
            return []

        if not raw.strip():
            self._report_unreadable("file is empty")
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            self._report_unreadable(f"invalid JSON: {e}")
            return []

        if not isinstance(data, list):
            self._report_unreadable(f"expected a JSON array, got {type(data).__name__}")
            return []

        logger.debug("Loaded %d tasks from %s", len(data), self._db_path)
        return data

    def save(self, tasks: list[TaskRecord]) -> None:
        tmp = self._tmp_path()
        try:
            payload = json.dumps(tasks, ensure_ascii=False, indent=2)
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._db_path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            logger.error("Failed to save %d tasks to %s: %s", len(tasks), self._db_path, e)
            raise PersistenceFailedError(str(e)) from e

        logger.debug("Saved %d tasks to %s", len(tasks), self._db_path)

    def count_tasks(self) -> int:
        # Status query only; a missing document is simply empty here.
        if not self._db_path.exists():
            return 0
        return len(self.load())
