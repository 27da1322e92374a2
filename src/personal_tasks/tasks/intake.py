# src/personal_tasks/tasks/intake.py

from __future__ import annotations

import logging

from ..core.ports import Clock, IdSource, Presenter, TaskRepo
from ..core.sources import SystemClock, UuidIdSource
from .duplicates import is_duplicate
from .errors import DuplicateTaskError, TaskIntakeError
from .task_models import DATE_FORMAT, Task
from .validation import validate_task_input

logger = logging.getLogger(__name__)


class TaskIntake:
    """
    Adds tasks to the store: validate -> load -> duplicate check -> build -> save.

    Side effects:
    - exactly one document replacement per successful add()
    - nothing is written on any failure path
    """

    def __init__(
        self,
        store: TaskRepo,
        *,
        clock: Clock | None = None,
        ids: IdSource | None = None,
        presenter: Presenter | None = None,
    ) -> None:
        self.store = store
        self.clock: Clock = clock or SystemClock()
        self.ids: IdSource = ids or UuidIdSource()
        self.presenter = presenter

    def add(
        self,
        title: str | None,
        description: str | None,
        due_date: str | None,
        priority: str | None,
        is_recurring: bool = False,
    ) -> Task:
        """
        Validate and persist a new task.

        Returns the stored Task (with id and timestamps).

        Raises:
            ValidationError subclasses: bad input, store not touched.
            DuplicateTaskError: same title (case-insensitive) and due date exists.
            PersistenceFailedError: the document could not be written.
        """
        try:
            task = self._add(title, description, due_date, priority, is_recurring)
        except TaskIntakeError as e:
            logger.info("Task rejected (%s): %s", e.kind, e)
            if self.presenter is not None:
                self.presenter.intake_failed(e)
            raise

        logger.info("Added task %s: %s (due %s)", task.id, task.title, task.due_date)
        if self.presenter is not None:
            self.presenter.task_added(task)
        return task

    def _add(
        self,
        title: str | None,
        description: str | None,
        due_date: str | None,
        priority: str | None,
        is_recurring: bool,
    ) -> Task:
        draft = validate_task_input(
            title,
            due_date,
            priority,
            description=description,
            is_recurring=is_recurring,
        )

        tasks = self.store.load()
        if is_duplicate(tasks, draft):
            raise DuplicateTaskError(draft.title, draft.due_date.strftime(DATE_FORMAT))

        task = Task.from_draft(draft, clock=self.clock, ids=self.ids)
        tasks.append(task.to_dict())
        self.store.save(tasks)
        return task
