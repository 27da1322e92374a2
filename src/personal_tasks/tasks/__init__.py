"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft, Priority, TaskStatus)
- errors.py: typed intake errors
- validation.py: raw input -> TaskDraft
- duplicates.py: title/due-date duplicate check
- task_store.py: JSON document storage (read-all / write-all, atomic save)
- intake.py: the add-task pipeline
"""
