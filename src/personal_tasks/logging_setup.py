# src/personal_tasks/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "personal-tasks.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Package records pass; anything else (py.warnings included) needs ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "personal_tasks" or record.name.startswith("personal_tasks."):
            return True
        return record.levelno >= logging.ERROR


def _attach(root: logging.Logger, handler: logging.Handler, level: int, fmt: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(fmt)
    root.addHandler(handler)


def setup_logging(
    *,
    log_dir: str | Path = ".local/personal-tasks",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    console: bool = True,
) -> Path:
    """
    Replace the root handlers with a log file under `log_dir` and, when
    `console` is set, a filtered stderr handler. Stdout stays reserved for
    presenter output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if console:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.addFilter(_ConsoleNoiseFilter())
        _attach(root, stderr_handler, console_level, fmt)

    _attach(root, logging.FileHandler(str(log_file), encoding="utf-8"), file_level, fmt)

    logging.captureWarnings(True)
    return log_file
