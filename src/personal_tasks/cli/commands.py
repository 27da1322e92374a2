# src/personal_tasks/cli/commands.py

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable

from ..core.state import AppState
from ..i18n import parse_priority_label, priority_choices
from ..tasks.errors import TaskIntakeError

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, list[str], CommandEmitter | None], str]

logger = logging.getLogger(__name__)

RECURRING_WORDS = {"1", "true", "yes", "y", "recurring", "r"}

ADD_USAGE = 'Usage: /add "<title>" "<description>" <YYYY-MM-DD> <priority> [recurring]'


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like '/command args'.
        Arguments are shell-split, so quoted values may contain spaces.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Cannot parse arguments: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return (
        "Status:\n"
        f"  Database: {state.store.path}\n"
        f"  Locale: {state.locale} (priorities: {priority_choices(state.locale)})\n"
        f"  Tasks stored: {state.store.count_tasks()}"
    )


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add "<title>" "<description>" <YYYY-MM-DD> <priority> [recurring]

    Priority may be given as the canonical label or the current locale's label.
    The outcome itself is printed by the presenter, so the reply is empty.
    """
    if len(args) < 4 or len(args) > 5:
        return ADD_USAGE

    title, description, due_date, priority = args[:4]
    is_recurring = len(args) == 5 and args[4].lower() in RECURRING_WORDS

    try:
        state.intake.add(
            title,
            description,
            due_date,
            parse_priority_label(priority, state.locale),
            is_recurring,
        )
    except TaskIntakeError:
        # Already reported by the presenter.
        pass
    return ""


# Sample session: two valid tasks, one duplicate and three bad inputs.
DEMO_SCENARIOS: dict[str, list[tuple[str, str, tuple[str, str, str, str, bool]]]] = {
    "en": [
        ("ok", "Add a valid task", ("Buy books", "Software engineering textbook.", "2025-07-20", "High", False)),
        ("warn", "Add a duplicate task", ("Buy books", "Software engineering textbook.", "2025-07-20", "High", False)),
        ("ok", "Add another valid task", ("Exercise", "Gym for 1 hour.", "2025-07-21", "Medium", True)),
        ("err", "Add a task without a title", ("", "No title.", "2025-07-22", "Low", False)),
        ("err", "Add a task with a bad date format", ("Cook", "Cook dinner.", "22-07-2025", "High", False)),
        ("err", "Add a task with a bad priority", ("Study", "Review for the midterm.", "2025-07-23", "Very high", False)),
    ],
    "vi": [
        ("ok", "Thêm nhiệm vụ hợp lệ", ("Mua sách", "Sách Công nghệ phần mềm.", "2025-07-20", "Cao", False)),
        ("warn", "Thêm nhiệm vụ trùng lặp", ("Mua sách", "Sách Công nghệ phần mềm.", "2025-07-20", "Cao", False)),
        ("ok", "Thêm nhiệm vụ hợp lệ khác", ("Tập thể dục", "Tập gym 1 tiếng.", "2025-07-21", "Trung bình", True)),
        ("err", "Thêm nhiệm vụ không có tiêu đề", ("", "Không có tiêu đề.", "2025-07-22", "Thấp", False)),
        ("err", "Thêm nhiệm vụ sai định dạng ngày", ("Nấu ăn", "Nấu bữa tối.", "22-07-2025", "Cao", False)),
        ("err", "Thêm nhiệm vụ sai mức ưu tiên", ("Học bài", "Ôn thi giữa kỳ.", "2025-07-23", "Rất cao", False)),
    ],
}

_DEMO_MARKS = {"ok": "[OK]", "warn": "[WARN]", "err": "[ERR]"}


def cmd_demo(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """Replay the sample session against the configured database."""
    scenarios = DEMO_SCENARIOS.get(state.locale, DEMO_SCENARIOS["en"])
    added = 0
    for mark, heading, (title, description, due_date, priority, recurring) in scenarios:
        if emit:
            emit(f"{_DEMO_MARKS[mark]} {heading}:")
        try:
            state.intake.add(
                title,
                description,
                due_date,
                parse_priority_label(priority, state.locale),
                recurring,
            )
            added += 1
        except TaskIntakeError as e:
            logger.debug("Demo scenario %r rejected: %s", heading, e.kind)
    return f"Demo finished: {added} of {len(scenarios)} tasks added."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show database path, locale and task count.")
registry.register("add", cmd_add, help_text=ADD_USAGE.removeprefix("Usage: ") + " - add a task.")
registry.register("demo", cmd_demo, help_text="Run the sample session (adds example tasks).")
