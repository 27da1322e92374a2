# src/personal_tasks/i18n.py

"""
User-facing strings per locale.

The core never formats text for the user; it reports structured outcomes
and the console presenter looks up wording here.
"""

from __future__ import annotations

from typing import Final

from .tasks.errors import ErrorKind
from .tasks.task_models import Priority

DEFAULT_LOCALE: Final[str] = "en"

PRIORITY_LABELS: Final[dict[str, dict[Priority, str]]] = {
    "en": {
        Priority.LOW: "Low",
        Priority.MEDIUM: "Medium",
        Priority.HIGH: "High",
    },
    "vi": {
        Priority.LOW: "Thấp",
        Priority.MEDIUM: "Trung bình",
        Priority.HIGH: "Cao",
    },
}

MESSAGES: Final[dict[str, dict[str, str]]] = {
    "en": {
        "task_added": "Task added successfully: {id}",
        "store_unreadable": "Error reading the database file {path}: {reason}",
        ErrorKind.EMPTY_TITLE: "Error: title must not be empty.",
        ErrorKind.EMPTY_DUE_DATE: "Error: due date must not be empty.",
        ErrorKind.BAD_DUE_DATE_FORMAT: "Error: invalid due date. Please use the YYYY-MM-DD format.",
        ErrorKind.BAD_PRIORITY: "Error: invalid priority. Please choose one of: {priorities}.",
        ErrorKind.DUPLICATE: "Error: task already exists: {title} (due {due_date}).",
        ErrorKind.PERSISTENCE_FAILED: "Error writing to the database file: {cause}",
    },
    "vi": {
        "task_added": "Đã thêm nhiệm vụ thành công: {id}",
        "store_unreadable": "Lỗi khi đọc file database {path}: {reason}",
        ErrorKind.EMPTY_TITLE: "Lỗi: Tiêu đề không được để trống.",
        ErrorKind.EMPTY_DUE_DATE: "Lỗi: Ngày đến hạn không được để trống.",
        ErrorKind.BAD_DUE_DATE_FORMAT: "Lỗi: Ngày đến hạn không hợp lệ. Vui lòng sử dụng định dạng YYYY-MM-DD.",
        ErrorKind.BAD_PRIORITY: "Lỗi: Mức độ ưu tiên không hợp lệ. Vui lòng chọn từ: {priorities}.",
        ErrorKind.DUPLICATE: "Lỗi: nhiệm vụ đã tồn tại: {title} (hạn {due_date}).",
        ErrorKind.PERSISTENCE_FAILED: "Lỗi khi ghi vào file database: {cause}",
    },
}


def normalize_locale(locale: str | None) -> str:
    """Map "vi_VN", "VI" etc. to a supported catalog key; unknown -> default."""
    if not locale:
        return DEFAULT_LOCALE
    key = locale.strip().lower().replace("-", "_").split("_", 1)[0]
    return key if key in MESSAGES else DEFAULT_LOCALE


def message(locale: str, key: str, **kwargs: object) -> str:
    catalog = MESSAGES[normalize_locale(locale)]
    template = catalog.get(key) or MESSAGES[DEFAULT_LOCALE][key]
    return template.format(**kwargs)


def priority_label(priority: Priority, locale: str) -> str:
    return PRIORITY_LABELS[normalize_locale(locale)][priority]


def priority_choices(locale: str) -> str:
    return ", ".join(PRIORITY_LABELS[normalize_locale(locale)].values())


def parse_priority_label(text: str, locale: str) -> str:
    """
    Translate a localized priority label into the canonical one.

    Matching is exact (case-sensitive), like the validator. Text that is not a
    known label is returned unchanged so validation can reject it.
    """
    for prio, label in PRIORITY_LABELS[normalize_locale(locale)].items():
        if text == label:
            return prio.value
    return text
