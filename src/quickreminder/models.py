"""Data models for the QuickReminder task list.

Exposes the Task record and the TaskCategory enumeration. Tasks are frozen;
the store replaces a record with a modified copy instead of mutating it.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class TaskCategory(Enum):
    WORK = "Work"
    HOME = "Home"
    PERSONAL = "Personal"

    @classmethod
    def parse(cls, text: str) -> Optional["TaskCategory"]:
        """Resolve a value, name or one-letter alias (w/h/p), case insensitive.

        Unknown text -> None.
        """
        key = text.strip().lower()
        if not key:
            return None
        for category in cls:
            if key in (category.value.lower(), category.value[0].lower()):
                return category
        return None


DEFAULT_CATEGORY = TaskCategory.WORK


@dataclass(frozen=True)
class Task:
    """A single to-do item.

    Fields:
        id: Integer id from the store's counter; never reused.
        title: Short, single-line label.
        category: One of TaskCategory (defaults to Work).
        is_completed: Completion flag, False at creation.
    """
    id: int
    title: str
    category: TaskCategory = DEFAULT_CATEGORY
    is_completed: bool = False

    def with_completed(self, flag: bool) -> "Task":
        return replace(self, is_completed=flag)
