# tests/test_models.py

from __future__ import annotations

import dataclasses

import pytest

from quickreminder.models import DEFAULT_CATEGORY, Task, TaskCategory


def test_task_defaults() -> None:
    task = Task(id=1, title="Buy milk")
    assert task.category is TaskCategory.WORK
    assert task.is_completed is False


def test_task_is_frozen() -> None:
    task = Task(id=1, title="Buy milk")
    with pytest.raises(dataclasses.FrozenInstanceError):
        task.is_completed = True  # type: ignore[misc]


def test_with_completed_returns_copy() -> None:
    task = Task(id=3, title="Pay bills", category=TaskCategory.HOME)
    done = task.with_completed(True)
    assert done is not task
    assert done == Task(id=3, title="Pay bills", category=TaskCategory.HOME, is_completed=True)
    assert task.is_completed is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Work", TaskCategory.WORK),
        ("home", TaskCategory.HOME),
        ("PERSONAL", TaskCategory.PERSONAL),
        ("w", TaskCategory.WORK),
        ("h", TaskCategory.HOME),
        (" p ", TaskCategory.PERSONAL),
        ("garden", None),
        ("", None),
    ],
)
def test_category_parse(text: str, expected) -> None:
    assert TaskCategory.parse(text) is expected


def test_default_category_is_work() -> None:
    assert DEFAULT_CATEGORY is TaskCategory.WORK
    assert [c.value for c in TaskCategory] == ["Work", "Home", "Personal"]


def test_repr_quotes_title() -> None:
    assert repr(Task(id=1, title="")) == (
        "Task(id=1, title='', category=<TaskCategory.WORK: 'Work'>, is_completed=False)"
    )
    assert "title='a, b'" in repr(Task(id=2, title="a, b"))
