# tests/conftest.py

from __future__ import annotations

import pytest

from quickreminder.store import TaskStore


class ChangeRecorder:
    """Observer that snapshots the task list on every notification."""

    def __init__(self) -> None:
        self.snapshots: list[tuple] = []

    def __call__(self, store: TaskStore) -> None:
        self.snapshots.append(store.tasks)

    @property
    def calls(self) -> int:
        return len(self.snapshots)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def recorder(store: TaskStore) -> ChangeRecorder:
    rec = ChangeRecorder()
    store.subscribe(rec)
    return rec


@pytest.fixture()
def feed_input(monkeypatch):
    """
    Replace builtins.input with a scripted sequence of lines.

    Once the script runs out, input() raises EOFError, which the REPL treats
    as an interrupt and exits cleanly.
    """

    def _feed(*lines: str) -> list[str]:
        prompts: list[str] = []
        remaining = iter(lines)

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _feed
