# tests/test_theme.py

from __future__ import annotations

from pathlib import Path

import pytest

from quickreminder import theme
from quickreminder.models import TaskCategory


@pytest.mark.parametrize(
    "rate, expected",
    [
        (0.0, "░" * 10),
        (0.5, "█" * 5 + "░" * 5),
        (1.0, "█" * 10),
        (-1.0, "░" * 10),
        (3.0, "█" * 10),
    ],
)
def test_progress_bar(rate: float, expected: str) -> None:
    assert theme.progress_bar(rate, 10) == expected


def test_every_category_has_a_color() -> None:
    assert set(theme.CATEGORY_HEX) == set(TaskCategory)
    for category in TaskCategory:
        assert isinstance(theme.category_color(category), str)


def test_load_env_overrides(tmp_path: Path) -> None:
    env = tmp_path / ".env"
    env.write_text(
        "# palette\n"
        "QUICKREMINDER_WORK=#112233\n"
        "QUICKREMINDER_HOME = 445566\n"
        "QUICKREMINDER_PERSONAL=not-a-color\n"
        "UNRELATED=#abcdef\n"
        "garbage line\n"
    )

    assert theme.load_env_overrides(env) == {
        "QUICKREMINDER_WORK": "#112233",
        "QUICKREMINDER_HOME": "#445566",
    }


def test_load_env_overrides_missing_file(tmp_path: Path) -> None:
    assert theme.load_env_overrides(tmp_path / "nope.env") == {}


def test_resolve_hex_priority(monkeypatch) -> None:
    overrides = {"QUICKREMINDER_DONE": "#010101"}

    monkeypatch.delenv("QUICKREMINDER_DONE", raising=False)
    assert theme.resolve_hex("QUICKREMINDER_DONE", "#ffffff", overrides) == "#010101"
    assert theme.resolve_hex("QUICKREMINDER_DONE", "#ffffff", {}) == "#ffffff"

    monkeypatch.setenv("QUICKREMINDER_DONE", "abcdef")
    assert theme.resolve_hex("QUICKREMINDER_DONE", "#ffffff", overrides) == "#abcdef"

    monkeypatch.setenv("QUICKREMINDER_DONE", "blue")
    assert theme.resolve_hex("QUICKREMINDER_DONE", "#ffffff", overrides) == "#010101"
