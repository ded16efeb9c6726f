"""Tests for the console helpers (src.utils)."""

from __future__ import annotations

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

import src.utils as utils


@pytest.fixture
def recorded(monkeypatch: pytest.MonkeyPatch) -> StringIO:
    buffer = StringIO()
    monkeypatch.setattr(utils, "console", Console(file=buffer, width=200, color_system=None))
    return buffer


@pytest.mark.unit
def test_step_line(recorded: StringIO):
    utils.print_step("Created composer.json")
    assert recorded.getvalue() == "✓ Created composer.json\n"


@pytest.mark.unit
def test_markup_in_messages_is_not_interpreted(recorded: StringIO):
    utils.print_error("Module [bold]X does not exist!")
    utils.print_info("Using namespace: App\\Modules\\")
    out = recorded.getvalue()
    assert "Module [bold]X does not exist!" in out
    assert "Using namespace: App\\Modules\\" in out


@pytest.mark.unit
def test_summary_table_shows_relative_paths(recorded: StringIO):
    root = Path("/app/modules/Posts")
    utils.print_summary_table([root / "composer.json", Path("/elsewhere/x.php")], root)
    out = recorded.getvalue()
    assert "composer.json" in out
    assert "/app/modules/Posts/composer.json" not in out
    assert "/elsewhere/x.php" in out
