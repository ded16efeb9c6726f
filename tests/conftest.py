"""Shared pytest fixtures for the scaffolder test suite.

Provides reusable fixtures for:
- Configurations rooted at a fake or temporary application directory
- An in-memory filesystem with or without a pre-existing module
- A frozen clock for deterministic migration filenames
- A renderer that pretends one stub is missing
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from src.config import Config
from src.scaffolder.errors import TemplateNotFound
from src.scaffolder.filesystem import MemoryFilesystem
from src.scaffolder.templates import TemplateRenderer


APP_ROOT = Path("/app")
FROZEN_NOW = datetime(2024, 5, 17, 9, 30, 5)


# ---------------------------------------------------------------------------
# Config & filesystem
# ---------------------------------------------------------------------------

@pytest.fixture
def config() -> Config:
    """Config rooted at a fake ``/app`` directory (use with ``memory_fs``)."""
    return Config(base_path=APP_ROOT)


@pytest.fixture
def disk_config(tmp_path: Path) -> Config:
    """Config rooted at a real temporary directory (auto-cleanup)."""
    return Config(base_path=tmp_path)


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """Empty in-memory filesystem."""
    return MemoryFilesystem()


@pytest.fixture
def blog_fs(config: Config) -> MemoryFilesystem:
    """In-memory filesystem where the ``Blog`` module directory already exists."""
    fs = MemoryFilesystem()
    fs.make_dirs(config.module_path("Blog"))
    return fs


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@pytest.fixture
def frozen_clock():
    """Clock callable that always returns ``FROZEN_NOW``."""
    return lambda: FROZEN_NOW


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------

class MissingStubRenderer(TemplateRenderer):
    """Renderer that behaves as if the stub *missing* was not installed."""

    def __init__(self, missing: str) -> None:
        super().__init__()
        self.missing = missing

    def load(self, name: str) -> str:
        if name == self.missing:
            raise TemplateNotFound(name, self.search_path)
        return super().load(name)


@pytest.fixture
def missing_stub():
    """Factory fixture: ``missing_stub("factory")`` -> renderer without that stub."""
    return MissingStubRenderer
