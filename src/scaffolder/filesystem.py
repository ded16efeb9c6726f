"""Filesystem access for the generators.

Generators receive a ``Filesystem`` instead of touching ``pathlib`` directly,
so tests can hand them a ``MemoryFilesystem`` and inspect what would have been
written without creating anything on disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    """The four operations a generator needs."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def write_text(self, path: Path, content: str) -> None: ...


class LocalFilesystem:
    """``Filesystem`` backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        """Create parent dirs and write *content* as UTF-8, replacing any existing file."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(content, encoding="utf-8")


class MemoryFilesystem:
    """In-memory ``Filesystem`` double.

    Directories and files are tracked as plain sets/dicts keyed by ``Path``.
    ``writes`` keeps every write in order (including overwrites), which lets
    tests assert on sequencing.
    """

    def __init__(self) -> None:
        self.directories: set[Path] = set()
        self.files: dict[Path, str] = {}
        self.writes: list[Path] = []

    def exists(self, path: Path) -> bool:
        path = Path(path)
        return path in self.files or self.is_dir(path)

    def is_dir(self, path: Path) -> bool:
        return Path(path) in self.directories

    def make_dirs(self, path: Path) -> None:
        path = Path(path)
        self.directories.add(path)
        self.directories.update(path.parents)

    def write_text(self, path: Path, content: str) -> None:
        path = Path(path)
        self.make_dirs(path.parent)
        self.files[path] = content
        self.writes.append(path)

    def read_text(self, path: Path) -> str:
        return self.files[Path(path)]
