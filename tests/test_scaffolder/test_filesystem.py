"""Tests for the filesystem capability (src.scaffolder.filesystem)."""

from __future__ import annotations

from pathlib import Path

import pytest

from src.scaffolder.filesystem import LocalFilesystem, MemoryFilesystem


class TestMemoryFilesystem:
    @pytest.mark.unit
    def test_make_dirs_registers_parents(self) -> None:
        fs = MemoryFilesystem()
        fs.make_dirs(Path("/app/modules/Blog/src"))
        assert fs.is_dir(Path("/app/modules/Blog"))
        assert fs.is_dir(Path("/app"))
        assert not fs.is_dir(Path("/app/other"))

    @pytest.mark.unit
    def test_write_records_order_and_overwrites(self) -> None:
        fs = MemoryFilesystem()
        a, b = Path("/x/a.php"), Path("/x/b.php")
        fs.write_text(a, "one")
        fs.write_text(b, "two")
        fs.write_text(a, "three")

        assert fs.writes == [a, b, a]
        assert fs.read_text(a) == "three"
        assert fs.exists(a)
        assert not fs.is_dir(a)
        assert fs.is_dir(Path("/x"))


class TestLocalFilesystem:
    @pytest.mark.integration
    def test_write_creates_parents(self, tmp_path: Path) -> None:
        fs = LocalFilesystem()
        target = tmp_path / "modules" / "Blog" / "config" / "blog.php"
        fs.write_text(target, "<?php\n")

        assert target.read_text(encoding="utf-8") == "<?php\n"
        assert fs.exists(target)
        assert fs.is_dir(target.parent)

    @pytest.mark.integration
    def test_make_dirs_is_idempotent(self, tmp_path: Path) -> None:
        fs = LocalFilesystem()
        fs.make_dirs(tmp_path / "a" / "b")
        fs.make_dirs(tmp_path / "a" / "b")
        assert fs.is_dir(tmp_path / "a" / "b")
