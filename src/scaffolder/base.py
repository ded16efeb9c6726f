"""Shared plumbing for the scaffold generators.

Every generator follows the same steps: check the module directory, make
sure the target sub-directory exists, render a stub, write it, and record
what was written.  ``BaseGenerator`` holds the collaborators (config,
renderer, filesystem) and those steps; subclasses only decide names and
templates.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from src.config import Config

from .errors import ModuleNotFound, ScaffoldError
from .filesystem import Filesystem, LocalFilesystem
from .models import GeneratedFile, GenerationResult
from .templates import TemplateRenderer


class BaseGenerator:
    """Collaborators and write helpers common to all generators."""

    def __init__(
        self,
        config: Config,
        renderer: Optional[TemplateRenderer] = None,
        filesystem: Optional[Filesystem] = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.template_dirs)
        self.fs: Filesystem = filesystem or LocalFilesystem()

    # -- Preconditions -----------------------------------------------------

    def _require_module(self, module: str) -> Path:
        """Return the module root, raising ``ModuleNotFound`` when absent."""
        path = self.config.module_path(module)
        if not self.fs.is_dir(path):
            raise ModuleNotFound(module, path)
        return path

    # -- Writing -----------------------------------------------------------

    def _ensure_dir(self, path: Path, result: GenerationResult) -> None:
        if not self.fs.is_dir(path):
            self.fs.make_dirs(path)
            result.directories.append(path)

    def _write_template(
        self,
        result: GenerationResult,
        path: Path,
        template: str,
        placeholders: Mapping[str, str],
    ) -> GeneratedFile:
        """Render *template* and write it to *path*, replacing any existing file."""
        content = self.renderer.render(template, placeholders)
        return self._write(result, path, content, template)

    def _write(
        self,
        result: GenerationResult,
        path: Path,
        content: str,
        template: str = "",
    ) -> GeneratedFile:
        self.fs.write_text(path, content)
        generated = GeneratedFile(path=path, content=content, template=template)
        result.files.append(generated)
        return generated

    @contextmanager
    def _tracking(self, result: GenerationResult) -> Iterator[GenerationResult]:
        """Attach *result* to any scaffolding error raised inside the block.

        Nothing is rolled back; the attached result tells the caller which
        files are already on disk.
        """
        try:
            yield result
        except ScaffoldError as exc:
            if exc.partial is None:
                exc.partial = result
            raise


def module_placeholders(module: str, namespace: str) -> dict[str, str]:
    """Placeholders every module-scoped stub may use."""
    return {
        "MODULE_NAME": module,
        "MODULE_SLUG": module.lower(),
        "MODULE_CONSTANT": re.sub(r"[^A-Za-z0-9]+", "_", module).upper(),
        "NAMESPACE": namespace,
    }
