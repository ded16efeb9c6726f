"""Exceptions raised by the scaffold generators."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import GenerationResult


class ScaffoldError(Exception):
    """Base class for every scaffolding failure.

    ``partial`` holds whatever was written before the failure so that callers
    can tell the user which files were left on disk.
    """

    hint: Optional[str] = None

    def __init__(self, message: str, *, partial: Optional["GenerationResult"] = None) -> None:
        self.message = message
        self.partial = partial
        super().__init__(message)


class ModuleAlreadyExists(ScaffoldError):
    """Raised by ``make-module`` when the module directory is already present."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Module {name} already exists!")


class ModuleNotFound(ScaffoldError):
    """Raised by sub-generators when the target module directory is absent."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        self.hint = f"Create the module first using: make-module {name}"
        super().__init__(f"Module {name} does not exist!")


class TemplateNotFound(ScaffoldError):
    """Raised when a stub template cannot be located on the search path.

    Unlike the precondition errors this is not a user mistake: it means the
    installation (or a configured override directory) is broken.
    """

    def __init__(self, name: str, searched: list[Path]) -> None:
        self.name = name
        self.searched = searched
        locations = ", ".join(str(p) for p in searched) or "<none>"
        super().__init__(f"Stub file not found: {name} (searched: {locations})")
