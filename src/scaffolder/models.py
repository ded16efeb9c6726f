"""Pydantic v2 models shared by the scaffold generators.

``NameForm`` is computed once per invocation from the raw identifier and is
frozen afterwards.  ``GeneratedFile`` and ``GenerationResult`` describe what a
generator wrote so the CLI can report it without the generators printing
anything themselves.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class NameForm(BaseModel):
    """Derived name variants of a user-supplied identifier."""

    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Identifier exactly as supplied")
    singular: str = Field(..., description="Raw identifier with one trailing 's' removed")
    plural: str = Field(..., description="Lower-cased plural of the class name")
    class_cased: str = Field(..., description="Singular form with its first letter uppercased")
    table_name: str = Field(..., description="Database table name for the class")


class GeneratedFile(BaseModel):
    """One rendered output file."""

    model_config = ConfigDict(frozen=True)

    path: Path
    content: str
    template: str = Field(default="", description="Stub used to render the file, empty for the manifest")

    @property
    def name(self) -> str:
        return self.path.name


class GenerationResult(BaseModel):
    """Everything a generator produced, in write order."""

    directories: list[Path] = Field(default_factory=list)
    files: list[GeneratedFile] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list, description="Completed steps")
    notes: list[str] = Field(default_factory=list, description="Informational lines for the user")
    failures: list[str] = Field(default_factory=list, description="Optional steps that did not complete")

    @property
    def paths(self) -> list[Path]:
        return [f.path for f in self.files]

    def extend(self, other: "GenerationResult") -> None:
        """Append the output of a cascaded generator."""
        self.directories.extend(other.directories)
        self.files.extend(other.files)
        self.messages.extend(other.messages)
        self.notes.extend(other.notes)
        self.failures.extend(other.failures)
