"""Hypervel module scaffolder configuration.

Centralised, typed configuration for every ``make-module*`` command. All
settings use Pydantic v2 models so they can be validated at construction time
and serialised to/from JSON or environment variables without boiler-plate.

The per-command option models at the bottom of this module enumerate every
flag a command accepts together with its default, so generators never read
from a loose option dictionary.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, Field, field_validator, model_validator


DEFAULT_NAMESPACE = "App\\Modules"


class ManifestConfig(BaseModel):
    """Values written into every generated ``composer.json``."""

    vendor: str = Field(default="hypervel", min_length=1)
    license: str = Field(default="MIT")
    author_name: str = Field(default="Your Name")
    author_email: str = Field(default="your.email@example.com")
    php_version: str = Field(default=">=8.2", description="Composer constraint for php")
    framework_package: str = Field(default="hypervel/framework")
    framework_version: str = Field(default="^0.3")
    minimum_stability: str = Field(default="dev")
    prefer_stable: bool = Field(default=True)


class Config(BaseModel):
    """Global scaffolder configuration.

    Instances are typically created once by the CLI entry point (from the
    environment, a JSON file, or defaults) and then handed to every
    generator.
    """

    base_path: Path = Field(default=Path("."))
    modules_dir: str = Field(default="modules", min_length=1)
    default_namespace: str = Field(default=DEFAULT_NAMESPACE, min_length=1)
    template_dirs: list[Path] = Field(
        default_factory=list,
        description="Directories searched for stub overrides before the packaged stubs",
    )
    manifest: ManifestConfig = Field(default_factory=ManifestConfig)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def modules_path(self) -> Path:
        """Root directory that holds every module."""
        return self.base_path / self.modules_dir

    def module_path(self, name: str) -> Path:
        """Root directory of the module called *name*."""
        return self.modules_path / name

    def resolve_namespace(self, namespace: Optional[str]) -> str:
        """Return *namespace* or the configured default when it is empty.

        Trailing backslashes are dropped so generated ``namespace`` lines and
        the PSR-4 autoload key share the same base.
        """
        return (namespace or self.default_namespace).rstrip("\\")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            HYPERMOD_BASE_PATH, HYPERMOD_MODULES_DIR, HYPERMOD_NAMESPACE,
            HYPERMOD_TEMPLATE_DIRS (``os.pathsep`` separated),
            HYPERMOD_VENDOR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("HYPERMOD_BASE_PATH"):
            kwargs["base_path"] = Path(os.environ["HYPERMOD_BASE_PATH"])
        if os.environ.get("HYPERMOD_MODULES_DIR"):
            kwargs["modules_dir"] = os.environ["HYPERMOD_MODULES_DIR"]
        if os.environ.get("HYPERMOD_NAMESPACE"):
            kwargs["default_namespace"] = os.environ["HYPERMOD_NAMESPACE"]

        dirs_str = os.environ.get("HYPERMOD_TEMPLATE_DIRS", "")
        template_dirs = [Path(d) for d in dirs_str.split(os.pathsep) if d.strip()]
        if template_dirs:
            kwargs["template_dirs"] = template_dirs

        manifest_kwargs: dict[str, Any] = {}
        if os.environ.get("HYPERMOD_VENDOR"):
            manifest_kwargs["vendor"] = os.environ["HYPERMOD_VENDOR"]

        return cls(manifest=ManifestConfig(**manifest_kwargs), **kwargs)


# ---------------------------------------------------------------------------
# Per-command options
# ---------------------------------------------------------------------------


class _CommandOptions(BaseModel):
    """Fields shared by every command."""

    namespace: Optional[str] = Field(
        default=None,
        description="Base namespace; falls back to Config.default_namespace",
    )

    @field_validator("namespace")
    @classmethod
    def blank_namespace_is_default(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().rstrip("\\")
        return value or None


def _require_identifier(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be empty")
    return value


Identifier = Annotated[str, AfterValidator(_require_identifier)]


class ModuleOptions(_CommandOptions):
    """Options for ``make-module``."""

    name: Identifier = Field(..., description="The name of the module")


class ControllerOptions(_CommandOptions):
    """Options for ``make-module-controller``."""

    module: Identifier = Field(..., description="The module name")
    name: Identifier = Field(..., description="The controller name")
    resource: bool = Field(default=False, description="Generate a resource controller")
    api: bool = Field(default=False, description="Generate an API resource controller")

    @field_validator("name")
    @classmethod
    def name_is_not_bare_suffix(cls, value: str) -> str:
        if value == "Controller":
            raise ValueError("must name the controller, not just the 'Controller' suffix")
        return value

    @property
    def wants_resource(self) -> bool:
        return self.resource or self.api


class MigrationOptions(_CommandOptions):
    """Options for ``make-module-migration``."""

    module: Identifier = Field(..., description="The module name")
    name: Identifier = Field(..., description="The migration name")
    create: Optional[str] = Field(default=None, description="The table to create")
    table: Optional[str] = Field(default=None, description="The table to modify")

    @model_validator(mode="after")
    def check_create_or_table(self) -> "MigrationOptions":
        if self.create and self.table:
            raise ValueError("--create and --table are mutually exclusive")
        return self


class ModelOptions(_CommandOptions):
    """Options for ``make-module-model``."""

    module: Identifier = Field(..., description="The module name")
    name: Identifier = Field(..., description="The model name")
    migration: bool = Field(default=False, description="Create a migration for the model")
    factory: bool = Field(default=False, description="Create a factory for the model")
    seeder: bool = Field(default=False, description="Create a seeder for the model")
