"""Migration generation for an existing module.

Filenames start with a ``YYYY_MM_DD_HHMMSS`` timestamp so that sorting the
migrations directory by name gives creation order.  Two migrations created
within the same second sort by their names instead.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Optional

from src.config import Config, MigrationOptions

from .base import BaseGenerator
from .filesystem import Filesystem
from .generator import MIGRATIONS_DIR
from .inflector import studly_case
from .models import GenerationResult
from .templates import TemplateRenderer

TIMESTAMP_FORMAT = "%Y_%m_%d_%H%M%S"


def migration_timestamp(moment: datetime) -> str:
    """Sortable, second-resolution filename prefix."""
    return moment.strftime(TIMESTAMP_FORMAT)


class MigrationGenerator(BaseGenerator):
    """Writes ``src/Database/Migrations/<timestamp>_<name>.php``.

    Variant selection:
    - ``create`` set -> ``migration-create`` (creates the table)
    - ``table`` set -> ``migration-modify`` (alters the table)
    - neither -> ``migration-generic``
    """

    def __init__(
        self,
        config: Config,
        renderer: Optional[TemplateRenderer] = None,
        filesystem: Optional[Filesystem] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(config, renderer, filesystem)
        self.clock = clock

    def generate(self, options: MigrationOptions) -> GenerationResult:
        """Render one migration into the module named by *options*.

        Raises:
            ModuleNotFound: The module has not been created yet.
        """
        root = self._require_module(options.module)

        result = GenerationResult()
        with self._tracking(result):
            migrations_dir = root / MIGRATIONS_DIR
            self._ensure_dir(migrations_dir, result)

            filename = f"{migration_timestamp(self.clock())}_{options.name}.php"
            placeholders = {"CLASS_NAME": studly_case(options.name)}
            if options.create:
                template = "migration-create"
                placeholders["TABLE_NAME"] = options.create
            elif options.table:
                template = "migration-modify"
                placeholders["TABLE_NAME"] = options.table
            else:
                template = "migration-generic"

            path = migrations_dir / filename
            self._write_template(result, path, template, placeholders)

        result.messages.append(f"Created migration: {filename}")
        result.notes.append(f"Path: {path}")
        if options.create:
            result.notes.append(f"This migration will create the '{options.create}' table.")
        elif options.table:
            result.notes.append(f"This migration will modify the '{options.table}' table.")
        return result
