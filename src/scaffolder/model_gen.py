"""Model generation for an existing module, with optional cascades.

After the model file is written, ``--migration``, ``--factory`` and
``--seeder`` each trigger one more generator.  The cascades are independent:
a precondition failure in one is recorded on the result and the remaining
ones still run.  A missing stub aborts the whole command.  Nothing already
written is removed in either case.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Optional

from src.config import Config, MigrationOptions, ModelOptions

from .base import BaseGenerator, module_placeholders
from .errors import ScaffoldError, TemplateNotFound
from .factory_gen import FactoryGenerator, SeederGenerator
from .filesystem import Filesystem
from .generator import MODELS_DIR
from .inflector import derive
from .migration_gen import MigrationGenerator
from .models import GenerationResult
from .templates import TemplateRenderer


class ModelGenerator(BaseGenerator):
    """Writes ``src/Models/<Class>.php`` and any requested companions."""

    def __init__(
        self,
        config: Config,
        renderer: Optional[TemplateRenderer] = None,
        filesystem: Optional[Filesystem] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(config, renderer, filesystem)
        self.migrations = MigrationGenerator(config, self.renderer, self.fs, clock=clock)
        self.factories = FactoryGenerator(config, self.renderer, self.fs)
        self.seeders = SeederGenerator(config, self.renderer, self.fs)

    def generate(self, options: ModelOptions) -> GenerationResult:
        """Render the model named by *options* and run the requested cascades.

        Raises:
            ModuleNotFound: The module has not been created yet.
            TemplateNotFound: A stub is missing; ``exc.partial`` lists every
                file written before the failure, cascades included.
        """
        root = self._require_module(options.module)
        namespace = self.config.resolve_namespace(options.namespace)
        names = derive(options.name)
        class_name = names.class_cased

        result = GenerationResult()
        with self._tracking(result):
            models_dir = root / MODELS_DIR
            self._ensure_dir(models_dir, result)
            path = models_dir / f"{class_name}.php"
            self._write_template(
                result,
                path,
                "model",
                {
                    **module_placeholders(options.module, namespace),
                    "MODEL_NAME": class_name,
                    "TABLE_NAME": names.table_name,
                },
            )
        result.messages.append(f"Created model: {path.name}")
        result.notes.append(f"Path: {path}")

        if options.migration:
            table = names.table_name
            self._cascade(
                "migration",
                lambda: self.migrations.generate(
                    MigrationOptions(
                        module=options.module,
                        name=f"create_{table}_table",
                        create=table,
                        namespace=options.namespace,
                    )
                ),
                result,
            )

        if options.factory:
            self._cascade(
                "factory",
                lambda: self.factories.generate(options.module, class_name, options.namespace),
                result,
            )

        if options.seeder:
            self._cascade(
                "seeder",
                lambda: self.seeders.generate(options.module, class_name, options.namespace),
                result,
            )

        return result

    def _cascade(
        self,
        step: str,
        run: Callable[[], GenerationResult],
        result: GenerationResult,
    ) -> None:
        try:
            produced = run()
        except TemplateNotFound as exc:
            if exc.partial is not None:
                result.extend(exc.partial)
            exc.partial = result
            raise
        except ScaffoldError as exc:
            if exc.partial is not None:
                result.extend(exc.partial)
            result.failures.append(f"{step}: {exc.message}")
        else:
            result.extend(produced)
