"""Model factory and seeder generation.

Both are only reachable through ``make-module-model --factory/--seeder`` and
take an already-derived model class name.
"""

from __future__ import annotations

from typing import Optional

from .base import BaseGenerator, module_placeholders
from .generator import FACTORIES_DIR, SEEDERS_DIR
from .models import GenerationResult


class FactoryGenerator(BaseGenerator):
    """Writes ``src/Database/Factories/<Class>Factory.php``."""

    def generate(
        self, module: str, class_name: str, namespace: Optional[str] = None
    ) -> GenerationResult:
        root = self._require_module(module)
        ns = self.config.resolve_namespace(namespace)

        result = GenerationResult()
        with self._tracking(result):
            target_dir = root / FACTORIES_DIR
            self._ensure_dir(target_dir, result)
            filename = f"{class_name}Factory.php"
            self._write_template(
                result,
                target_dir / filename,
                "factory",
                {**module_placeholders(module, ns), "CLASS_NAME": class_name},
            )
        result.messages.append(f"Created factory: {filename}")
        return result


class SeederGenerator(BaseGenerator):
    """Writes ``src/Database/Seeders/<Class>Seeder.php``."""

    def generate(
        self, module: str, class_name: str, namespace: Optional[str] = None
    ) -> GenerationResult:
        root = self._require_module(module)
        ns = self.config.resolve_namespace(namespace)

        result = GenerationResult()
        with self._tracking(result):
            target_dir = root / SEEDERS_DIR
            self._ensure_dir(target_dir, result)
            filename = f"{class_name}Seeder.php"
            self._write_template(
                result,
                target_dir / filename,
                "seeder",
                {**module_placeholders(module, ns), "CLASS_NAME": class_name},
            )
        result.messages.append(f"Created seeder: {filename}")
        return result
