"""Module scaffolding.

``ModuleGenerator`` creates a brand-new module: the directory skeleton, its
``composer.json`` and the default provider, routes, config, controller, model
and middleware.  Refuses to touch a module directory that already exists.
"""

from __future__ import annotations

from pathlib import Path

from src.config import ModuleOptions

from .base import BaseGenerator, module_placeholders
from .errors import ModuleAlreadyExists
from .inflector import derive
from .manifest import module_namespace, render_manifest
from .models import GenerationResult


# ---------------------------------------------------------------------------
# Module layout
# ---------------------------------------------------------------------------

MODULE_DIRECTORIES: list[str] = [
    "src/Http/Controllers",
    "src/Http/Middleware",
    "src/Http/Requests",
    "src/Models",
    "src/Database/Migrations",
    "src/Database/Seeders",
    "src/Database/Factories",
    "src/Routes",
    "src/Providers",
    "config",
]

CONTROLLERS_DIR = "src/Http/Controllers"
MIDDLEWARE_DIR = "src/Http/Middleware"
MODELS_DIR = "src/Models"
MIGRATIONS_DIR = "src/Database/Migrations"
SEEDERS_DIR = "src/Database/Seeders"
FACTORIES_DIR = "src/Database/Factories"
ROUTES_DIR = "src/Routes"
PROVIDERS_DIR = "src/Providers"
CONFIG_DIR = "config"


# ---------------------------------------------------------------------------
# Module generator
# ---------------------------------------------------------------------------


class ModuleGenerator(BaseGenerator):
    """Creates a complete module under ``<base_path>/<modules_dir>/<Name>``.

    Files are written in a fixed order:
    - ``composer.json`` (built from data, not a stub)
    - ``src/Providers/<Name>ServiceProvider.php``
    - ``src/Routes/api.php``
    - ``config/<name>.php``
    - ``src/Http/Controllers/ApiController.php``
    - ``src/Models/<Singular>.php``
    - ``src/Http/Middleware/<Name>Middleware.php``
    """

    def generate(self, options: ModuleOptions) -> GenerationResult:
        """Scaffold the module described by *options*.

        Raises:
            ModuleAlreadyExists: The module directory is already present.
                Nothing is written in that case.
            TemplateNotFound: A stub is missing; files written before the
                failure stay on disk and are listed in ``exc.partial``.
        """
        name = options.name
        namespace = self.config.resolve_namespace(options.namespace)
        root = self.config.module_path(name)

        if self.fs.exists(root):
            raise ModuleAlreadyExists(name, root)

        result = GenerationResult()
        result.notes.append(f"Using namespace: {module_namespace(namespace, name)}")

        with self._tracking(result):
            self._create_structure(root, result)
            self._create_manifest(root, name, namespace, result)

            placeholders = module_placeholders(name, namespace)
            self._create_service_provider(root, name, placeholders, result)
            self._create_routes(root, placeholders, result)
            self._create_config(root, name, placeholders, result)
            self._create_controllers(root, placeholders, result)
            self._create_model(root, name, placeholders, result)
            self._create_middleware(root, name, placeholders, result)

        result.notes.append(f"Module path: {root}")
        result.notes.append("Don't forget to run: composer dump-autoload")
        return result

    # -- Steps -------------------------------------------------------------

    def _create_structure(self, root: Path, result: GenerationResult) -> None:
        for rel in MODULE_DIRECTORIES:
            self._ensure_dir(root / rel, result)
        result.messages.append("Created module directory structure")

    def _create_manifest(
        self, root: Path, name: str, namespace: str, result: GenerationResult
    ) -> None:
        content = render_manifest(name, namespace, self.config.manifest)
        self._write(result, root / "composer.json", content)
        result.messages.append("Created composer.json")

    def _create_service_provider(
        self, root: Path, name: str, placeholders: dict[str, str], result: GenerationResult
    ) -> None:
        self._write_template(
            result,
            root / PROVIDERS_DIR / f"{name}ServiceProvider.php",
            "service-provider",
            placeholders,
        )
        result.messages.append("Created service provider")

    def _create_routes(
        self, root: Path, placeholders: dict[str, str], result: GenerationResult
    ) -> None:
        self._write_template(result, root / ROUTES_DIR / "api.php", "api-routes", placeholders)
        result.messages.append("Created route files")

    def _create_config(
        self, root: Path, name: str, placeholders: dict[str, str], result: GenerationResult
    ) -> None:
        self._write_template(
            result, root / CONFIG_DIR / f"{name.lower()}.php", "config", placeholders
        )
        result.messages.append("Created config file")

    def _create_controllers(
        self, root: Path, placeholders: dict[str, str], result: GenerationResult
    ) -> None:
        self._write_template(
            result,
            root / CONTROLLERS_DIR / "ApiController.php",
            "api-controller",
            placeholders,
        )
        result.messages.append("Created default controllers")

    def _create_model(
        self, root: Path, name: str, placeholders: dict[str, str], result: GenerationResult
    ) -> None:
        names = derive(name)
        self._write_template(
            result,
            root / MODELS_DIR / f"{names.class_cased}.php",
            "model",
            {
                **placeholders,
                "MODEL_NAME": names.class_cased,
                "TABLE_NAME": names.table_name,
            },
        )
        result.messages.append("Created default model")

    def _create_middleware(
        self, root: Path, name: str, placeholders: dict[str, str], result: GenerationResult
    ) -> None:
        self._write_template(
            result,
            root / MIDDLEWARE_DIR / f"{name}Middleware.php",
            "middleware",
            placeholders,
        )
        result.messages.append("Created middleware")
