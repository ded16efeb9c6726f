"""``composer.json`` generation for new modules.

The manifest is built as a plain dict and serialised with ``json`` rather
than rendered from a stub, so its structure is always valid JSON regardless of
what the module name or namespace contain.
"""

from __future__ import annotations

import json
from typing import Any

from src.config import ManifestConfig


def module_namespace(namespace: str, module: str) -> str:
    """``App\\Modules`` + ``Posts`` -> ``App\\Modules\\Posts``."""
    base = namespace.rstrip("\\")
    return f"{base}\\{module}"


def build_manifest(module: str, namespace: str, settings: ManifestConfig) -> dict[str, Any]:
    """Return the composer package descriptor for *module*."""
    package = module.lower()
    full_namespace = module_namespace(namespace, module)
    return {
        "name": f"{settings.vendor}/module-{package}",
        "type": "library",
        "description": f"{module} module for Hypervel framework",
        "keywords": ["hypervel", "module", package],
        "license": settings.license,
        "authors": [
            {
                "name": settings.author_name,
                "email": settings.author_email,
            },
        ],
        "require": {
            "php": settings.php_version,
            settings.framework_package: settings.framework_version,
        },
        "autoload": {
            "psr-4": {
                f"{full_namespace}\\": "src/",
            },
        },
        "extra": {
            "hypervel": {
                "providers": [
                    f"{full_namespace}\\Providers\\{module}ServiceProvider",
                ],
            },
        },
        "config": {
            "sort-packages": True,
        },
        "minimum-stability": settings.minimum_stability,
        "prefer-stable": settings.prefer_stable,
    }


def render_manifest(module: str, namespace: str, settings: ManifestConfig) -> str:
    """Serialise the manifest as pretty-printed JSON.

    ``json`` never escapes forward slashes, so ``src/`` and
    ``hypervel/framework`` come out as written.
    """
    data = build_manifest(module, namespace, settings)
    return json.dumps(data, indent=4, ensure_ascii=False)
