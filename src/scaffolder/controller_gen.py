"""Controller generation for an existing module.

A plain controller gets the ``controller-basic`` stub; ``--resource`` and
``--api`` both switch to the CRUD-shaped ``controller-resource`` stub, with
``--api`` additionally flagging the controller as JSON-only.
"""

from __future__ import annotations

from src.config import ControllerOptions

from .base import BaseGenerator, module_placeholders
from .generator import CONTROLLERS_DIR
from .inflector import controller_class_name, controller_model_name
from .models import GenerationResult


class ControllerGenerator(BaseGenerator):
    """Writes ``src/Http/Controllers/<Name>Controller.php``."""

    def generate(self, options: ControllerOptions) -> GenerationResult:
        """Render one controller into the module named by *options*.

        An existing controller with the same name is overwritten.

        Raises:
            ModuleNotFound: The module has not been created yet.
        """
        root = self._require_module(options.module)
        namespace = self.config.resolve_namespace(options.namespace)
        class_name = controller_class_name(options.name)

        result = GenerationResult()
        with self._tracking(result):
            controllers_dir = root / CONTROLLERS_DIR
            self._ensure_dir(controllers_dir, result)

            placeholders = {
                **module_placeholders(options.module, namespace),
                "CLASS_NAME": class_name,
            }
            if options.wants_resource:
                template = "controller-resource"
                placeholders["MODEL_NAME"] = controller_model_name(class_name)
                placeholders["IS_API"] = "true" if options.api else "false"
            else:
                template = "controller-basic"

            path = controllers_dir / f"{class_name}.php"
            self._write_template(result, path, template, placeholders)

        result.messages.append(f"Created controller: {path.name}")
        result.notes.append(f"Path: {path}")
        if options.resource:
            result.notes.append("This is a resource controller with CRUD methods.")
        elif options.api:
            result.notes.append("This is an API resource controller with CRUD methods.")
        return result
