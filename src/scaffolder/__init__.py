"""Hypervel module scaffolder -- generates modules and their building blocks.

Each generator derives names with the inflector, renders ``{{TOKEN}}`` stubs
with the ``TemplateRenderer`` and writes the result through an injected
``Filesystem``.

Quick usage::

    from src.config import Config, ModuleOptions
    from src.scaffolder import ModuleGenerator

    generator = ModuleGenerator(Config(base_path=Path("/srv/app")))
    result = generator.generate(ModuleOptions(name="Posts"))
    print(result.paths)
"""

from src.scaffolder.controller_gen import ControllerGenerator
from src.scaffolder.errors import (
    ModuleAlreadyExists,
    ModuleNotFound,
    ScaffoldError,
    TemplateNotFound,
)
from src.scaffolder.factory_gen import FactoryGenerator, SeederGenerator
from src.scaffolder.filesystem import Filesystem, LocalFilesystem, MemoryFilesystem
from src.scaffolder.generator import ModuleGenerator
from src.scaffolder.migration_gen import MigrationGenerator
from src.scaffolder.model_gen import ModelGenerator
from src.scaffolder.models import GeneratedFile, GenerationResult, NameForm
from src.scaffolder.templates import TemplateRenderer

__all__ = [
    "ControllerGenerator",
    "FactoryGenerator",
    "Filesystem",
    "GeneratedFile",
    "GenerationResult",
    "LocalFilesystem",
    "MemoryFilesystem",
    "MigrationGenerator",
    "ModelGenerator",
    "ModuleAlreadyExists",
    "ModuleGenerator",
    "ModuleNotFound",
    "NameForm",
    "ScaffoldError",
    "SeederGenerator",
    "TemplateNotFound",
    "TemplateRenderer",
]
