"""Command-line entry point for the Hypervel module scaffolder.

Usage::

    python -m src.cli make-module Posts
    python -m src.cli make-module-controller Posts Post --resource
    python -m src.cli make-module-migration Posts add_slug_to_posts --table=posts
    python -m src.cli make-module-model Blog Tags --migration --factory --seeder
    python -m src.cli list-templates

Exit codes:
    0  success
    1  precondition failure (module exists / module missing) or a cascaded
       step of ``make-module-model`` did not complete
    2  invalid arguments

A missing stub template is not mapped to an exit code: it is re-raised after
reporting any files already written, and the interpreter exits with a
traceback.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.table import Table

from src.config import Config, ControllerOptions, MigrationOptions, ModelOptions, ModuleOptions
from src.scaffolder import (
    ControllerGenerator,
    GenerationResult,
    MigrationGenerator,
    ModelGenerator,
    ModuleGenerator,
    ScaffoldError,
    TemplateNotFound,
    TemplateRenderer,
)
from src.scaffolder.templates import find_placeholders
from src.utils import (
    console,
    print_error,
    print_info,
    print_line,
    print_step,
    print_success,
    print_summary_table,
    print_warning,
)

Handler = Callable[[argparse.Namespace, Config], int]


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def _report(result: GenerationResult) -> None:
    for message in result.messages:
        print_step(message)
    for failure in result.failures:
        print_warning(f"Skipped {failure}")


def _report_partial(exc: ScaffoldError) -> None:
    """Tell the user which files a failed command left behind."""
    partial = exc.partial
    if partial is None or not partial.files:
        return
    print_warning(
        f"{len(partial.files)} file(s) were written before the failure and were left in place:"
    )
    for path in partial.paths:
        print_line(f"  {path}")


def _run_generator(run: Callable[[], GenerationResult]) -> tuple[Optional[GenerationResult], int]:
    """Run *run*, translating precondition errors into an exit code."""
    try:
        return run(), 0
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"]) or "options"
            print_error(f"Invalid {field}: {err['msg']}")
        return None, 2
    except TemplateNotFound as exc:
        print_error(exc.message)
        _report_partial(exc)
        raise
    except ScaffoldError as exc:
        print_error(exc.message)
        if exc.hint:
            print_line(exc.hint)
        _report_partial(exc)
        return None, 1


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_make_module(args: argparse.Namespace, config: Config) -> int:
    generator = ModuleGenerator(config)
    result, code = _run_generator(
        lambda: generator.generate(ModuleOptions(name=args.name, namespace=args.namespace))
    )
    if result is None:
        return code

    print_info(f"Creating module: {args.name}")
    print_info(result.notes[0])
    _report(result)
    print_success(f"Module {args.name} created successfully!")
    for note in result.notes[1:]:
        print_line(note)
    print_summary_table(result.paths, config.module_path(args.name))
    return 0


def cmd_make_controller(args: argparse.Namespace, config: Config) -> int:
    generator = ControllerGenerator(config)
    result, code = _run_generator(
        lambda: generator.generate(
            ControllerOptions(
                module=args.module,
                name=args.name,
                resource=args.resource,
                api=args.api,
                namespace=args.namespace,
            )
        )
    )
    if result is None:
        return code

    _report(result)
    print_success("Controller created successfully!")
    for note in result.notes:
        print_line(note)
    return 0


def cmd_make_migration(args: argparse.Namespace, config: Config) -> int:
    generator = MigrationGenerator(config)
    result, code = _run_generator(
        lambda: generator.generate(
            MigrationOptions(
                module=args.module,
                name=args.name,
                create=args.create,
                table=args.table,
                namespace=args.namespace,
            )
        )
    )
    if result is None:
        return code

    _report(result)
    print_success("Migration created successfully!")
    for note in result.notes:
        print_line(note)
    return 0


def cmd_make_model(args: argparse.Namespace, config: Config) -> int:
    generator = ModelGenerator(config)
    result, code = _run_generator(
        lambda: generator.generate(
            ModelOptions(
                module=args.module,
                name=args.name,
                migration=args.migration,
                factory=args.factory,
                seeder=args.seeder,
                namespace=args.namespace,
            )
        )
    )
    if result is None:
        return code

    _report(result)
    if result.failures:
        print_warning("Model created, but some requested files could not be generated.")
        return 1
    print_success("Model created successfully!")
    for note in result.notes:
        print_line(note)
    return 0


def cmd_list_templates(args: argparse.Namespace, config: Config) -> int:
    renderer = TemplateRenderer(config.template_dirs)
    table = Table(title="Stub templates", show_header=True, header_style="bold cyan")
    table.add_column("Name", no_wrap=True)
    table.add_column("Placeholders")
    table.add_column("Source", style="dim")

    for name in renderer.list_templates():
        tokens = sorted(find_placeholders(renderer.load(name)))
        table.add_row(name, ", ".join(tokens), str(renderer.source_of(name)))

    console.print(table)
    return 0


COMMANDS: dict[str, Handler] = {
    "make-module": cmd_make_module,
    "make-module-controller": cmd_make_controller,
    "make-module-migration": cmd_make_migration,
    "make-module-model": cmd_make_model,
    "list-templates": cmd_list_templates,
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hypervel-modules",
        description="Scaffold modules, controllers, models and migrations for Hypervel apps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  hypervel-modules make-module Posts\n"
            "  hypervel-modules make-module-controller Posts Post --api\n"
            "  hypervel-modules make-module-model Blog Tags --migration --factory\n"
        ),
    )
    parser.add_argument(
        "--base-path",
        default=None,
        help="Application root containing the modules directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: read HYPERMOD_* environment variables)",
    )
    parser.add_argument(
        "--template-dir",
        action="append",
        default=[],
        help="Directory with stub overrides; may be given more than once",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    def add_namespace(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--namespace",
            default=None,
            help="The namespace for the module (default: App\\Modules)",
        )

    p = sub.add_parser("make-module", help="Create a new module with complete structure")
    p.add_argument("name", help="The name of the module")
    add_namespace(p)

    p = sub.add_parser("make-module-controller", help="Create a controller for a specific module")
    p.add_argument("module", help="The module name")
    p.add_argument("name", help="The controller name")
    p.add_argument("--resource", action="store_true", help="Generate a resource controller")
    p.add_argument("--api", action="store_true", help="Generate an API resource controller")
    add_namespace(p)

    p = sub.add_parser("make-module-migration", help="Create a migration for a specific module")
    p.add_argument("module", help="The module name")
    p.add_argument("name", help="The migration name")
    tables = p.add_mutually_exclusive_group()
    tables.add_argument("--create", default=None, help="The table to create")
    tables.add_argument("--table", default=None, help="The table to modify")
    add_namespace(p)

    p = sub.add_parser("make-module-model", help="Create a model for a specific module")
    p.add_argument("module", help="The module name")
    p.add_argument("name", help="The model name")
    p.add_argument("--migration", action="store_true", help="Create a migration for the model")
    p.add_argument("--factory", action="store_true", help="Create a factory for the model")
    p.add_argument("--seeder", action="store_true", help="Create a seeder for the model")
    add_namespace(p)

    sub.add_parser("list-templates", help="List available stub templates and their placeholders")

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Build the effective configuration from file/env plus CLI overrides."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.base_path:
        config.base_path = Path(args.base_path)
    if args.template_dir:
        config.template_dirs = [Path(d) for d in args.template_dir] + config.template_dirs
    return config


def run(argv: Optional[list[str]] = None) -> int:
    """Parse *argv*, dispatch to the command handler and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args)
    return COMMANDS[args.command](args, config)


def main() -> None:
    """CLI entry point for ``hypervel-modules`` / ``python -m src.cli``."""
    sys.exit(run())


if __name__ == "__main__":
    main()
