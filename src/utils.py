"""Console output helpers for the scaffolder CLI.

All user-facing output goes through one shared Rich ``Console`` so tests can
swap it for a recording console.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def print_info(message: str) -> None:
    """Print a green informational headline."""
    console.print(f"[green]{escape(message)}[/green]")


def print_line(message: str) -> None:
    """Print a plain line (no markup interpretation)."""
    console.print(message, markup=False, highlight=False)


def print_step(message: str) -> None:
    """Print a completed step as ``✓ <message>``."""
    console.print(f"[green]✓[/green] {escape(message)}", highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_summary_table(paths: Iterable[Path], root: Path, title: str = "Generated files") -> None:
    """Print the written files relative to *root*.

    Args:
        paths: Files in write order.
        root: Directory the paths are shown relative to; paths outside it
            are shown as-is.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("File")

    for index, path in enumerate(paths, start=1):
        try:
            shown = path.relative_to(root)
        except ValueError:
            shown = path
        table.add_row(str(index), str(shown))

    console.print(table)
    console.print()
