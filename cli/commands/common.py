"""
Helpers shared by the CLI commands.
"""

from pathlib import Path
from typing import Callable, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

console = Console()


def read_syx(file: Path) -> bytes:
    """Read a .syx file, exiting with an error message if it is unreadable."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    try:
        with open(file, "rb") as f:
            return f.read()
    except OSError as e:
        console.print(f"[red]Error: Cannot read {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


def console_sink(style: str = "yellow") -> Callable[[str], None]:
    """Diagnostic sink printing decoder messages to the console."""

    def sink(message: str) -> None:
        console.print(f"[{style}]{escape(message)}[/{style}]")

    return sink
