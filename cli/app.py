"""
axesyx - Preset header reader for Fractal Audio Axe-Fx SysEx dumps.

A small CLI tool for checking Axe-Fx preset files and captures.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from axesyx import __version__
from cli.commands.capture import capture
from cli.commands.dump import dump
from cli.commands.frames import frames
from cli.commands.info import info
from cli.commands.ports import ports
from cli.commands.validate import validate

console = Console()

# Main app
app = typer.Typer(
    name="axesyx",
    help="Read and validate Fractal Audio Axe-Fx preset SysEx files.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="info")(info)
app.command(name="validate")(validate)
app.command(name="frames")(frames)
app.command(name="dump")(dump)
app.command(name="ports")(ports)
app.command(name="capture")(capture)


def configure_logging(verbose: bool = False) -> None:
    """Send library log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]axesyx[/bold] version {__version__}")
    console.print("[dim]Preset header reader for Axe-Fx SysEx files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    axesyx - Inspect Fractal Audio Axe-Fx preset dumps.

    Supports Axe-Fx Standard, Ultra, II, II XL, II XL+, FX8 and AX8
    preset files (.syx).

    [bold]Quick Start:[/bold]

        axesyx info patch.syx          # Model and target of a preset
        axesyx validate patch.syx      # Header and checksum checks

    [bold]Analysis Commands:[/bold]

        axesyx frames patch.syx        # List SysEx messages
        axesyx dump patch.syx          # Annotated hex dump

    [bold]MIDI Commands:[/bold]

        axesyx ports                   # List MIDI input ports
        axesyx capture -o patch.syx    # Receive a dump from the device

    Use --help with any command for more details.
    """
    configure_logging(verbose)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
