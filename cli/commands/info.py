"""
Info command - decode and display the preset header of a .syx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from axesyx.formats.preset_parser import parse_preset
from axesyx.utils.validation import FramingError
from cli.commands.common import console_sink, fail, read_syx
from cli.display.tables import display_preset_info

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help=".syx file to read"),
    resync: bool = typer.Option(
        False, "--resync", "-r", help="Skip stray bytes between SysEx messages"
    ),
) -> None:
    """
    Show the preset header of an Axe-Fx SysEx file.

    Displays the device model, the message type and whether the preset
    goes to the edit buffer or to a bank/preset slot.

    Examples:

        axesyx info patch.syx

        axesyx info capture.syx --resync
    """
    data = read_syx(file)

    try:
        preset = parse_preset(data, sink=console_sink("red"), resync=resync)
    except FramingError as e:
        fail(str(e))

    if preset is None:
        raise typer.Exit(1)

    display_preset_info(preset, str(file))


if __name__ == "__main__":
    app()
