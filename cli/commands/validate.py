"""
Validate command - check the header and checksum of a .syx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from axesyx.formats.preset_parser import check_frame
from axesyx.formats.sysex import first_frame
from axesyx.utils.validation import FramingError
from cli.commands.common import fail, read_syx
from cli.display.tables import display_validation

console = Console()
app = typer.Typer()


@app.command()
def validate(
    file: Path = typer.Argument(..., help=".syx file to validate"),
    resync: bool = typer.Option(
        False, "--resync", "-r", help="Skip stray bytes between SysEx messages"
    ),
    strict: bool = typer.Option(False, "--strict", "-s", help="Treat warnings as errors"),
) -> None:
    """
    Validate the first preset message of an Axe-Fx SysEx file.

    Checks for:

    - Message length
    - Fractal Audio manufacturer ID (00 01 74)
    - Known model code (warning only)
    - Supported message type (77, 7A, 04)
    - 7-bit bank/preset numbers
    - XOR checksum

    Examples:

        axesyx validate patch.syx

        axesyx validate patch.syx --strict
    """
    data = read_syx(file)

    try:
        frame = first_frame(data, resync=resync)
    except FramingError as e:
        fail(str(e))

    report = check_frame(frame)
    display_validation(report, str(file))

    if not report.valid or (strict and report.warnings):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
