"""
Frames command - list the SysEx messages in a .syx file.
"""

from pathlib import Path

import typer
from rich.console import Console

from axesyx.formats.sysex import split_frames
from axesyx.utils.validation import FramingError
from cli.commands.common import fail, read_syx
from cli.display.tables import display_frames

console = Console()
app = typer.Typer()


@app.command()
def frames(
    file: Path = typer.Argument(..., help=".syx file to scan"),
    resync: bool = typer.Option(
        False, "--resync", "-r", help="Skip stray bytes between SysEx messages"
    ),
    preview: int = typer.Option(8, "--preview", "-p", help="Bytes shown per message"),
) -> None:
    """
    List every SysEx message (F0 ... F7) in a file.

    Examples:

        axesyx frames patch.syx

        axesyx frames capture.syx --resync
    """
    data = read_syx(file)

    try:
        found = split_frames(data, resync=resync)
    except FramingError as e:
        fail(str(e))

    if not found:
        console.print("[yellow]No SysEx messages found[/yellow]")
        return

    display_frames(found, preview=preview)


if __name__ == "__main__":
    app()
