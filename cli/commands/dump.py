"""
Dump command - annotated hex dump of one SysEx message.
"""

from pathlib import Path

import typer
from rich.console import Console

from axesyx.formats.sysex import split_frames
from axesyx.utils.validation import FramingError
from cli.commands.common import fail, read_syx
from cli.display.hex_view import create_legend, display_hex_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help=".syx file to dump"),
    frame: int = typer.Option(0, "--frame", "-f", help="Index of the message to dump"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    resync: bool = typer.Option(
        False, "--resync", "-r", help="Skip stray bytes between SysEx messages"
    ),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a SysEx message.

    Header fields (manufacturer ID, model, type, bank, preset) and the
    checksum are color coded.

    Examples:

        axesyx dump patch.syx

        axesyx dump patch.syx --frame 2 --width 8
    """
    data = read_syx(file)

    try:
        found = split_frames(data, resync=resync)
    except FramingError as e:
        fail(str(e))

    if not 0 <= frame < len(found):
        fail(f"Message {frame} not found ({len(found)} messages in file)")

    selected = found[frame]
    display_hex_dump(
        bytes(selected),
        title=f"Message {frame} at offset 0x{selected.offset:04X}",
        bytes_per_line=max(1, width),
    )

    if not no_legend:
        console.print()
        console.print(create_legend())


if __name__ == "__main__":
    app()
