"""
Capture command - receive an Axe-Fx dump from a MIDI input port.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from axesyx.formats.preset_parser import parse_preset
from axesyx.midi.capture import capture_sysex
from axesyx.utils.validation import FramingError
from cli.commands.common import console_sink, fail
from cli.display.tables import display_preset_info

console = Console()
app = typer.Typer()


@app.command()
def capture(
    port: Optional[str] = typer.Option(
        None,
        "--port",
        "-p",
        envvar="AXESYX_MIDI_PORT",
        help="MIDI input port name or part of it (default: auto-detect)",
    ),
    timeout: float = typer.Option(60, "--timeout", "-t", help="Max total wait time in seconds"),
    idle_timeout: float = typer.Option(5, "--idle-timeout", help="Stop after N seconds idle"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save received bytes"),
) -> None:
    """
    Capture a preset dump from an Axe-Fx over MIDI and decode it.

    Start the capture, then send the preset from the device (or from an
    editor). Capture stops at the end of the preset dump or after the
    idle timeout.

    Examples:

        axesyx capture --port "Axe-Fx II" -o patch.syx

        AXESYX_MIDI_PORT="AX8" axesyx capture
    """
    try:
        result = capture_sysex(port_name=port, timeout=timeout, idle_timeout=idle_timeout)
    except OSError as e:
        fail(str(e))

    console.print(f"Listened on: [cyan]{result.port}[/cyan]")

    if not result.messages:
        console.print("[yellow]No SysEx messages received.[/yellow]")
        raise typer.Exit(1)

    console.print(
        f"Received {len(result.messages)} message(s), {result.total_bytes} bytes"
        + ("" if result.complete else " [yellow](no end of dump seen)[/yellow]")
    )

    data = result.data
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "wb") as f:
            f.write(data)
        console.print(f"Saved to: {output}")

    try:
        preset = parse_preset(data, sink=console_sink("red"))
    except FramingError as e:
        fail(str(e))

    if preset is None:
        raise typer.Exit(1)

    display_preset_info(preset)


if __name__ == "__main__":
    app()
