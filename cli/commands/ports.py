"""
Ports command - list available MIDI input ports.
"""

import mido
import typer
from rich.console import Console
from rich.markup import escape

from axesyx.midi.capture import find_midi_port

console = Console()
app = typer.Typer()


@app.command()
def ports() -> None:
    """
    List MIDI input ports that a dump can be captured from.
    """
    inputs = mido.get_input_names()

    console.print(f"[bold]Input ports ({len(inputs)}):[/bold]")
    if not inputs:
        console.print("  [dim](none found)[/dim]")
        raise typer.Exit(1)

    default = find_midi_port()
    for i, name in enumerate(inputs):
        marker = " [green](default)[/green]" if name == default else ""
        console.print(f"  \\[{i}] {escape(name)}{marker}")


if __name__ == "__main__":
    app()
