"""
Hex dump display utilities.
"""

from typing import Tuple

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Header fields by offset: name, color
FIELDS = {
    0: ("SOX", "dim"),
    1: ("ID", "bright_blue"),
    2: ("ID", "bright_blue"),
    3: ("ID", "bright_blue"),
    4: ("MODEL", "green"),
    5: ("TYPE", "cyan"),
    6: ("BANK", "magenta"),
    7: ("PRESET", "magenta"),
}


def get_field_for_offset(offset: int, length: int) -> Tuple[str, str]:
    """Get field name and color for an offset within a frame."""
    if offset == length - 1:
        return "EOX", "dim"
    if offset == length - 2:
        return "CHECKSUM", "yellow"
    return FIELDS.get(offset, ("DATA", "white"))


def format_hex_line(data: bytes, offset: int, length: int) -> Text:
    """Format one line of a frame dump with field colors."""
    text = Text()
    text.append(f"{offset:04X}  ", style="dim")

    for i, byte in enumerate(data):
        _, color = get_field_for_offset(offset + i, length)
        text.append(f"{byte:02X}", style=color)
        text.append(" ")

    return text


def display_hex_dump(data: bytes, title: str = "Hex Dump", bytes_per_line: int = 16) -> None:
    """Display a frame as a colored hex dump."""
    console.print(f"[bold]{title}[/bold] [dim]({len(data)} bytes)[/dim]")

    for offset in range(0, len(data), bytes_per_line):
        console.print(format_hex_line(data[offset : offset + bytes_per_line], offset, len(data)))


def create_legend() -> Table:
    """Create a legend for the field colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Field", width=10)
    table.add_column("Offset", width=12)

    rows = [
        ("SOX", "dim", "0"),
        ("ID", "bright_blue", "1-3"),
        ("MODEL", "green", "4"),
        ("TYPE", "cyan", "5"),
        ("BANK", "magenta", "6"),
        ("PRESET", "magenta", "7"),
        ("CHECKSUM", "yellow", "len-2"),
        ("EOX", "dim", "len-1"),
    ]
    for name, color, where in rows:
        table.add_row(Text(name, style=color), where)

    return table
