"""
Rich table displays for preset information.
"""

from typing import List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from axesyx.formats.preset_parser import ValidationReport
from axesyx.formats.sysex import SysExFrame
from axesyx.models.preset import Preset
from axesyx.utils.validation import format_hex

console = Console()


def display_preset_info(preset: Preset, filepath: str = "") -> None:
    """Display a decoded preset header."""
    target_style = "cyan" if preset.is_edit_buffer else "magenta"
    model_style = "green" if preset.is_known_model else "yellow"

    content = ""
    if filepath:
        content += f"[bold]File:[/bold] {escape(filepath)}\n"
    model_code = "" if preset.model_code is None else f" (0x{preset.model_code:02X})"
    content += (
        f"[bold]Model:[/bold] [{model_style}]{preset.model}[/{model_style}]{model_code}\n"
        f"[bold]Message Type:[/bold] {preset.message_type.name} (0x{preset.message_type.value:02X})\n"
        f"[bold]Target:[/bold] [{target_style}]{preset.target.describe()}[/{target_style}]"
    )

    console.print(
        Panel(
            content,
            title="[bold blue]Axe-Fx Preset[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_frames(frames: List[SysExFrame], preview: int = 8) -> None:
    """Display a table of the SysEx messages found in a buffer."""
    table = Table(
        title=f"SysEx Messages ({len(frames)})",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Offset", style="cyan", width=8)
    table.add_column("Length", width=7)
    table.add_column("Preview", width=32)

    for i, frame in enumerate(frames):
        data = bytes(frame)
        hex_preview = format_hex(data[:preview])
        if len(data) > preview:
            hex_preview += " ..."
        table.add_row(str(i), f"0x{frame.offset:04X}", str(len(frame)), hex_preview)

    console.print(table)


def display_validation(report: ValidationReport, filepath: str = "") -> None:
    """Display the result of checking a frame."""
    if report.valid and not report.warnings:
        status, border = "[green]VALID[/green]", "green"
    elif report.valid:
        status, border = "[yellow]VALID (with warnings)[/yellow]", "yellow"
    else:
        status, border = "[red]INVALID[/red]", "red"

    console.print(
        Panel(
            (f"[bold]File:[/bold] {escape(filepath)}\n" if filepath else "")
            + f"[bold]Status:[/bold] {status}\n\n"
            f"Errors: [red]{len(report.errors)}[/red]  "
            f"Warnings: [yellow]{len(report.warnings)}[/yellow]",
            title="[bold]Validation Result[/bold]",
            border_style=border,
        )
    )

    table = Table(title="Checks", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Result", width=6)
    table.add_column("Check", style="cyan", width=16)
    table.add_column("Expected", width=20)
    table.add_column("Actual", width=20)

    for check in report.checks:
        if check.passed:
            result = "[green]OK[/green]"
        elif check.severity == "warning":
            result = "[yellow]WARN[/yellow]"
        else:
            result = "[red]FAIL[/red]"
        table.add_row(result, check.name, check.expected, check.actual)

    console.print(table)
