"""
CLI display modules.
"""

from cli.display.tables import display_frames, display_preset_info, display_validation
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_frames",
    "display_preset_info",
    "display_validation",
    "display_hex_dump",
]
