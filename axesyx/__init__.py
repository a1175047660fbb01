"""
axesyx - Preset header reader for Fractal Audio Axe-Fx SysEx dumps.

This library provides tools to:
- Split raw .syx data into individual SysEx messages
- Validate the Fractal Audio header and checksum of a preset dump
- Tell whether a preset targets the edit buffer or a bank/preset slot

Example usage:
    from axesyx import parse_preset

    with open("patch.syx", "rb") as f:
        preset = parse_preset(f.read())

    if preset is not None:
        print(preset.model, preset.target)
"""

__version__ = "0.1.0"
__author__ = "axesyx Contributors"

from axesyx.formats.preset_parser import (
    PresetParser,
    decode_preset,
    decode_preset_strict,
    parse_preset,
    read_preset,
)
from axesyx.formats.sysex import SysExFrame, split_frames
from axesyx.models.preset import BankAndPreset, CurrentEditBuffer, MessageType, Preset
from axesyx.utils.axe_models import get_model_name
from axesyx.utils.validation import ChecksumError, FramingError, HeaderError, SysExError

__all__ = [
    "PresetParser",
    "decode_preset",
    "decode_preset_strict",
    "parse_preset",
    "read_preset",
    "SysExFrame",
    "split_frames",
    "BankAndPreset",
    "CurrentEditBuffer",
    "MessageType",
    "Preset",
    "get_model_name",
    "ChecksumError",
    "FramingError",
    "HeaderError",
    "SysExError",
]
