"""SysEx framing and Axe-Fx preset decoding."""

from axesyx.formats.sysex import SysExFrame, first_frame, iter_frames, split_frames
from axesyx.formats.preset_parser import (
    PresetParser,
    ValidationReport,
    check_frame,
    decode_preset,
    decode_preset_strict,
    parse_preset,
    read_preset,
)

__all__ = [
    "SysExFrame",
    "first_frame",
    "iter_frames",
    "split_frames",
    "PresetParser",
    "ValidationReport",
    "check_frame",
    "decode_preset",
    "decode_preset_strict",
    "parse_preset",
    "read_preset",
]
