"""MIDI port helpers."""

from axesyx.midi.capture import (
    CaptureResult,
    capture_sysex,
    find_midi_port,
    is_preset_footer,
    messages_to_bytes,
)

__all__ = [
    "CaptureResult",
    "capture_sysex",
    "find_midi_port",
    "is_preset_footer",
    "messages_to_bytes",
]
