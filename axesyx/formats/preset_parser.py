"""
Axe-Fx preset header parser.

Decodes the header of a Fractal Audio preset dump and validates its
checksum.

Preset Dump Format:
    F0 00 01 74 MM TT BB PP [data...] CS F7

Where:
    - 00 01 74: Fractal Audio manufacturer ID (00 00 7D before firmware 10.02)
    - MM: Model code (see axesyx.utils.axe_models)
    - TT: Message type (77, 7A or 04)
    - BB: Bank number, or 7F for the current edit buffer
    - PP: Preset number (ignored for the edit buffer)
    - CS: XOR of F0 through the last data byte, masked to 7 bits
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

from axesyx.formats.sysex import SysExFrame, first_frame
from axesyx.models.preset import (
    BankAndPreset,
    CurrentEditBuffer,
    MessageType,
    Preset,
    Target,
)
from axesyx.utils.axe_models import get_model_name, is_known_model
from axesyx.utils.checksum import frame_checksums
from axesyx.utils.validation import ChecksumError, HeaderError, SysExError, format_hex

logger = logging.getLogger(__name__)

# Manufacturer sysex ID. As of firmware 10.02 this is 00 01 74.
FRACTAL_ID = bytes([0x00, 0x01, 0x74])
EDIT_BUFFER = 0x7F
DATA_MASK = 0x7F

# F0 + ID (3) + model + type + bank + checksum + F7
MIN_FRAME_LENGTH = 9
# Bank targets also need the preset byte
MIN_BANK_FRAME_LENGTH = 10

OFFSET_MODEL = 4
OFFSET_TYPE = 5
OFFSET_BANK = 6
OFFSET_PRESET = 7

MESSAGE_TYPES = frozenset(t.value for t in MessageType)

HEADER_MISMATCH = "This does not look like an Axe-Fx preset."

Frame = Union[SysExFrame, bytes, bytearray, memoryview]
DiagnosticSink = Callable[[str], None]


def _log_diagnostic(message: str) -> None:
    logger.warning(message)


def _min_length(buf: bytes) -> int:
    if len(buf) > OFFSET_BANK and buf[OFFSET_BANK] == EDIT_BUFFER:
        return MIN_FRAME_LENGTH
    return MIN_BANK_FRAME_LENGTH


def _validate_header(buf: bytes) -> None:
    if len(buf) < _min_length(buf):
        raise HeaderError(f"Message too short: {len(buf)} bytes", buf)

    if buf[1:4] != FRACTAL_ID:
        raise HeaderError(f"Unexpected manufacturer ID {format_hex(buf[1:4])}", buf)

    if buf[OFFSET_TYPE] not in MESSAGE_TYPES:
        raise HeaderError(f"Unsupported message type {buf[OFFSET_TYPE]:02X}", buf)


def _resolve_target(buf: bytes) -> Target:
    if buf[OFFSET_BANK] == EDIT_BUFFER:
        return CurrentEditBuffer()
    return BankAndPreset(bank=buf[OFFSET_BANK], preset=buf[OFFSET_PRESET])


def decode_preset_strict(frame: Frame) -> Preset:
    """
    Decode a single SysEx frame into a Preset.

    Checks are made in order: header, then checksum, then the target
    is resolved.

    Args:
        frame: One complete message, F0 through F7

    Returns:
        Decoded Preset

    Raises:
        HeaderError: If the manufacturer ID or message type is wrong
        ChecksumError: If the stored checksum does not match
    """
    buf = bytes(frame)
    _validate_header(buf)

    model = get_model_name(buf[OFFSET_MODEL])
    stored, calculated = frame_checksums(buf)
    if stored != calculated:
        raise ChecksumError(model, expected=calculated, actual=stored)

    return Preset(
        model=model,
        target=_resolve_target(buf),
        model_code=buf[OFFSET_MODEL],
        message_type=MessageType(buf[OFFSET_TYPE]),
    )


def decode_preset(frame: Frame, sink: Optional[DiagnosticSink] = None) -> Optional[Preset]:
    """
    Decode a single SysEx frame, reporting problems to a sink.

    Args:
        frame: One complete message, F0 through F7
        sink: Receives human readable diagnostics (default: module logger)

    Returns:
        Decoded Preset, or None if the header or checksum is invalid
    """
    emit = sink or _log_diagnostic

    try:
        return decode_preset_strict(frame)
    except HeaderError as e:
        emit(f"{HEADER_MISMATCH}\n{e.frame_hex}")
    except ChecksumError as e:
        emit(str(e))
    return None


def parse_preset(
    data: Union[bytes, bytearray, memoryview],
    sink: Optional[DiagnosticSink] = None,
    resync: bool = False,
) -> Optional[Preset]:
    """
    Decode the preset in the first message of a raw SysEx buffer.

    Args:
        data: Raw SysEx data, one or more messages
        sink: Receives human readable diagnostics (default: module logger)
        resync: Skip stray bytes between messages instead of failing

    Returns:
        Decoded Preset, or None if the header or checksum is invalid

    Raises:
        FramingError: If the buffer cannot be split into messages
    """
    return decode_preset(first_frame(data, resync=resync), sink=sink)


@dataclass
class FrameCheck:
    """A single check made against a frame."""

    name: str
    passed: bool
    expected: str = ""
    actual: str = ""
    severity: str = "error"  # "error" or "warning"


@dataclass
class ValidationReport:
    """
    Result of inspecting one frame without raising.

    Attributes:
        checks: Individual checks in the order they were made
        preset: Decoded preset if every check passed
        model: Resolved model name (set whenever the frame is long enough)
    """

    checks: List[FrameCheck] = field(default_factory=list)
    preset: Optional[Preset] = None
    model: str = ""

    @property
    def valid(self) -> bool:
        return self.preset is not None and not self.errors

    @property
    def errors(self) -> List[FrameCheck]:
        return [c for c in self.checks if not c.passed and c.severity == "error"]

    @property
    def warnings(self) -> List[FrameCheck]:
        return [c for c in self.checks if not c.passed and c.severity == "warning"]


def check_frame(frame: Frame) -> ValidationReport:
    """
    Inspect a frame and report every header check separately.

    Unlike decode_preset this keeps going after a failed check where
    possible, so all problems in a frame are listed at once.
    """
    buf = bytes(frame)
    report = ValidationReport()
    checks = report.checks

    min_length = _min_length(buf)
    length_ok = len(buf) >= min_length
    checks.append(FrameCheck("Length", length_ok, f">= {min_length} bytes", f"{len(buf)} bytes"))
    if not length_ok:
        return report

    checks.append(
        FrameCheck(
            "Manufacturer ID",
            buf[1:4] == FRACTAL_ID,
            format_hex(FRACTAL_ID),
            format_hex(buf[1:4]),
        )
    )

    model_code = buf[OFFSET_MODEL]
    report.model = get_model_name(model_code)
    checks.append(
        FrameCheck(
            "Model",
            is_known_model(model_code),
            "known model",
            f"{model_code:02X} ({report.model})",
            severity="warning",
        )
    )

    type_ok = buf[OFFSET_TYPE] in MESSAGE_TYPES
    checks.append(
        FrameCheck(
            "Message Type",
            type_ok,
            "/".join(f"{t.value:02X}" for t in MessageType),
            f"{buf[OFFSET_TYPE]:02X}",
        )
    )

    # Bank or preset bytes above 7F still decode but are not MIDI data bytes
    target = _resolve_target(buf)
    target_bytes = [] if isinstance(target, CurrentEditBuffer) else [target.bank, target.preset]
    checks.append(
        FrameCheck(
            "Target",
            all(b <= DATA_MASK for b in target_bytes),
            "7-bit bank/preset",
            target.describe(),
            severity="warning",
        )
    )

    stored, calculated = frame_checksums(buf)
    checks.append(FrameCheck("Checksum", stored == calculated, f"{calculated:02X}", f"{stored:02X}"))

    try:
        report.preset = decode_preset_strict(buf)
    except SysExError:
        report.preset = None

    return report


class PresetParser:
    """
    Parser for Axe-Fx preset SysEx files.

    Example:
        parser = PresetParser()
        preset = parser.parse_file("patch.syx")

        if preset is not None:
            print(preset.describe())
    """

    def __init__(self, sink: Optional[DiagnosticSink] = None, resync: bool = False):
        self.sink = sink
        self.resync = resync

    def parse_file(self, filepath: Union[str, Path]) -> Optional[Preset]:
        """
        Parse a .syx file.

        Args:
            filepath: Path to .syx file

        Returns:
            Decoded Preset or None
        """
        with open(filepath, "rb") as f:
            data = f.read()
        return self.parse_bytes(data)

    def parse_bytes(self, data: Union[bytes, bytearray, memoryview]) -> Optional[Preset]:
        """Parse the first preset in raw SysEx data."""
        return parse_preset(data, sink=self.sink, resync=self.resync)

    def decode_frame(self, frame: Frame) -> Optional[Preset]:
        """Decode an already extracted frame."""
        return decode_preset(frame, sink=self.sink)


def read_preset(filepath: Union[str, Path], resync: bool = False) -> Optional[Preset]:
    """
    Convenience function to decode an Axe-Fx .syx file.

    Args:
        filepath: Path to .syx file

    Returns:
        Decoded Preset or None
    """
    parser = PresetParser(resync=resync)
    return parser.parse_file(filepath)
