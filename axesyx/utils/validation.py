"""
Error types raised while extracting and decoding Axe-Fx SysEx data.
"""

from typing import Optional


def format_hex(data: bytes) -> str:
    """Render bytes as space-separated two-digit uppercase hex."""
    return " ".join(f"{b:02X}" for b in bytes(data))


class SysExError(ValueError):
    """Base class for SysEx extraction and decoding failures."""

    pass


class FramingError(SysExError):
    """Raised when a buffer cannot be split into F0 ... F7 messages."""

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.offset = offset


class HeaderError(SysExError):
    """Raised when the manufacturer ID or message type does not match."""

    def __init__(self, message: str, frame: bytes = b""):
        super().__init__(message)
        self.frame = bytes(frame)

    @property
    def frame_hex(self) -> str:
        return format_hex(self.frame)


class ChecksumError(SysExError):
    """Raised when the stored checksum differs from the calculated one."""

    def __init__(self, model: str, expected: int, actual: int):
        super().__init__(
            f"Invalid checksum (model {model})! Expected {expected:02X} but got {actual:02X}"
        )
        self.model = model
        self.expected = expected
        self.actual = actual
