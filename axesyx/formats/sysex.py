"""
SysEx message framing.

Splits a raw byte buffer (the contents of a .syx file, or bytes captured
from a MIDI port) into individual System Exclusive messages.

Message Format:
    F0 [data...] F7

Where:
    - F0: Start of exclusive
    - data: 7-bit data bytes
    - F7: End of exclusive

Messages must follow each other directly: the byte after one message's
F7 has to be the next message's F0. Frames are returned as views into
the original buffer rather than copies.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Union

from axesyx.utils.validation import FramingError

logger = logging.getLogger(__name__)

SYSEX_START = 0xF0
SYSEX_END = 0xF7


@dataclass(frozen=True)
class SysExFrame:
    """
    A single F0 ... F7 message inside a larger buffer.

    The frame does not copy its bytes; it keeps a reference to the source
    buffer plus the message boundaries.

    Attributes:
        source: Buffer the frame was found in
        start: Offset of the F0 byte
        end: Offset just past the F7 byte
    """

    source: bytes
    start: int
    end: int

    @property
    def view(self) -> memoryview:
        return memoryview(self.source)[self.start : self.end]

    @property
    def offset(self) -> int:
        return self.start

    def __len__(self) -> int:
        return self.end - self.start

    def __getitem__(self, index):
        return self.view[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.view)

    def __bytes__(self) -> bytes:
        return self.source[self.start : self.end]

    def __eq__(self, other) -> bool:
        if isinstance(other, SysExFrame):
            return bytes(self) == bytes(other)
        if isinstance(other, (bytes, bytearray, memoryview)):
            return bytes(self) == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(bytes(self))

    def __repr__(self) -> str:
        return f"SysExFrame(offset={self.start}, length={len(self)})"


def _freeze(data: Union[bytes, bytearray, memoryview]) -> bytes:
    if isinstance(data, bytes):
        return data
    return bytes(data)


def iter_frames(
    data: Union[bytes, bytearray, memoryview], resync: bool = False
) -> Iterator[SysExFrame]:
    """
    Lazily split a buffer into SysEx frames.

    Args:
        data: Raw SysEx data
        resync: Skip stray bytes before a start byte instead of failing

    Yields:
        Frames in buffer order

    Raises:
        FramingError: If a message does not begin with F0 at the read
            position (and resync is off), or a message has no F7
    """
    source = _freeze(data)
    position = 0

    while position < len(source):
        if source[position] != SYSEX_START:
            if not resync:
                raise FramingError(
                    f"Expected SysEx start byte F0 at offset {position}, "
                    f"found {source[position]:02X}",
                    offset=position,
                )

            next_start = source.find(SYSEX_START, position)
            if next_start == -1:
                logger.debug(
                    "Ignoring %d trailing bytes after offset %d",
                    len(source) - position,
                    position,
                )
                return
            logger.debug("Skipped %d stray bytes at offset %d", next_start - position, position)
            position = next_start

        end = source.find(SYSEX_END, position)
        if end == -1:
            raise FramingError(
                f"Unterminated SysEx message starting at offset {position}",
                offset=position,
            )

        yield SysExFrame(source, position, end + 1)
        position = end + 1


def split_frames(
    data: Union[bytes, bytearray, memoryview], resync: bool = False
) -> List[SysExFrame]:
    """
    Split a buffer into SysEx frames.

    Empty input gives an empty list. A framing problem anywhere in the
    buffer fails the whole call; no partial list is returned.

    Args:
        data: Raw SysEx data
        resync: Skip stray bytes before a start byte instead of failing

    Returns:
        List of frames in buffer order
    """
    frames = list(iter_frames(data, resync=resync))
    logger.debug("Found %d SysEx message(s) in %d bytes", len(frames), len(data))
    return frames


def first_frame(
    data: Union[bytes, bytearray, memoryview], resync: bool = False
) -> SysExFrame:
    """
    Get the first SysEx frame of a buffer.

    The whole buffer is framed first, so trailing garbage is still
    reported.

    Raises:
        FramingError: If framing fails or the buffer holds no message
    """
    frames = split_frames(data, resync=resync)
    if not frames:
        raise FramingError("No SysEx message found", offset=0)
    return frames[0]
