"""
Axe-Fx SysEx checksum calculation utilities.

Fractal Audio messages carry a single checksum byte just before the
closing F7, calculated as:
1. XOR every byte of the message from F0 up to the last data byte
2. Keep the lower 7 bits so the result is a valid MIDI data byte

The start byte F0 is part of the calculation.
"""

from functools import reduce
from operator import xor
from typing import List, Tuple, Union

CHECKSUM_MASK = 0x7F

BytesLike = Union[bytes, bytearray, memoryview, List[int]]


def calculate_checksum(data: BytesLike) -> int:
    """
    Calculate the Axe-Fx checksum of a byte sequence.

    Args:
        data: Bytes to fold (typically F0 through the last data byte)

    Returns:
        Checksum value (0-127)

    Example:
        >>> calculate_checksum(bytes([0xF0, 0x00, 0x01, 0x74, 0x03, 0x77, 0x7F, 0x00]))
        14
    """
    return reduce(xor, bytes(data), 0) & CHECKSUM_MASK


def verify_checksum(data: BytesLike, expected_checksum: int) -> bool:
    """
    Verify an Axe-Fx checksum.

    Args:
        data: Bytes the checksum was calculated over
        expected_checksum: The checksum byte from the message

    Returns:
        True if checksum is valid, False otherwise
    """
    return calculate_checksum(data) == expected_checksum


def frame_checksums(frame: BytesLike) -> Tuple[int, int]:
    """
    Get the stored and calculated checksums of a complete message.

    Expects format: F0 00 01 74 MM TT [data...] CS F7

    Args:
        frame: Complete SysEx message including F0 and F7

    Returns:
        (stored, calculated) checksum pair
    """
    frame = bytes(frame)
    if len(frame) < 3:
        raise ValueError(f"Message too short for a checksum: {len(frame)} bytes")

    checksum_index = len(frame) - 2
    stored = frame[checksum_index]
    calculated = calculate_checksum(frame[:checksum_index])
    return stored, calculated
