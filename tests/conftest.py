"""Test configuration and fixtures."""

import pytest
from functools import reduce
from operator import xor
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def build_frame(payload):
    """Wrap header/data bytes (without F0) into a frame with a valid checksum."""
    body = bytes([0xF0]) + bytes(payload)
    checksum = reduce(xor, body, 0) & 0x7F
    return body + bytes([checksum, 0xF7])


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def edit_buffer_file(fixtures_dir):
    """Return path to Axe-Fx II edit buffer preset."""
    return fixtures_dir / "axe2_edit_buffer.syx"


@pytest.fixture
def bank_slot_file(fixtures_dir):
    """Return path to AX8 preset dump (header, data, footer) for bank 2 slot 10."""
    return fixtures_dir / "ax8_bank_slot.syx"


@pytest.fixture
def bad_checksum_file(fixtures_dir):
    """Return path to a preset whose checksum does not match."""
    return fixtures_dir / "bad_checksum.syx"


@pytest.fixture
def edit_buffer_frame():
    """Return the Axe-Fx II edit buffer header: F0 00 01 74 03 77 7F 00 0E F7."""
    return build_frame([0x00, 0x01, 0x74, 0x03, 0x77, 0x7F, 0x00])


@pytest.fixture
def bank_frame():
    """Return an Axe-Fx II XL header targeting bank 0, preset 5."""
    return build_frame([0x00, 0x01, 0x74, 0x06, 0x77, 0x00, 0x05])
