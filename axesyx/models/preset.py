"""
Preset data model for Axe-Fx SysEx dumps.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from axesyx.utils.axe_models import UNKNOWN_MODEL


class MessageType(IntEnum):
    """Axe-Fx message types that carry a preset header."""

    PATCH_DUMP = 0x77
    IR_DOWNLOAD = 0x7A  # MIDI_START_IR_DOWNLOAD
    LEGACY_PATCH_DUMP = 0x04  # Standard/Ultra patch dumps


@dataclass(frozen=True)
class CurrentEditBuffer:
    """Preset is meant for the device's working state, not a stored slot."""

    def describe(self) -> str:
        return "Current edit buffer"


@dataclass(frozen=True)
class BankAndPreset:
    """
    Stored preset location.

    Devices send 7-bit values; any byte is accepted as read from the wire.

    Attributes:
        bank: Bank number (0-255)
        preset: Preset number within the bank (0-255)
    """

    bank: int
    preset: int

    def __post_init__(self) -> None:
        for name, value in (("bank", self.bank), ("preset", self.preset)):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be 0-255, got {value}")

    def describe(self) -> str:
        return f"Bank {self.bank}, preset {self.preset}"


Target = Union[CurrentEditBuffer, BankAndPreset]


@dataclass(frozen=True)
class Preset:
    """
    Decoded Axe-Fx preset header.

    Attributes:
        model: Display name of the originating hardware model
        target: Where the preset should go (edit buffer or bank/slot)
        model_code: Raw model code byte (None when built by hand)
        message_type: Message type the preset arrived in
    """

    model: str
    target: Target
    model_code: Optional[int] = None
    message_type: MessageType = MessageType.PATCH_DUMP

    @property
    def is_edit_buffer(self) -> bool:
        return isinstance(self.target, CurrentEditBuffer)

    @property
    def is_known_model(self) -> bool:
        return self.model != UNKNOWN_MODEL

    def describe(self) -> str:
        """One-line human readable summary."""
        return f"{self.model}: {self.target.describe()}"
