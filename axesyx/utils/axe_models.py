"""
Axe-Fx family model lookup table.

The model code is the byte following the Fractal Audio manufacturer ID
in every SysEx message sent by the device.
"""

from types import MappingProxyType
from typing import Mapping

UNKNOWN_MODEL = "Unknown"

AXE_MODELS: Mapping[int, str] = MappingProxyType(
    {
        0x00: "Axe-Fx Standard",
        0x01: "Axe-Fx Ultra",
        0x03: "Axe-Fx II",
        0x05: "FX8",
        0x06: "Axe-Fx II XL",
        0x07: "Axe-Fx II XL+",
        0x08: "AX8",
    }
)


def get_model_name(code: int) -> str:
    """
    Get the display name for a model code.

    Codes outside the table resolve to "Unknown"; an unrecognized
    device is still structurally parseable.

    Args:
        code: Model code byte (offset 4 of the message)

    Returns:
        Model display name
    """
    return AXE_MODELS.get(code, UNKNOWN_MODEL)


def is_known_model(code: int) -> bool:
    """Check if a model code is in the table."""
    return code in AXE_MODELS
