"""Utility functions for axesyx."""

from axesyx.utils.axe_models import AXE_MODELS, get_model_name, is_known_model
from axesyx.utils.checksum import calculate_checksum, frame_checksums, verify_checksum
from axesyx.utils.validation import (
    ChecksumError,
    FramingError,
    HeaderError,
    SysExError,
    format_hex,
)

__all__ = [
    "AXE_MODELS",
    "get_model_name",
    "is_known_model",
    "calculate_checksum",
    "frame_checksums",
    "verify_checksum",
    "ChecksumError",
    "FramingError",
    "HeaderError",
    "SysExError",
    "format_hex",
]
