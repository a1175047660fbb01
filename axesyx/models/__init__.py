"""Data models for Axe-Fx preset representation."""

from axesyx.models.preset import (
    BankAndPreset,
    CurrentEditBuffer,
    MessageType,
    Preset,
    Target,
)

__all__ = [
    "BankAndPreset",
    "CurrentEditBuffer",
    "MessageType",
    "Preset",
    "Target",
]
