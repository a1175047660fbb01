#!/usr/bin/env python3
"""
Example: Read an Axe-Fx preset header

Shows how to decode the first preset in a .syx file and collect the
diagnostics instead of logging them.
"""

import sys

sys.path.insert(0, "..")

from axesyx import BankAndPreset, PresetParser


def main():
    messages = []
    parser = PresetParser(sink=messages.append)
    preset = parser.parse_file("../tests/fixtures/ax8_bank_slot.syx")

    if preset is None:
        print("Not a valid preset:")
        for message in messages:
            print(f"  {message}")
        return 1

    print(f"Model: {preset.model} (0x{preset.model_code:02X})")
    print(f"Message Type: {preset.message_type.name}")

    if isinstance(preset.target, BankAndPreset):
        print(f"Bank: {preset.target.bank}")
        print(f"Preset: {preset.target.preset}")
    else:
        print("Target: current edit buffer")

    return 0


if __name__ == "__main__":
    sys.exit(main())
