#!/usr/bin/env python3
"""
Example: Inspect SysEx messages and checksums

Lists every message in a file and runs the header checks on the first.
"""

import sys

sys.path.insert(0, "..")

from axesyx.formats import check_frame, split_frames
from axesyx.utils import format_hex


def main():
    with open("../tests/fixtures/ax8_bank_slot.syx", "rb") as f:
        data = f.read()

    frames = split_frames(data)
    print(f"Messages: {len(frames)}")
    for i, frame in enumerate(frames):
        print(f"  [{i}] offset={frame.offset:4d} length={len(frame):3d}  {format_hex(frame[:8])}")
    print()

    report = check_frame(frames[0])
    for check in report.checks:
        status = "OK  " if check.passed else "FAIL"
        print(f"{status} {check.name:16s} expected={check.expected:20s} actual={check.actual}")
    print()
    print(f"Valid: {report.valid}")


if __name__ == "__main__":
    main()
