"""
Capture Axe-Fx SysEx dumps from a MIDI input port.

The preset dump has to be started on the device (or by an editor); this
module only listens. Capture ends when:
1. The preset footer message (type 79) arrives
2. No message arrived for idle_timeout seconds
3. The total timeout is reached
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import mido

from axesyx.formats.sysex import SYSEX_END, SYSEX_START
from axesyx.formats.preset_parser import FRACTAL_ID, OFFSET_TYPE

logger = logging.getLogger(__name__)

# Last message of an Axe-Fx II preset dump (77 header, 78 data chunks, 79 footer)
PRESET_FOOTER = 0x79


def find_midi_port(port_name: Optional[str] = None) -> Optional[str]:
    """Find a MIDI input port by name or return the most likely one."""
    ports = mido.get_input_names()
    if not ports:
        return None
    if port_name:
        if port_name in ports:
            return port_name
        matches = [p for p in ports if port_name.lower() in p.lower()]
        if matches:
            return matches[0]
        return None
    for p in ports:
        lowered = p.lower()
        if "axe" in lowered or "fractal" in lowered or "ax8" in lowered or "fx8" in lowered:
            return p
    return ports[0]


def is_preset_footer(data: Iterable[int]) -> bool:
    """Check if SysEx data (without F0/F7) closes a preset dump."""
    data = bytes(data)
    # mido strips F0, so every offset is one less than in the raw frame
    type_index = OFFSET_TYPE - 1
    return data[:3] == FRACTAL_ID and len(data) > type_index and data[type_index] == PRESET_FOOTER


def messages_to_bytes(messages: Iterable[mido.Message]) -> bytes:
    """Reassemble mido SysEx messages into raw .syx bytes."""
    raw = bytearray()
    for msg in messages:
        if msg.type != "sysex":
            continue
        raw.append(SYSEX_START)
        raw.extend(msg.data)
        raw.append(SYSEX_END)
    return bytes(raw)


@dataclass
class CaptureResult:
    """SysEx messages received during one capture."""

    port: str
    messages: List[mido.Message] = field(default_factory=list)
    complete: bool = False

    @property
    def data(self) -> bytes:
        return messages_to_bytes(self.messages)

    @property
    def total_bytes(self) -> int:
        return sum(len(m.data) + 2 for m in self.messages)


def capture_sysex(
    port_name: Optional[str] = None,
    timeout: float = 60,
    idle_timeout: float = 5,
) -> CaptureResult:
    """
    Capture SysEx messages from a MIDI input port.

    Args:
        port_name: MIDI port name or part of it (auto-detect if None)
        timeout: Maximum total wait time in seconds
        idle_timeout: Stop after this many seconds without a message

    Returns:
        Captured messages

    Raises:
        OSError: If no matching MIDI input port exists
    """
    in_port_name = find_midi_port(port_name)
    if not in_port_name:
        raise OSError(f"No MIDI input port found{f' matching {port_name!r}' if port_name else ''}")

    result = CaptureResult(port=in_port_name)
    logger.info("Listening on %s (timeout %ss, idle %ss)", in_port_name, timeout, idle_timeout)

    with mido.open_input(in_port_name) as inport:
        for _ in inport.iter_pending():
            pass

        start_time = time.time()
        last_msg_time = start_time

        while True:
            now = time.time()
            if now - start_time > timeout:
                logger.info("Total timeout (%ss) reached", timeout)
                break
            if result.messages and now - last_msg_time > idle_timeout:
                logger.info("Idle timeout (%ss) reached", idle_timeout)
                break

            msg = inport.poll()
            if msg is None:
                time.sleep(0.005)
                continue

            last_msg_time = time.time()
            if msg.type != "sysex":
                continue

            result.messages.append(msg)
            logger.debug(
                "[%3d] SysEx: %s (%d bytes)",
                len(result.messages),
                " ".join(f"{b:02X}" for b in msg.data[:8]),
                len(msg.data) + 2,
            )

            if is_preset_footer(msg.data):
                result.complete = True
                break

    return result
