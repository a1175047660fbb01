"""Tests for the axesyx command line interface."""

import logging

import mido
import pytest
import sys
from pathlib import Path
from rich.console import Console
from rich.logging import RichHandler
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent))

from axesyx import __version__
from axesyx.models.preset import CurrentEditBuffer, Preset
from cli.app import app
from cli.display import tables

runner = CliRunner()


@pytest.fixture
def junk_file(tmp_path):
    """Return path to a file with bytes before the first SysEx message."""
    path = tmp_path / "junk.syx"
    path.write_bytes(b"\x00\x00" + bytes.fromhex("F0 00 01 74 03 77 7F 00 0E F7"))
    return path


@pytest.fixture
def root_logger():
    """Restore the root logger after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestInfoCommand:
    """Test cases for the info command."""

    def test_edit_buffer(self, edit_buffer_file):
        """Test showing an edit buffer preset."""
        result = runner.invoke(app, ["info", str(edit_buffer_file)])

        assert result.exit_code == 0
        assert "Axe-Fx II" in result.output
        assert "Current edit buffer" in result.output

    def test_bank_slot(self, bank_slot_file):
        """Test showing a stored preset."""
        result = runner.invoke(app, ["info", str(bank_slot_file)])

        assert result.exit_code == 0
        assert "AX8" in result.output
        assert "Bank 2, preset 10" in result.output

    def test_bad_checksum(self, bad_checksum_file):
        """Test that a checksum failure exits with an error."""
        result = runner.invoke(app, ["info", str(bad_checksum_file)])

        assert result.exit_code == 1
        assert "Invalid checksum (model Axe-Fx II)! Expected 0F but got 0E" in result.output

    def test_missing_file(self, tmp_path):
        """Test a file that does not exist."""
        result = runner.invoke(app, ["info", str(tmp_path / "nope.syx")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_framing_error(self, junk_file):
        """Test that leading junk is reported without --resync."""
        result = runner.invoke(app, ["info", str(junk_file)])

        assert result.exit_code == 1
        assert "Expected SysEx start byte F0" in result.output

    def test_resync(self, junk_file):
        """Test that --resync skips leading junk."""
        result = runner.invoke(app, ["info", "--resync", str(junk_file)])

        assert result.exit_code == 0
        assert "Axe-Fx II" in result.output


class TestValidateCommand:
    """Test cases for the validate command."""

    def test_valid_file(self, edit_buffer_file):
        """Test validating a good file."""
        result = runner.invoke(app, ["validate", str(edit_buffer_file)])

        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_invalid_file(self, bad_checksum_file):
        """Test validating a file with a bad checksum."""
        result = runner.invoke(app, ["validate", str(bad_checksum_file)])

        assert result.exit_code == 1
        assert "INVALID" in result.output
        assert "Checksum" in result.output

    def test_strict_unknown_model(self, tmp_path):
        """Test that --strict fails on an unknown model."""
        path = tmp_path / "unknown.syx"
        # Model 0x10, checksum 0x1D
        path.write_bytes(bytes.fromhex("F0 00 01 74 10 77 7F 00 1D F7"))

        assert runner.invoke(app, ["validate", str(path)]).exit_code == 0
        assert runner.invoke(app, ["validate", "--strict", str(path)]).exit_code == 1


class TestFramesAndDump:
    """Test cases for the frames and dump commands."""

    def test_frames(self, bank_slot_file):
        """Test listing messages."""
        result = runner.invoke(app, ["frames", str(bank_slot_file)])

        assert result.exit_code == 0
        assert "SysEx Messages (3)" in result.output

    def test_frames_empty_file(self, tmp_path):
        """Test an empty file."""
        path = tmp_path / "empty.syx"
        path.write_bytes(b"")
        result = runner.invoke(app, ["frames", str(path)])

        assert result.exit_code == 0
        assert "No SysEx messages found" in result.output

    def test_dump(self, bank_slot_file):
        """Test dumping the second message."""
        result = runner.invoke(app, ["dump", "--frame", "1", "--no-legend", str(bank_slot_file)])

        assert result.exit_code == 0
        assert "Message 1 at offset 0x000A" in result.output
        assert "F0 00 01 74 08 78" in result.output

    def test_dump_missing_frame(self, edit_buffer_file):
        """Test asking for a message that does not exist."""
        result = runner.invoke(app, ["dump", "--frame", "3", str(edit_buffer_file)])

        assert result.exit_code == 1
        assert "Message 3 not found" in result.output


class TestMidiCommands:
    """Test cases for the ports and capture commands."""

    def test_ports(self, monkeypatch):
        """Test listing ports."""
        monkeypatch.setattr(mido, "get_input_names", lambda: ["Midi Through", "AX8 MIDI In"])
        result = runner.invoke(app, ["ports"])

        assert result.exit_code == 0
        assert "Input ports (2)" in result.output
        assert "AX8 MIDI In (default)" in result.output

    def test_ports_none(self, monkeypatch):
        """Test that no ports is an error."""
        monkeypatch.setattr(mido, "get_input_names", lambda: [])
        result = runner.invoke(app, ["ports"])

        assert result.exit_code == 1

    def test_capture(self, monkeypatch, tmp_path):
        """Test capturing and saving a dump."""
        queue = [
            mido.Message("sysex", data=[0x00, 0x01, 0x74, 0x08, 0x77, 0x02, 0x0A, 0x72]),
            mido.Message("sysex", data=[0x00, 0x01, 0x74, 0x08, 0x79, 0x00, 0x74]),
        ]

        class Port:
            def __enter__(self):
                return self

            def __exit__(self, *args):
                return False

            def iter_pending(self):
                return iter([])

            def poll(self):
                return queue.pop(0) if queue else None

        monkeypatch.setattr(mido, "get_input_names", lambda: ["AX8 MIDI In"])
        monkeypatch.setattr(mido, "open_input", lambda name: Port())
        output = tmp_path / "captured" / "patch.syx"

        result = runner.invoke(app, ["capture", "--timeout", "5", "-o", str(output)])

        assert result.exit_code == 0
        assert "Received 2 message(s)" in result.output
        assert "Bank 2, preset 10" in result.output
        assert output.read_bytes()[:10] == bytes.fromhex("F0 00 01 74 08 77 02 0A 72 F7")

    def test_capture_port_from_environment(self, monkeypatch):
        """Test that AXESYX_MIDI_PORT selects the port."""
        monkeypatch.setattr(mido, "get_input_names", lambda: ["USB MIDI"])
        monkeypatch.setenv("AXESYX_MIDI_PORT", "Axe-Fx III")
        result = runner.invoke(app, ["capture", "--timeout", "0.1"])

        assert result.exit_code == 1
        assert "No MIDI input port found matching 'Axe-Fx III'" in result.output


class TestVersion:
    """Test cases for version output."""

    def test_version_command(self):
        """Test the version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_flag(self):
        """Test the --version flag."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "axesyx" in result.output


class TestLogging:
    """Test cases for the global logging options."""

    def test_verbose_replaces_existing_handlers(self, root_logger):
        """Test that --verbose applies even when the root logger is configured."""
        root_logger.addHandler(logging.NullHandler())
        root_logger.setLevel(logging.ERROR)

        result = runner.invoke(app, ["--verbose", "version"])

        assert result.exit_code == 0
        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root_logger.handlers)
        assert not any(isinstance(h, logging.NullHandler) for h in root_logger.handlers)

    def test_default_level(self, root_logger):
        """Test that warnings only are shown without --verbose."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert root_logger.level == logging.WARNING


class TestPresetDisplay:
    """Test cases for the preset panel."""

    def test_hand_built_preset(self, monkeypatch):
        """Test that a preset without a model code shows no code."""
        recorder = Console(record=True, width=100)
        monkeypatch.setattr(tables, "console", recorder)

        tables.display_preset_info(Preset("Axe-Fx II", CurrentEditBuffer()))
        text = recorder.export_text()

        assert "Axe-Fx II" in text
        assert "0x-1" not in text
        assert "Axe-Fx II (0x" not in text

    def test_decoded_preset_shows_code(self, edit_buffer_file):
        """Test that a decoded preset shows its model code."""
        result = runner.invoke(app, ["info", str(edit_buffer_file)])

        assert result.exit_code == 0
        assert "(0x03)" in result.output
