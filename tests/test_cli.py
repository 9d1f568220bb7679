"""
miniasm CLI Tests
=================

Tests for the miniasm command-line tool, driven through click's CliRunner
with piped input standing in for the terminal.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import warnings

import click
import pytest
from click.testing import CliRunner

from miniasm6502.cli.errors import ExitCode, handle_cli_exception
from miniasm6502.cli.miniasm import main
from miniasm6502.errors import CommandError, InvalidInstructionError

ESC = "\x1b"

PROGRAM = f"NOP\nLDX #0A\nJSR FFEF\nDEX\nBNE 6003\n{ESC}\n"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MINIASM_* settings from the caller's shell out of the tests."""
    for name in ("MINIASM_START", "MINIASM_ROM", "MINIASM_LIST_COUNT"):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Basic Options
# =============================================================================

class TestMiniasmBasics:
    """Help, version and argument checking."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Assemble 6502 instructions" in result.output
        assert "--address" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_bad_address(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-a", "XYZW"], input="")

        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "not a 16-bit hex address" in result.output

    def test_bad_rom_region(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-a", "6000", "--rom", "FFFF-E000"], input="")

        assert result.exit_code == ExitCode.INVALID_ARGS


# =============================================================================
# Assembling
# =============================================================================

class TestMiniasmAssemble:
    """Assembling from piped input and script files."""

    def test_interactive_transcript(self):
        """Piped input is echoed after each prompt."""
        runner = CliRunner()
        result = runner.invoke(main, ["-a", "6000"], input=PROGRAM)

        assert result.exit_code == 0
        assert "6000: NOP\n" in result.output
        assert "6001: LDX #0A\n" in result.output
        assert "6007: BNE 6003\n" in result.output
        assert "6009: " in result.output

    def test_stdin_without_deprecation_warnings(self):
        """Reading piped stdin uses no deprecated click stream helpers."""
        runner = CliRunner()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = runner.invoke(main, ["-a", "6000"], input=PROGRAM)

        assert result.exit_code == 0
        ours = [
            w for w in caught
            if issubclass(w.category, DeprecationWarning)
            and ("miniasm6502" in w.filename or "get_text_stream" in str(w.message))
        ]
        assert ours == []

    def test_output_file(self, tmp_path):
        out_file = tmp_path / "program.bin"

        runner = CliRunner()
        result = runner.invoke(main, ["-a", "6000", "-o", str(out_file)], input=PROGRAM)

        assert result.exit_code == 0
        assert out_file.read_bytes() == bytes.fromhex("EA A2 0A 20 EF FF CA D0 FA")

    def test_errors_are_reported(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-a", "6000"], input=f"XYZ\nSTA #10\nLDA 123\n{ESC}\n")

        assert result.exit_code == 0
        assert "Invalid instruction" in result.output
        assert "Invalid addressing mode" in result.output
        assert "Invalid operand" in result.output

    def test_script(self, tmp_path):
        script = tmp_path / "program.txt"
        script.write_text("; demo\nNOP\nRTS\n")
        out_file = tmp_path / "program.bin"

        runner = CliRunner()
        result = runner.invoke(main, ["-a", "0300", "-s", str(script), "-o", str(out_file)])

        assert result.exit_code == 0
        assert out_file.read_bytes() == b"\xEA\x60"

    def test_script_with_errors_fails(self, tmp_path):
        script = tmp_path / "bad.txt"
        script.write_text("NOP\nXYZ\n")

        runner = CliRunner()
        result = runner.invoke(main, ["-a", "0300", "-s", str(script)])

        assert result.exit_code == ExitCode.ASSEMBLY_ERROR
        assert "Invalid instruction" in result.output

    def test_rom_write_fails(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-a", "E000", "--rom", "E000-FFFF"], input="NOP\n")

        assert result.exit_code == 0
        assert "Unable to write to $E000" in result.output

    def test_image_preload(self, tmp_path):
        """Only the newly assembled bytes are written out."""
        image = tmp_path / "image.bin"
        image.write_bytes(bytes([0x11, 0x22, 0x33, 0x44]))
        out_file = tmp_path / "patched.bin"

        runner = CliRunner()
        result = runner.invoke(
            main,
            ["-a", "1001", "-i", str(image), "--load-address", "1000", "-o", str(out_file)],
            input=f"NOP\n{ESC}\n",
        )

        assert result.exit_code == 0
        assert out_file.read_bytes() == b"\xEA"

    def test_nothing_assembled(self, tmp_path):
        out_file = tmp_path / "empty.bin"

        runner = CliRunner()
        result = runner.invoke(main, ["-a", "6000", "-o", str(out_file)], input=f"{ESC}\n")

        assert result.exit_code == 0
        assert not out_file.exists()
        assert "Nothing assembled" in result.output

    def test_start_address_from_env(self, monkeypatch):
        monkeypatch.setenv("MINIASM_START", "0400")

        runner = CliRunner()
        result = runner.invoke(main, [], input="NOP\n")

        assert result.exit_code == 0
        assert "0400: NOP" in result.output


# =============================================================================
# Monitor Command Loop
# =============================================================================

class TestMiniasmMonitor:
    """Running without --address starts the command loop."""

    def test_assemble_and_list(self, tmp_path):
        out_file = tmp_path / "program.bin"
        commands = f"A 6000\nLDA #01\nRTS\n{ESC}\nL 6000\nQ\n"

        runner = CliRunner()
        result = runner.invoke(main, ["-o", str(out_file)], input=commands)

        assert result.exit_code == 0
        assert "* A 6000\n" in result.output
        assert "6000  A9 01     LDA #01" in result.output
        assert "6002  60        RTS" in result.output
        assert out_file.read_bytes() == b"\xA9\x01\x60"

    def test_invalid_command(self):
        runner = CliRunner()
        result = runner.invoke(main, [], input="HELLO\nQ\n")

        assert result.exit_code == 0
        assert "Invalid command" in result.output

    def test_verbose_summary(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-v"], input=f"A 6000\nNOP\n{ESC}\nQ\n")

        assert result.exit_code == 0
        assert "Assembled 1 lines, 0 errors" in result.output


# =============================================================================
# Error Reporting
# =============================================================================

class TestHandleCliException:
    """Each kind of failure maps to one exit code."""

    def exit_code(self, error, **kwargs):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error, **kwargs)
        return exc_info.value.code

    def test_assembler_error(self, capsys):
        error = InvalidInstructionError("XYZ", address=0x6000)

        assert self.exit_code(error, error_type="Assembly") == ExitCode.ASSEMBLY_ERROR
        assert "Assembly error: Invalid instruction at $6000" in capsys.readouterr().err

    def test_assembler_error_detail_when_verbose(self, capsys):
        error = InvalidInstructionError("XYZ", address=0x6000)

        self.exit_code(error, verbose=True)
        assert "unknown mnemonic 'XYZ'" in capsys.readouterr().err

    def test_command_error(self):
        assert self.exit_code(CommandError("bad")) == ExitCode.ASSEMBLY_ERROR

    def test_bad_parameter(self, capsys):
        error = click.BadParameter("nope", param_hint="--address")

        assert self.exit_code(error) == ExitCode.INVALID_ARGS
        assert "--address" in capsys.readouterr().err

    def test_missing_file(self):
        error = FileNotFoundError(2, "No such file or directory", "gone.bin")
        assert self.exit_code(error) == ExitCode.INVALID_ARGS

    def test_internal_error(self, capsys):
        assert self.exit_code(RuntimeError("boom")) == ExitCode.INTERNAL_ERROR
        assert "Internal error: boom" in capsys.readouterr().err
