"""
CLI Exit Codes and Error Reporting
==================================

Shared by ``miniasm`` and ``minidis``. Both tools route anything that
escapes their main body through ``handle_cli_exception`` so that the
same kind of failure always gives the same exit status:

    0  everything assembled (or disassembled)
    1  a script had lines that failed to assemble
    2  bad option, unreadable or empty input file
    3  anything else (a bug)
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from miniasm6502.errors import AssemblerError, MiniAsmError


class ExitCode(IntEnum):
    """Process exit status of the miniasm and minidis tools."""
    SUCCESS = 0
    ASSEMBLY_ERROR = 1
    INVALID_ARGS = 2
    INTERNAL_ERROR = 3


def format_assembler_error(error: AssemblerError, verbose: bool = False) -> str:
    """
    One-line report for a failed line: the monitor message, the address
    when known, and the diagnostic detail in verbose mode.

    >>> from miniasm6502.errors import InvalidInstructionError
    >>> format_assembler_error(InvalidInstructionError("XYZ", address=0x6000))
    'Invalid instruction at $6000'
    """
    text = error.describe() if verbose else error.message
    if error.address is not None:
        text += f" at ${error.address:04X}"
    return text


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report an exception that escaped a CLI command and exit.

    Args:
        error: The exception that was raised
        verbose: Include diagnostic detail, and a traceback for internal errors
        error_type: Prefix for miniasm errors ("Assembly", "Disassembly")

    Raises:
        SystemExit: Always, with the ExitCode matching the error
    """
    prefix = f"{error_type} error: " if error_type else "Error: "

    if isinstance(error, AssemblerError):
        click.echo(f"{prefix}{format_assembler_error(error, verbose)}", err=True)
        sys.exit(ExitCode.ASSEMBLY_ERROR)

    if isinstance(error, MiniAsmError):
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.ASSEMBLY_ERROR)

    if isinstance(error, click.BadParameter):
        click.echo(f"Error: {error.format_message()}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    if isinstance(error, OSError):
        target = f" {error.filename}" if error.filename else ""
        click.echo(f"Error: cannot access{target}: {error.strerror or error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    click.echo(f"Internal error: {error}", err=True)
    if verbose:
        traceback.print_exc()
    sys.exit(ExitCode.INTERNAL_ERROR)
