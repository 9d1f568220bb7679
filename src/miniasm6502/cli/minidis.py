"""
minidis - 6502 Disassembler Command-Line Interface
==================================================

Lists a binary file in the syntax the line assembler accepts, so a
listing can be checked against what was typed.

Usage Examples
--------------
Disassemble a program assembled at $6000:
    $ minidis program.bin --address 6000

Limit number of instructions:
    $ minidis program.bin -a 6000 --count 5

Output to file:
    $ minidis program.bin -a 6000 -o program.lst

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from pathlib import Path
from typing import Optional

import click

from miniasm6502 import __version__
from miniasm6502.cli.errors import handle_cli_exception
from miniasm6502.config import parse_hex_address
from miniasm6502.disassembler import DisassembledInstruction, Mos6502Disassembler


def _source_line(instr: DisassembledInstruction) -> str:
    """Listing line without raw bytes, in the form typed at the prompt."""
    line = f"{instr.address:04X}: {instr.text}"
    if instr.comment:
        line += f"  ; {instr.comment}"
    return line


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-a", "--address",
    type=str,
    default="0000",
    help="Base address of the first byte, in hex. Default: 0000",
)
@click.option(
    "-c", "--count",
    type=int,
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "--no-bytes",
    is_flag=True,
    help="Omit raw bytes from output (show only mnemonic and operand)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="minidis")
def main(
    input_file: Path,
    output: Optional[Path],
    address: str,
    count: Optional[int],
    no_bytes: bool,
    verbose: bool,
) -> None:
    """
    Disassemble 6502 machine code.

    INPUT_FILE is the binary file to disassemble.
    """
    try:
        try:
            base_address = parse_hex_address(address)
        except ValueError:
            raise click.BadParameter(f"'{address}' is not a 16-bit hex address", param_hint="--address")

        data = input_file.read_bytes()
        if len(data) == 0:
            raise click.BadParameter(f"{input_file} is empty", param_hint="INPUT_FILE")

        if verbose:
            click.echo(f"Input file: {input_file} ({len(data)} bytes)", err=True)
            click.echo(f"Base address: ${base_address:04X}", err=True)

        disasm = Mos6502Disassembler()
        if no_bytes:
            body = "\n".join(
                _source_line(instr)
                for instr in disasm.disassemble(data, start_address=base_address, count=count)
            )
        else:
            body = disasm.disassemble_to_text(data, start_address=base_address, count=count)

        header = [
            f"; Disassembly of {input_file.name}",
            f"; Size: {len(data)} bytes",
            f"; Base address: ${base_address:04X}",
            "",
        ]
        result = "\n".join(header + [body]) + "\n"

        if output:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

        if verbose:
            click.echo(f"Instructions disassembled: {len(body.splitlines())}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
