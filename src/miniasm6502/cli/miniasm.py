"""
miniasm - Interactive 6502 Line Assembler
=========================================

Command-line front end for the line assembler. Without ``--address`` it
starts the monitor command loop (``A XXXX``, ``L XXXX``, ``Q``); with it,
assembly starts straight away at that address.

Usage Examples
--------------
Interactive, assembling at $6000:
    $ miniasm -a 6000

Monitor command loop:
    $ miniasm

Assemble a script and save the bytes:
    $ miniasm -a 6000 -s program.txt -o program.bin

Patch a ROM image (writes into the ROM region are refused):
    $ miniasm -i kernal.bin --load-address E000 --rom E000-FFFF

Press Escape then Enter (or end the input) at an address prompt to stop.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from miniasm6502 import __version__
from miniasm6502.cli.errors import ExitCode, handle_cli_exception
from miniasm6502.config import MonitorConfig, parse_hex_address, parse_region
from miniasm6502.monitor.console import ConsoleInput, ConsoleOutput
from miniasm6502.monitor.memory import Memory
from miniasm6502.monitor.session import MonitorSession

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _address_option(value: Optional[str], name: str) -> Optional[int]:
    if value is None:
        return None
    try:
        return parse_hex_address(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a 16-bit hex address", param_hint=name)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.option(
    "-a", "--address",
    type=str,
    default=None,
    help="Start assembling at this hex address (default: monitor command loop)",
)
@click.option(
    "-s", "--script",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read input lines from a file instead of the terminal",
)
@click.option(
    "-i", "--image",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Binary image to preload into memory",
)
@click.option(
    "--load-address",
    type=str,
    default="0000",
    help="Hex address the image is loaded at (default: 0000)",
)
@click.option(
    "--rom",
    multiple=True,
    help="Read-only region START-END in hex (can be repeated)",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the assembled bytes to this file",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="miniasm")
def main(
    address: Optional[str],
    script: Optional[Path],
    image: Optional[Path],
    load_address: str,
    rom: tuple[str, ...],
    output: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble 6502 instructions line by line into memory.

    \b
    Syntax:
        XXXX: LDA #0A        immediate
        XXXX: STA 10,X       zero page indexed
        XXXX: JMP (FFFC)     indirect
        XXXX: BNE 6003       branch to absolute target

    All numbers are hex, 2 or 4 digits, without a prefix.
    """
    setup_logging(verbose)

    try:
        config = MonitorConfig.from_env()

        start = _address_option(address, "--address")
        if start is not None:
            config.start_address = start

        for region in rom:
            try:
                config.rom_regions.append(parse_region(region))
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--rom")

        logger.debug(f"Configuration: {config}")

        memory = Memory(rom_regions=config.rom_regions)
        if image is not None:
            base = _address_option(load_address, "--load-address")
            data = image.read_bytes()
            memory.load(base, data)
            if verbose:
                click.echo(f"Loaded {len(data)} bytes at ${base:04X}", err=True)

        if script is not None:
            stream = script.open("r", encoding="utf-8")
        else:
            stream = sys.stdin
        echo = None if stream.isatty() else click.echo
        line_input = ConsoleInput(stream, escape_char=config.escape_char, echo=echo)

        session = MonitorSession(memory, line_input, ConsoleOutput(), config)
        try:
            if config.start_address is not None:
                session.assemble_from(config.start_address)
            else:
                session.run()
        finally:
            if script is not None:
                stream.close()

        results = [r for r in session.sessions if r.length > 0]
        errors = sum(r.error_count for r in session.sessions)

        if output is not None:
            if results:
                first = min(r.start_address for r in results)
                last = max(r.start_address + r.length for r in results)
                output.write_bytes(memory.dump(first, last - first))
                if verbose:
                    click.echo(f"Wrote {last - first} bytes from ${first:04X} to {output}", err=True)
            else:
                click.echo("Nothing assembled, no output written", err=True)

        if verbose:
            lines = sum(r.lines_assembled for r in session.sessions)
            click.echo(f"Assembled {lines} lines, {errors} errors", err=True)

        if script is not None and errors:
            sys.exit(ExitCode.ASSEMBLY_ERROR)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
