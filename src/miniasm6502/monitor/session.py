"""
Monitor Session
===============

The REPL shell around the line assembler. It understands two monitor
commands:

    A XXXX   assemble, starting at address XXXX
    L XXXX   list (disassemble) instructions starting at XXXX
    Q        quit

A typical assembly session::

    * A 6000
    6000: NOP
    6001: LDX #0A
    6003: JSR FFEF
    6006: DEX
    6007: BNE 6003
    6009: <Esc>

Escape at an address prompt returns to the command prompt; Escape (or end
of input) at the command prompt ends the monitor.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from miniasm6502.assembler.line import LineAssembler, LineOutcome, LineResult
from miniasm6502.config import MonitorConfig
from miniasm6502.disassembler import Mos6502Disassembler
from miniasm6502.errors import CommandError
from miniasm6502.monitor.console import LineInput, TextOutput
from miniasm6502.monitor.memory import Memory

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "* "
LIST_WINDOW = 3


@dataclass
class SessionResult:
    """
    Summary of one ``A`` session.

    Attributes:
        start_address: Address the session started at
        end_address: Address the next line would have used
        results: Every line's result, in order
    """
    start_address: int
    end_address: int
    results: List[LineResult] = field(default_factory=list)

    @property
    def lines_assembled(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def error_count(self) -> int:
        return sum(1 for r in self.results if r.outcome.is_error)

    @property
    def length(self) -> int:
        """Bytes between start and end address."""
        return (self.end_address - self.start_address) & 0xFFFF


def parse_address(text: str) -> int:
    """
    Parse a monitor address: exactly four hex digits.

    Raises:
        CommandError: If the text is not four upper-case hex digits
    """
    text = text.strip().upper()
    if len(text) != 4 or any(ch not in "0123456789ABCDEF" for ch in text):
        raise CommandError(text, "Invalid address")
    return int(text, 16)


class MonitorSession:
    """
    Drives the line assembler from monitor commands.

    Each session owns its current address; two sessions must not share a
    Memory without external locking.

    Attributes:
        address: Current assembly address
    """

    def __init__(
        self,
        memory: Memory,
        line_input: LineInput,
        output: TextOutput,
        config: Optional[MonitorConfig] = None,
    ):
        """
        Initialize the session.

        Args:
            memory: Target memory
            line_input: Source of commands and assembly lines
            output: Destination for prompts and messages
            config: Session settings (default: MonitorConfig())
        """
        self.config = config or MonitorConfig()
        self.memory = memory
        self._input = line_input
        self._output = output
        self._assembler = LineAssembler(memory, line_input, output)
        self._disassembler = Mos6502Disassembler()
        self.address = self.config.start_address or 0
        self.sessions: List[SessionResult] = []

    def assemble_from(self, address: int) -> SessionResult:
        """
        Assemble lines from address until Escape at the mnemonic prompt.

        Args:
            address: Start address

        Returns:
            SessionResult for this run
        """
        self.address = address & 0xFFFF
        result = SessionResult(start_address=self.address, end_address=self.address)
        logger.info(f"Assembling at ${self.address:04X}")

        while True:
            line_result = self._assembler.assemble_line(self.address)
            if line_result.outcome is LineOutcome.SESSION_ENDED:
                break
            result.results.append(line_result)
            self.address = line_result.next_address

        result.end_address = self.address
        self.sessions.append(result)
        logger.info(
            f"Assembly ended at ${result.end_address:04X}: "
            f"{result.lines_assembled} lines, {result.error_count} errors"
        )
        return result

    def list_from(self, address: int, count: Optional[int] = None) -> int:
        """
        Print a disassembly listing.

        Args:
            address: Address of the first instruction
            count: Number of instructions (default: config.list_count)

        Returns:
            Address following the last listed instruction
        """
        count = count if count is not None else self.config.list_count
        # Longest instruction is 3 bytes
        data = self.memory.dump(address, count * LIST_WINDOW)
        instructions = self._disassembler.disassemble(data, address, count)
        for instr in instructions:
            self._output.message(str(instr))
        if not instructions:
            return address & 0xFFFF
        last = instructions[-1]
        return (last.address + last.size) & 0xFFFF

    def execute(self, command: str) -> bool:
        """
        Run one monitor command.

        Args:
            command: Upper-cased command line

        Returns:
            False when the monitor should stop, True otherwise

        Raises:
            CommandError: If the command is not understood
        """
        command = command.strip()
        if not command:
            return True

        verb, argument = command[0], command[1:].strip()
        if verb == "Q" and not argument:
            return False
        if verb == "A":
            self.assemble_from(parse_address(argument))
            return True
        if verb == "L":
            self.address = self.list_from(parse_address(argument))
            return True

        raise CommandError(command)

    def run(self) -> List[SessionResult]:
        """
        Command loop: read and execute commands until Q, Escape or end of
        input.

        Returns:
            The SessionResult of every A command run
        """
        while True:
            self._output.write(COMMAND_PROMPT)
            command = self._input.read_command()
            if command is None:
                self._output.newline()
                break
            try:
                if not self.execute(command):
                    break
            except CommandError as e:
                logger.debug(f"Rejected command {e.command!r}: {e.reason}")
                self._output.message(e.reason)

        return self.sessions
