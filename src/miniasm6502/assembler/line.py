"""
Line Assembler
==============

Assembles one line of 6502 source, typed at an address prompt, straight
into target memory.

Line State Machine
------------------
::

    AWAIT_MNEMONIC -> MNEMONIC_RESOLVED -+-> IMPLICIT_DONE ---------------+
                                         |                                |
                                         +-> AWAIT_OPERAND                |
                                               -> OPERAND_CLASSIFIED -----+
                                                                          v
                                                   EMITTED <- VALIDATED <-+

    ABORTED is reachable from every state.

1. Print ``XXXX: `` and wait for a mnemonic. Escape here ends the session.
2. Resolve the mnemonic; unknown -> "Invalid instruction".
3. Instructions whose only mode is implicit take no operand.
4. Otherwise read the operand. Escape here aborts just this line.
5. Classify the operand; no match -> "Invalid operand".
6. Check the (instruction, mode) pair; illegal -> "Invalid addressing mode".
7. Encode and write the bytes; out-of-range branch -> "Invalid operand",
   failed read-back -> "Unable to write to $XXXX".
8. On success the next address is address + length.

Errors never escape assemble_line(): each one is printed once and the line
returns with the address unchanged.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from miniasm6502.assembler.emitter import (
    ADDRESS_MASK,
    ByteEmitter,
    Emission,
    encode_operand,
)
from miniasm6502.assembler.operand import classify_operand
from miniasm6502.cpu import (
    AddressingMode,
    InstructionId,
    get_valid_modes,
    is_implicit_only,
    lookup_mnemonic,
    lookup_opcode,
)
from miniasm6502.errors import (
    AddressingModeError,
    AssemblerError,
    InvalidInstructionError,
    InvalidOperandError,
    WriteVerificationError,
)
from miniasm6502.monitor.console import LineInput, TextOutput
from miniasm6502.monitor.memory import MemoryTarget

logger = logging.getLogger(__name__)


# =============================================================================
# States and Outcomes
# =============================================================================

class LineState(Enum):
    """Where the line assembler is within the current line."""
    AWAIT_MNEMONIC = auto()
    MNEMONIC_RESOLVED = auto()
    IMPLICIT_DONE = auto()
    AWAIT_OPERAND = auto()
    OPERAND_CLASSIFIED = auto()
    VALIDATED = auto()
    EMITTED = auto()
    ABORTED = auto()


class LineOutcome(Enum):
    """How a line ended."""
    SUCCESS = auto()
    INVALID_INSTRUCTION = auto()
    INVALID_OPERAND = auto()
    INVALID_ADDRESSING_MODE = auto()
    WRITE_FAILED = auto()
    LINE_ABORTED = auto()       # Escape at the operand
    SESSION_ENDED = auto()      # Escape at the mnemonic

    @property
    def is_error(self) -> bool:
        return self in _ERROR_OUTCOMES


_ERROR_OUTCOMES = frozenset({
    LineOutcome.INVALID_INSTRUCTION,
    LineOutcome.INVALID_OPERAND,
    LineOutcome.INVALID_ADDRESSING_MODE,
    LineOutcome.WRITE_FAILED,
})


def _outcome_for(error: AssemblerError) -> LineOutcome:
    # BranchRangeError is an InvalidOperandError, so no separate case
    if isinstance(error, InvalidInstructionError):
        return LineOutcome.INVALID_INSTRUCTION
    if isinstance(error, InvalidOperandError):
        return LineOutcome.INVALID_OPERAND
    if isinstance(error, AddressingModeError):
        return LineOutcome.INVALID_ADDRESSING_MODE
    if isinstance(error, WriteVerificationError):
        return LineOutcome.WRITE_FAILED
    raise TypeError(f"Unhandled assembler error {type(error).__name__}")


# =============================================================================
# Per-line Records
# =============================================================================

@dataclass
class ParsedLine:
    """
    Working state of one line, discarded once the line is done.

    Attributes:
        address: Address the instruction is assembled at
        mnemonic: Mnemonic text as read
        operand_text: Operand text as read (None if not read)
        instruction: Resolved instruction
        mode: Resolved addressing mode
        value: Operand value (byte, word or branch target)
    """
    address: int
    mnemonic: str = ""
    operand_text: Optional[str] = None
    instruction: InstructionId = InstructionId.INVALID
    mode: Optional[AddressingMode] = None
    value: int = 0


@dataclass(frozen=True)
class LineResult:
    """
    Result of assembling one line.

    Attributes:
        outcome: How the line ended
        address: Address the line started at
        next_address: Address for the next line (== address unless SUCCESS)
        line: The parsed line (None when the session ended before a mnemonic)
        emission: Bytes written (SUCCESS only)
        message: Message printed for the line, if any
    """
    outcome: LineOutcome
    address: int
    next_address: int
    line: Optional[ParsedLine] = None
    emission: Optional[Emission] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is LineOutcome.SUCCESS

    @property
    def data(self) -> bytes:
        return self.emission.data if self.emission else b""


# =============================================================================
# Line Assembler
# =============================================================================

class LineAssembler:
    """
    Interactive single-line 6502 assembler.

    Holds no state between lines other than what the caller passes back in
    as the next address.

    Example:
        >>> asm = LineAssembler(memory, ConsoleInput(stdin), ConsoleOutput())
        >>> result = asm.assemble_line(0x6000)     # user types "LDX #0A"
        >>> f"{result.next_address:04X}"
        '6002'
    """

    def __init__(
        self,
        memory: MemoryTarget,
        line_input: LineInput,
        output: TextOutput,
    ):
        """
        Initialize the line assembler.

        Args:
            memory: Target memory the bytes are written to
            line_input: Source of mnemonic and operand text
            output: Sink for the prompt and error messages
        """
        self._input = line_input
        self._output = output
        self._emitter = ByteEmitter(memory)
        self.state = LineState.AWAIT_MNEMONIC

    def assemble_line(self, address: int) -> LineResult:
        """
        Prompt for, assemble and write one line.

        Args:
            address: Current address

        Returns:
            LineResult; next_address is the address for the following line
        """
        address &= ADDRESS_MASK
        self.state = LineState.AWAIT_MNEMONIC
        self._output.prompt(address)

        mnemonic = self._input.read_mnemonic()
        if mnemonic is None:
            self.state = LineState.ABORTED
            self._output.newline()
            logger.debug(f"Session ended at ${address:04X}")
            return LineResult(LineOutcome.SESSION_ENDED, address, address)

        line = ParsedLine(address=address, mnemonic=mnemonic)
        try:
            return self._assemble(line)
        except AssemblerError as e:
            self.state = LineState.ABORTED
            logger.debug(f"${address:04X}: {e.describe()}")
            self._output.message(e.message)
            return LineResult(
                _outcome_for(e), address, address, line=line, message=e.message
            )

    def _assemble(self, line: ParsedLine) -> LineResult:
        line.instruction = lookup_mnemonic(line.mnemonic)
        if line.instruction is InstructionId.INVALID:
            raise InvalidInstructionError(line.mnemonic, address=line.address)
        self.state = LineState.MNEMONIC_RESOLVED

        if is_implicit_only(line.instruction):
            line.mode = AddressingMode.IMPLICIT
            self.state = LineState.IMPLICIT_DONE
        else:
            self.state = LineState.AWAIT_OPERAND
            operand_text = self._input.read_operand()
            if operand_text is None:
                self.state = LineState.ABORTED
                logger.debug(f"${line.address:04X}: line aborted")
                return LineResult(
                    LineOutcome.LINE_ABORTED, line.address, line.address, line=line
                )
            line.operand_text = operand_text

            operand = classify_operand(operand_text, get_valid_modes(line.instruction))
            line.mode = operand.mode
            line.value = operand.value
            self.state = LineState.OPERAND_CLASSIFIED
            logger.debug(f"{line.mnemonic} '{operand_text}' -> {operand.mode.name}")

        entry = lookup_opcode(line.instruction, line.mode)
        if entry is None:
            raise AddressingModeError(
                line.mnemonic,
                str(line.mode),
                address=line.address,
                valid_modes=sorted(str(m) for m in get_valid_modes(line.instruction)),
            )
        self.state = LineState.VALIDATED

        operand_bytes = encode_operand(entry.mode, line.value, line.address, entry.length)

        emission = self._emitter.emit(line.address, entry.opcode, operand_bytes)
        self.state = LineState.EMITTED

        return LineResult(
            LineOutcome.SUCCESS,
            line.address,
            emission.next_address,
            line=line,
            emission=emission,
        )
