"""
miniasm6502 Error Hierarchy
===========================

This module defines the exception hierarchy for the whole package. All
exceptions inherit from MiniAsmError, so callers can catch every
package-related error with a single except clause.

Exception Hierarchy
-------------------
MiniAsmError (base)
├── AssemblerError (one line failed to assemble)
│   ├── InvalidInstructionError - unknown mnemonic
│   ├── InvalidOperandError - operand text has no recognised shape
│   │   └── BranchRangeError - branch target too far away
│   ├── AddressingModeError - mode not legal for the instruction
│   └── WriteVerificationError - target memory did not keep a byte
└── MonitorError (monitor command layer)
    └── CommandError - malformed monitor command

Design Philosophy
-----------------
The line assembler raises these internally and catches them once, at the
line boundary. There they are reported to the output collaborator using the
monitor's fixed vocabulary:

    Invalid instruction
    Invalid operand
    Invalid addressing mode
    Unable to write to $XXXX

``str(error)`` is always exactly that text. Extra context (the offending
mnemonic, the legal modes, the computed branch offset) is kept on attributes
for logging and tests, never printed on the monitor line.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MiniAsmError(Exception):
    """
    Base exception for all miniasm6502 errors.

        try:
            session.run()
        except MiniAsmError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(MiniAsmError):
    """
    Base exception for a line that could not be assembled.

    Attributes:
        message: The monitor message for this failure
        address: Address of the line (or failing byte) when known
        detail: Extra diagnostic text for logs (optional)
    """

    message = "Assembly error"

    def __init__(
        self,
        address: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.address = address
        self.detail = detail
        super().__init__(self.message)

    def describe(self) -> str:
        """Message plus diagnostic detail, for log records."""
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class InvalidInstructionError(AssemblerError):
    """
    The three-letter mnemonic is not a base 6502 instruction.

    Example:
        6000: XYZ   ; Invalid instruction
    """

    message = "Invalid instruction"

    def __init__(self, mnemonic: str, address: Optional[int] = None):
        self.mnemonic = mnemonic
        super().__init__(address=address, detail=f"unknown mnemonic '{mnemonic}'")


class InvalidOperandError(AssemblerError):
    """
    The operand text does not match any addressing-mode shape.

    Example:
        6000: LDA 123   ; three digits
    """

    message = "Invalid operand"

    def __init__(
        self,
        operand: str,
        address: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.operand = operand
        super().__init__(
            address=address,
            detail=detail or f"unrecognised operand '{operand}'",
        )


class BranchRangeError(InvalidOperandError):
    """
    Branch target is out of range.

    6502 branches use a signed 8-bit displacement from the address of the
    following instruction, so the target must lie within -128..+127 bytes.
    Reported to the user as an invalid operand.
    """

    def __init__(self, target: int, offset: int, address: Optional[int] = None):
        self.target = target
        self.offset = offset
        super().__init__(
            f"{target:04X}",
            address=address,
            detail=f"branch offset {offset} outside -128..127",
        )


class AddressingModeError(AssemblerError):
    """
    Instruction used with an addressing mode it does not support.

    Example:
        6000: STA #10   ; STA has no immediate form
    """

    message = "Invalid addressing mode"

    def __init__(
        self,
        mnemonic: str,
        mode: str,
        address: Optional[int] = None,
        valid_modes: Optional[list[str]] = None,
    ):
        self.mnemonic = mnemonic
        self.mode = mode
        self.valid_modes = valid_modes or []

        detail = f"'{mnemonic}' does not support {mode}"
        if self.valid_modes:
            detail += f"; supports: {', '.join(self.valid_modes)}"

        super().__init__(address=address, detail=detail)


class WriteVerificationError(AssemblerError):
    """
    A byte written to target memory did not read back.

    This is the only assembler error caused by the environment rather than
    by the user's input. The line is abandoned and the current address is
    not advanced.
    """

    def __init__(self, address: int, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        self.message = f"Unable to write to ${address:04X}"
        super().__init__(
            address=address,
            detail=f"wrote ${expected:02X}, read back ${actual:02X}",
        )


# =============================================================================
# Monitor Exceptions
# =============================================================================

class MonitorError(MiniAsmError):
    """Base exception for the monitor command layer."""
    pass


class CommandError(MonitorError):
    """
    A monitor command could not be parsed.

    Attributes:
        command: The command line as typed
    """

    def __init__(self, command: str, reason: str = "Invalid command"):
        self.command = command
        self.reason = reason
        super().__init__(reason)
