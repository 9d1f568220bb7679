"""
miniasm6502 - Interactive 6502 Line Assembler
=============================================

A minimal line assembler for the MOS 6502, in the style of the machine-code
monitors of 8-bit computers. Each line is assembled and written to memory
as soon as it is typed; the next address is echoed for the following line.

    A 6000
    6000: NOP
    6001: LDX #0A
    6003: JSR FFEF
    6006: DEX
    6007: BNE 6003
    6009: <Esc>

Main Components
---------------
- **cpu**: 6502 mnemonic and opcode tables
- **assembler**: operand classifier, byte emitter and line assembler
- **disassembler**: listing in the same syntax
- **monitor**: memory, console and the command loop

Syntax
------
- Mnemonics are three letters; operands are hex, 2 or 4 digits, no prefix
- Addressing modes: A, #nn, nn, nn,X, nn,Y, nnnn, nnnn,X, nnnn,Y,
  (nn,X), (nn),Y, (nnnn); branches take the 4-digit target address
- No labels, symbols or expressions

Errors
------
    Invalid instruction
    Invalid operand
    Invalid addressing mode
    Unable to write to $XXXX

Or use the command-line tools:
    $ miniasm -a 6000
    $ miniasm -s program.txt -a 6000 -o program.bin
    $ minidis program.bin -a 6000
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from miniasm6502.errors import (
    MiniAsmError,
    AssemblerError,
    InvalidInstructionError,
    InvalidOperandError,
    BranchRangeError,
    AddressingModeError,
    WriteVerificationError,
    MonitorError,
    CommandError,
)
from miniasm6502.cpu import AddressingMode, InstructionId
from miniasm6502.assembler import (
    LineAssembler,
    LineOutcome,
    LineResult,
    classify_operand,
)
from miniasm6502.config import MonitorConfig
from miniasm6502.monitor.memory import Memory
from miniasm6502.monitor.console import ConsoleInput, ConsoleOutput
from miniasm6502.monitor.session import MonitorSession, SessionResult
from miniasm6502.disassembler import Mos6502Disassembler

__all__ = [
    "__version__",
    # Errors
    "MiniAsmError",
    "AssemblerError",
    "InvalidInstructionError",
    "InvalidOperandError",
    "BranchRangeError",
    "AddressingModeError",
    "WriteVerificationError",
    "MonitorError",
    "CommandError",
    # Core
    "AddressingMode",
    "InstructionId",
    "LineAssembler",
    "LineOutcome",
    "LineResult",
    "classify_operand",
    # Monitor
    "MonitorConfig",
    "Memory",
    "ConsoleInput",
    "ConsoleOutput",
    "MonitorSession",
    "SessionResult",
    "Mos6502Disassembler",
]
