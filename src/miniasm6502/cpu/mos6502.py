"""
MOS 6502 Instruction Set Definition
===================================

This module defines the base (NMOS, documented) 6502 instruction set as two
static tables:

1. **MNEMONIC_TABLE**: three-letter mnemonic -> InstructionId
2. **OPCODE_TABLE**: (InstructionId, AddressingMode) -> opcode byte + length

Both are tuples of frozen dataclasses built once at import time and never
mutated. Lookups are linear scans; the tables are small and each is
consulted once per assembled line.

The 6502 is little-endian: 16-bit operands are stored low byte first.

Addressing Modes
----------------
=================  ===========  =====  ==================
Mode               Syntax       Bytes  Example
=================  ===========  =====  ==================
IMPLICIT           (none)       1      NOP       -> EA
ACCUMULATOR        A            1      LSR A     -> 4A
IMMEDIATE          #nn          2      LDA #0A   -> A9 0A
ZERO_PAGE          nn           2      LDA 10    -> A5 10
ZERO_PAGE_X        nn,X         2      LDA 10,X  -> B5 10
ZERO_PAGE_Y        nn,Y         2      LDX 10,Y  -> B6 10
ABSOLUTE           nnnn         3      JSR FFEF  -> 20 EF FF
ABSOLUTE_X         nnnn,X       3      LDA 1234,X
ABSOLUTE_Y         nnnn,Y       3      LDA 1234,Y
INDEXED_INDIRECT   (nn,X)       2      LDA (10,X)
INDIRECT_INDEXED   (nn),Y       2      LDA (10),Y
INDIRECT           (nnnn)       3      JMP (1234)
RELATIVE           nnnn         2      BNE 6003  -> D0 xx
=================  ===========  =====  ==================

Reference
---------
- MOS MCS6500 Microcomputer Family Programming Manual (1976)
- http://www.6502.org/tutorials/6502opcodes.html

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    6502 addressing modes.

    Each mode fixes the operand size and the operand syntax accepted by the
    line assembler.
    """
    IMPLICIT = auto()           # No operand (NOP, RTS)
    ACCUMULATOR = auto()        # A (shift/rotate the accumulator)
    IMMEDIATE = auto()          # #nn
    ZERO_PAGE = auto()          # nn
    ZERO_PAGE_X = auto()        # nn,X
    ZERO_PAGE_Y = auto()        # nn,Y
    ABSOLUTE = auto()           # nnnn
    ABSOLUTE_X = auto()         # nnnn,X
    ABSOLUTE_Y = auto()         # nnnn,Y
    INDEXED_INDIRECT = auto()   # (nn,X)
    INDIRECT_INDEXED = auto()   # (nn),Y
    INDIRECT = auto()           # (nnnn), JMP only
    RELATIVE = auto()           # nnnn, branches only

    @property
    def operand_size(self) -> int:
        """Number of operand bytes following the opcode."""
        return _OPERAND_SIZE[self]

    @property
    def syntax(self) -> str:
        """Operand template, with nn/nnnn standing for hex digits."""
        return _SYNTAX[self]

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return self.name.lower().replace("_", " ")


_OPERAND_SIZE = {
    AddressingMode.IMPLICIT: 0,
    AddressingMode.ACCUMULATOR: 0,
    AddressingMode.IMMEDIATE: 1,
    AddressingMode.ZERO_PAGE: 1,
    AddressingMode.ZERO_PAGE_X: 1,
    AddressingMode.ZERO_PAGE_Y: 1,
    AddressingMode.ABSOLUTE: 2,
    AddressingMode.ABSOLUTE_X: 2,
    AddressingMode.ABSOLUTE_Y: 2,
    AddressingMode.INDEXED_INDIRECT: 1,
    AddressingMode.INDIRECT_INDEXED: 1,
    AddressingMode.INDIRECT: 2,
    AddressingMode.RELATIVE: 1,
}

_SYNTAX = {
    AddressingMode.IMPLICIT: "",
    AddressingMode.ACCUMULATOR: "A",
    AddressingMode.IMMEDIATE: "#nn",
    AddressingMode.ZERO_PAGE: "nn",
    AddressingMode.ZERO_PAGE_X: "nn,X",
    AddressingMode.ZERO_PAGE_Y: "nn,Y",
    AddressingMode.ABSOLUTE: "nnnn",
    AddressingMode.ABSOLUTE_X: "nnnn,X",
    AddressingMode.ABSOLUTE_Y: "nnnn,Y",
    AddressingMode.INDEXED_INDIRECT: "(nn,X)",
    AddressingMode.INDIRECT_INDEXED: "(nn),Y",
    AddressingMode.INDIRECT: "(nnnn)",
    AddressingMode.RELATIVE: "nnnn",
}


# =============================================================================
# Instruction Identifiers
# =============================================================================

class InstructionId(Enum):
    """
    One member per base 6502 mnemonic, plus the INVALID sentinel returned
    by lookup_mnemonic() when nothing matches.
    """
    INVALID = 0
    ADC = auto()
    AND = auto()
    ASL = auto()
    BCC = auto()
    BCS = auto()
    BEQ = auto()
    BIT = auto()
    BMI = auto()
    BNE = auto()
    BPL = auto()
    BRK = auto()
    BVC = auto()
    BVS = auto()
    CLC = auto()
    CLD = auto()
    CLI = auto()
    CLV = auto()
    CMP = auto()
    CPX = auto()
    CPY = auto()
    DEC = auto()
    DEX = auto()
    DEY = auto()
    EOR = auto()
    INC = auto()
    INX = auto()
    INY = auto()
    JMP = auto()
    JSR = auto()
    LDA = auto()
    LDX = auto()
    LDY = auto()
    LSR = auto()
    NOP = auto()
    ORA = auto()
    PHA = auto()
    PHP = auto()
    PLA = auto()
    PLP = auto()
    ROL = auto()
    ROR = auto()
    RTI = auto()
    RTS = auto()
    SBC = auto()
    SEC = auto()
    SED = auto()
    SEI = auto()
    STA = auto()
    STX = auto()
    STY = auto()
    TAX = auto()
    TAY = auto()
    TSX = auto()
    TXA = auto()
    TXS = auto()
    TYA = auto()


# =============================================================================
# Table Records
# =============================================================================

@dataclass(frozen=True)
class MnemonicEntry:
    """A three-letter mnemonic and the instruction it names."""
    text: str
    instruction: InstructionId


@dataclass(frozen=True)
class OpcodeEntry:
    """
    One legal encoding of an instruction.

    Frozen so the opcode table cannot be modified at runtime.

    Attributes:
        instruction: The instruction identifier
        mode: The addressing mode
        opcode: The opcode byte
        length: Total instruction length in bytes (1, 2 or 3)
    """
    instruction: InstructionId
    mode: AddressingMode
    opcode: int
    length: int

    @property
    def mnemonic(self) -> str:
        return self.instruction.name

    def __repr__(self) -> str:
        return (
            f"OpcodeEntry({self.mnemonic} {self.mode.name}, "
            f"opcode=${self.opcode:02X}, length={self.length})"
        )


# =============================================================================
# Mnemonic Table
# =============================================================================
# Mnemonic text is unique across the table; scan order does not matter.

MNEMONIC_TABLE: tuple[MnemonicEntry, ...] = tuple(
    MnemonicEntry(instruction.name, instruction)
    for instruction in InstructionId
    if instruction is not InstructionId.INVALID
)


# =============================================================================
# Opcode Table
# =============================================================================
# At most one entry per (instruction, mode). An absent pair is an illegal
# combination for that instruction.

_I = InstructionId
_M = AddressingMode

OPCODE_TABLE: tuple[OpcodeEntry, ...] = (
    # =========================================================================
    # LOAD / STORE
    # =========================================================================

    OpcodeEntry(_I.LDA, _M.IMMEDIATE, 0xA9, 2),
    OpcodeEntry(_I.LDA, _M.ZERO_PAGE, 0xA5, 2),
    OpcodeEntry(_I.LDA, _M.ZERO_PAGE_X, 0xB5, 2),
    OpcodeEntry(_I.LDA, _M.ABSOLUTE, 0xAD, 3),
    OpcodeEntry(_I.LDA, _M.ABSOLUTE_X, 0xBD, 3),
    OpcodeEntry(_I.LDA, _M.ABSOLUTE_Y, 0xB9, 3),
    OpcodeEntry(_I.LDA, _M.INDEXED_INDIRECT, 0xA1, 2),
    OpcodeEntry(_I.LDA, _M.INDIRECT_INDEXED, 0xB1, 2),

    OpcodeEntry(_I.LDX, _M.IMMEDIATE, 0xA2, 2),
    OpcodeEntry(_I.LDX, _M.ZERO_PAGE, 0xA6, 2),
    OpcodeEntry(_I.LDX, _M.ZERO_PAGE_Y, 0xB6, 2),
    OpcodeEntry(_I.LDX, _M.ABSOLUTE, 0xAE, 3),
    OpcodeEntry(_I.LDX, _M.ABSOLUTE_Y, 0xBE, 3),

    OpcodeEntry(_I.LDY, _M.IMMEDIATE, 0xA0, 2),
    OpcodeEntry(_I.LDY, _M.ZERO_PAGE, 0xA4, 2),
    OpcodeEntry(_I.LDY, _M.ZERO_PAGE_X, 0xB4, 2),
    OpcodeEntry(_I.LDY, _M.ABSOLUTE, 0xAC, 3),
    OpcodeEntry(_I.LDY, _M.ABSOLUTE_X, 0xBC, 3),

    # No immediate form for stores
    OpcodeEntry(_I.STA, _M.ZERO_PAGE, 0x85, 2),
    OpcodeEntry(_I.STA, _M.ZERO_PAGE_X, 0x95, 2),
    OpcodeEntry(_I.STA, _M.ABSOLUTE, 0x8D, 3),
    OpcodeEntry(_I.STA, _M.ABSOLUTE_X, 0x9D, 3),
    OpcodeEntry(_I.STA, _M.ABSOLUTE_Y, 0x99, 3),
    OpcodeEntry(_I.STA, _M.INDEXED_INDIRECT, 0x81, 2),
    OpcodeEntry(_I.STA, _M.INDIRECT_INDEXED, 0x91, 2),

    OpcodeEntry(_I.STX, _M.ZERO_PAGE, 0x86, 2),
    OpcodeEntry(_I.STX, _M.ZERO_PAGE_Y, 0x96, 2),
    OpcodeEntry(_I.STX, _M.ABSOLUTE, 0x8E, 3),

    OpcodeEntry(_I.STY, _M.ZERO_PAGE, 0x84, 2),
    OpcodeEntry(_I.STY, _M.ZERO_PAGE_X, 0x94, 2),
    OpcodeEntry(_I.STY, _M.ABSOLUTE, 0x8C, 3),

    # =========================================================================
    # ARITHMETIC / LOGIC (accumulator with memory)
    # =========================================================================

    OpcodeEntry(_I.ADC, _M.IMMEDIATE, 0x69, 2),
    OpcodeEntry(_I.ADC, _M.ZERO_PAGE, 0x65, 2),
    OpcodeEntry(_I.ADC, _M.ZERO_PAGE_X, 0x75, 2),
    OpcodeEntry(_I.ADC, _M.ABSOLUTE, 0x6D, 3),
    OpcodeEntry(_I.ADC, _M.ABSOLUTE_X, 0x7D, 3),
    OpcodeEntry(_I.ADC, _M.ABSOLUTE_Y, 0x79, 3),
    OpcodeEntry(_I.ADC, _M.INDEXED_INDIRECT, 0x61, 2),
    OpcodeEntry(_I.ADC, _M.INDIRECT_INDEXED, 0x71, 2),

    OpcodeEntry(_I.SBC, _M.IMMEDIATE, 0xE9, 2),
    OpcodeEntry(_I.SBC, _M.ZERO_PAGE, 0xE5, 2),
    OpcodeEntry(_I.SBC, _M.ZERO_PAGE_X, 0xF5, 2),
    OpcodeEntry(_I.SBC, _M.ABSOLUTE, 0xED, 3),
    OpcodeEntry(_I.SBC, _M.ABSOLUTE_X, 0xFD, 3),
    OpcodeEntry(_I.SBC, _M.ABSOLUTE_Y, 0xF9, 3),
    OpcodeEntry(_I.SBC, _M.INDEXED_INDIRECT, 0xE1, 2),
    OpcodeEntry(_I.SBC, _M.INDIRECT_INDEXED, 0xF1, 2),

    OpcodeEntry(_I.AND, _M.IMMEDIATE, 0x29, 2),
    OpcodeEntry(_I.AND, _M.ZERO_PAGE, 0x25, 2),
    OpcodeEntry(_I.AND, _M.ZERO_PAGE_X, 0x35, 2),
    OpcodeEntry(_I.AND, _M.ABSOLUTE, 0x2D, 3),
    OpcodeEntry(_I.AND, _M.ABSOLUTE_X, 0x3D, 3),
    OpcodeEntry(_I.AND, _M.ABSOLUTE_Y, 0x39, 3),
    OpcodeEntry(_I.AND, _M.INDEXED_INDIRECT, 0x21, 2),
    OpcodeEntry(_I.AND, _M.INDIRECT_INDEXED, 0x31, 2),

    OpcodeEntry(_I.ORA, _M.IMMEDIATE, 0x09, 2),
    OpcodeEntry(_I.ORA, _M.ZERO_PAGE, 0x05, 2),
    OpcodeEntry(_I.ORA, _M.ZERO_PAGE_X, 0x15, 2),
    OpcodeEntry(_I.ORA, _M.ABSOLUTE, 0x0D, 3),
    OpcodeEntry(_I.ORA, _M.ABSOLUTE_X, 0x1D, 3),
    OpcodeEntry(_I.ORA, _M.ABSOLUTE_Y, 0x19, 3),
    OpcodeEntry(_I.ORA, _M.INDEXED_INDIRECT, 0x01, 2),
    OpcodeEntry(_I.ORA, _M.INDIRECT_INDEXED, 0x11, 2),

    OpcodeEntry(_I.EOR, _M.IMMEDIATE, 0x49, 2),
    OpcodeEntry(_I.EOR, _M.ZERO_PAGE, 0x45, 2),
    OpcodeEntry(_I.EOR, _M.ZERO_PAGE_X, 0x55, 2),
    OpcodeEntry(_I.EOR, _M.ABSOLUTE, 0x4D, 3),
    OpcodeEntry(_I.EOR, _M.ABSOLUTE_X, 0x5D, 3),
    OpcodeEntry(_I.EOR, _M.ABSOLUTE_Y, 0x59, 3),
    OpcodeEntry(_I.EOR, _M.INDEXED_INDIRECT, 0x41, 2),
    OpcodeEntry(_I.EOR, _M.INDIRECT_INDEXED, 0x51, 2),

    OpcodeEntry(_I.BIT, _M.ZERO_PAGE, 0x24, 2),
    OpcodeEntry(_I.BIT, _M.ABSOLUTE, 0x2C, 3),

    # =========================================================================
    # COMPARE
    # =========================================================================

    OpcodeEntry(_I.CMP, _M.IMMEDIATE, 0xC9, 2),
    OpcodeEntry(_I.CMP, _M.ZERO_PAGE, 0xC5, 2),
    OpcodeEntry(_I.CMP, _M.ZERO_PAGE_X, 0xD5, 2),
    OpcodeEntry(_I.CMP, _M.ABSOLUTE, 0xCD, 3),
    OpcodeEntry(_I.CMP, _M.ABSOLUTE_X, 0xDD, 3),
    OpcodeEntry(_I.CMP, _M.ABSOLUTE_Y, 0xD9, 3),
    OpcodeEntry(_I.CMP, _M.INDEXED_INDIRECT, 0xC1, 2),
    OpcodeEntry(_I.CMP, _M.INDIRECT_INDEXED, 0xD1, 2),

    OpcodeEntry(_I.CPX, _M.IMMEDIATE, 0xE0, 2),
    OpcodeEntry(_I.CPX, _M.ZERO_PAGE, 0xE4, 2),
    OpcodeEntry(_I.CPX, _M.ABSOLUTE, 0xEC, 3),

    OpcodeEntry(_I.CPY, _M.IMMEDIATE, 0xC0, 2),
    OpcodeEntry(_I.CPY, _M.ZERO_PAGE, 0xC4, 2),
    OpcodeEntry(_I.CPY, _M.ABSOLUTE, 0xCC, 3),

    # =========================================================================
    # INCREMENT / DECREMENT MEMORY
    # =========================================================================

    OpcodeEntry(_I.INC, _M.ZERO_PAGE, 0xE6, 2),
    OpcodeEntry(_I.INC, _M.ZERO_PAGE_X, 0xF6, 2),
    OpcodeEntry(_I.INC, _M.ABSOLUTE, 0xEE, 3),
    OpcodeEntry(_I.INC, _M.ABSOLUTE_X, 0xFE, 3),

    OpcodeEntry(_I.DEC, _M.ZERO_PAGE, 0xC6, 2),
    OpcodeEntry(_I.DEC, _M.ZERO_PAGE_X, 0xD6, 2),
    OpcodeEntry(_I.DEC, _M.ABSOLUTE, 0xCE, 3),
    OpcodeEntry(_I.DEC, _M.ABSOLUTE_X, 0xDE, 3),

    # =========================================================================
    # SHIFT / ROTATE
    # The only instructions with an accumulator form
    # =========================================================================

    OpcodeEntry(_I.ASL, _M.ACCUMULATOR, 0x0A, 1),
    OpcodeEntry(_I.ASL, _M.ZERO_PAGE, 0x06, 2),
    OpcodeEntry(_I.ASL, _M.ZERO_PAGE_X, 0x16, 2),
    OpcodeEntry(_I.ASL, _M.ABSOLUTE, 0x0E, 3),
    OpcodeEntry(_I.ASL, _M.ABSOLUTE_X, 0x1E, 3),

    OpcodeEntry(_I.LSR, _M.ACCUMULATOR, 0x4A, 1),
    OpcodeEntry(_I.LSR, _M.ZERO_PAGE, 0x46, 2),
    OpcodeEntry(_I.LSR, _M.ZERO_PAGE_X, 0x56, 2),
    OpcodeEntry(_I.LSR, _M.ABSOLUTE, 0x4E, 3),
    OpcodeEntry(_I.LSR, _M.ABSOLUTE_X, 0x5E, 3),

    OpcodeEntry(_I.ROL, _M.ACCUMULATOR, 0x2A, 1),
    OpcodeEntry(_I.ROL, _M.ZERO_PAGE, 0x26, 2),
    OpcodeEntry(_I.ROL, _M.ZERO_PAGE_X, 0x36, 2),
    OpcodeEntry(_I.ROL, _M.ABSOLUTE, 0x2E, 3),
    OpcodeEntry(_I.ROL, _M.ABSOLUTE_X, 0x3E, 3),

    OpcodeEntry(_I.ROR, _M.ACCUMULATOR, 0x6A, 1),
    OpcodeEntry(_I.ROR, _M.ZERO_PAGE, 0x66, 2),
    OpcodeEntry(_I.ROR, _M.ZERO_PAGE_X, 0x76, 2),
    OpcodeEntry(_I.ROR, _M.ABSOLUTE, 0x6E, 3),
    OpcodeEntry(_I.ROR, _M.ABSOLUTE_X, 0x7E, 3),

    # =========================================================================
    # BRANCH INSTRUCTIONS (relative addressing)
    # Offset is relative to the address of the byte AFTER the branch.
    # Range: -128 to +127 bytes
    # =========================================================================

    OpcodeEntry(_I.BPL, _M.RELATIVE, 0x10, 2),   # Branch if plus (N=0)
    OpcodeEntry(_I.BMI, _M.RELATIVE, 0x30, 2),   # Branch if minus (N=1)
    OpcodeEntry(_I.BVC, _M.RELATIVE, 0x50, 2),   # Branch if overflow clear
    OpcodeEntry(_I.BVS, _M.RELATIVE, 0x70, 2),   # Branch if overflow set
    OpcodeEntry(_I.BCC, _M.RELATIVE, 0x90, 2),   # Branch if carry clear
    OpcodeEntry(_I.BCS, _M.RELATIVE, 0xB0, 2),   # Branch if carry set
    OpcodeEntry(_I.BNE, _M.RELATIVE, 0xD0, 2),   # Branch if not equal (Z=0)
    OpcodeEntry(_I.BEQ, _M.RELATIVE, 0xF0, 2),   # Branch if equal (Z=1)

    # =========================================================================
    # JUMP / CALL
    # =========================================================================

    OpcodeEntry(_I.JMP, _M.ABSOLUTE, 0x4C, 3),
    OpcodeEntry(_I.JMP, _M.INDIRECT, 0x6C, 3),
    OpcodeEntry(_I.JSR, _M.ABSOLUTE, 0x20, 3),

    # =========================================================================
    # IMPLICIT (single byte, no operand)
    # =========================================================================

    OpcodeEntry(_I.BRK, _M.IMPLICIT, 0x00, 1),
    OpcodeEntry(_I.RTI, _M.IMPLICIT, 0x40, 1),
    OpcodeEntry(_I.RTS, _M.IMPLICIT, 0x60, 1),
    OpcodeEntry(_I.NOP, _M.IMPLICIT, 0xEA, 1),

    # Stack
    OpcodeEntry(_I.PHP, _M.IMPLICIT, 0x08, 1),
    OpcodeEntry(_I.PLP, _M.IMPLICIT, 0x28, 1),
    OpcodeEntry(_I.PHA, _M.IMPLICIT, 0x48, 1),
    OpcodeEntry(_I.PLA, _M.IMPLICIT, 0x68, 1),

    # Flags
    OpcodeEntry(_I.CLC, _M.IMPLICIT, 0x18, 1),
    OpcodeEntry(_I.SEC, _M.IMPLICIT, 0x38, 1),
    OpcodeEntry(_I.CLI, _M.IMPLICIT, 0x58, 1),
    OpcodeEntry(_I.SEI, _M.IMPLICIT, 0x78, 1),
    OpcodeEntry(_I.CLV, _M.IMPLICIT, 0xB8, 1),
    OpcodeEntry(_I.CLD, _M.IMPLICIT, 0xD8, 1),
    OpcodeEntry(_I.SED, _M.IMPLICIT, 0xF8, 1),

    # Register transfers and index increments
    OpcodeEntry(_I.TXA, _M.IMPLICIT, 0x8A, 1),
    OpcodeEntry(_I.TXS, _M.IMPLICIT, 0x9A, 1),
    OpcodeEntry(_I.TYA, _M.IMPLICIT, 0x98, 1),
    OpcodeEntry(_I.TAY, _M.IMPLICIT, 0xA8, 1),
    OpcodeEntry(_I.TAX, _M.IMPLICIT, 0xAA, 1),
    OpcodeEntry(_I.TSX, _M.IMPLICIT, 0xBA, 1),
    OpcodeEntry(_I.DEY, _M.IMPLICIT, 0x88, 1),
    OpcodeEntry(_I.INY, _M.IMPLICIT, 0xC8, 1),
    OpcodeEntry(_I.DEX, _M.IMPLICIT, 0xCA, 1),
    OpcodeEntry(_I.INX, _M.IMPLICIT, 0xE8, 1),
)

del _I, _M


# =============================================================================
# Lookup Functions
# =============================================================================

def lookup_mnemonic(text: str) -> InstructionId:
    """
    Look up a three-letter mnemonic.

    The comparison is exact and case-sensitive; callers normalise input to
    upper case first.

    Args:
        text: The mnemonic (e.g., "LDA")

    Returns:
        The matching InstructionId, or InstructionId.INVALID
    """
    for entry in MNEMONIC_TABLE:
        if entry.text == text:
            return entry.instruction
    return InstructionId.INVALID


def lookup_opcode(
    instruction: InstructionId,
    mode: AddressingMode,
) -> Optional[OpcodeEntry]:
    """
    Look up the encoding of an instruction in an addressing mode.

    Args:
        instruction: The instruction identifier
        mode: The addressing mode

    Returns:
        OpcodeEntry if the combination is legal, None otherwise
    """
    for entry in OPCODE_TABLE:
        if entry.instruction is instruction and entry.mode is mode:
            return entry
    return None


def get_valid_modes(instruction: InstructionId) -> frozenset[AddressingMode]:
    """
    Get all legal addressing modes for an instruction.

    Returns an empty set for InstructionId.INVALID.
    """
    return frozenset(
        entry.mode for entry in OPCODE_TABLE
        if entry.instruction is instruction
    )


def is_implicit_only(instruction: InstructionId) -> bool:
    """
    Check if an instruction never takes an operand.

    Args:
        instruction: The instruction identifier

    Returns:
        True if IMPLICIT is its only legal addressing mode
    """
    return get_valid_modes(instruction) == {AddressingMode.IMPLICIT}


def is_branch(instruction: InstructionId) -> bool:
    """Check if an instruction is a conditional branch (relative mode)."""
    return AddressingMode.RELATIVE in get_valid_modes(instruction)
