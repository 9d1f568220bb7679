"""
miniasm6502 CPU Package
=======================

Instruction-set definitions shared by the line assembler (which encodes
instructions) and the disassembler (which decodes them). Keeping both on
the same tables guarantees they agree.

Modules:
    mos6502: Base 6502 mnemonics, addressing modes, opcode table and
             lookup helpers.

Usage:
    from miniasm6502.cpu import (
        AddressingMode,
        InstructionId,
        lookup_mnemonic,
        lookup_opcode,
    )
"""

from miniasm6502.cpu.mos6502 import (
    # Core types
    AddressingMode,
    InstructionId,
    MnemonicEntry,
    OpcodeEntry,
    # Tables
    MNEMONIC_TABLE,
    OPCODE_TABLE,
    # Lookups
    lookup_mnemonic,
    lookup_opcode,
    get_valid_modes,
    is_implicit_only,
    is_branch,
)

__all__ = [
    "AddressingMode",
    "InstructionId",
    "MnemonicEntry",
    "OpcodeEntry",
    "MNEMONIC_TABLE",
    "OPCODE_TABLE",
    "lookup_mnemonic",
    "lookup_opcode",
    "get_valid_modes",
    "is_implicit_only",
    "is_branch",
]
