"""
6502 Disassembler
=================

Turns 6502 machine code back into line-assembler syntax. This is the
inverse of the line assembler and is driven by the same opcode table, so
every listed line can be typed back at an address prompt unchanged:

    6000  EA        NOP
    6001  A2 0A     LDX #0A
    6003  20 EF FF  JSR FFEF
    6006  CA        DEX
    6007  D0 FA     BNE 6003

Operands use bare hex (no ``$``); branch targets are shown as the absolute
address the branch reaches.

Usage:
    disasm = Mos6502Disassembler()

    # Disassemble from bytes
    instructions = disasm.disassemble(memory.dump(0x6000, 16), start_address=0x6000)

    # Disassemble single instruction
    instr = disasm.disassemble_one(data, address=0x6000)
    print(instr)

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from miniasm6502.cpu import OPCODE_TABLE, AddressingMode, OpcodeEntry


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    A single disassembled 6502 instruction.

    Attributes:
        address: Memory address of the instruction
        raw_bytes: All bytes comprising this instruction
        mnemonic: The instruction mnemonic, or "???" for unknown opcodes
        mode: The addressing mode (None for unknown opcodes)
        operand_str: Operand in line-assembler syntax
        comment: Optional note (unknown or truncated instruction)
    """
    address: int
    raw_bytes: bytes
    mnemonic: str
    mode: Optional[AddressingMode]
    operand_str: str = ""
    comment: str = ""

    @property
    def size(self) -> int:
        return len(self.raw_bytes)

    @property
    def text(self) -> str:
        """Instruction text as it would be typed, e.g. ``"LDX #0A"``."""
        if self.operand_str:
            return f"{self.mnemonic} {self.operand_str}"
        return self.mnemonic

    def __str__(self) -> str:
        """Format as listing line: ADDRESS  BYTES  INSTRUCTION"""
        hex_bytes = " ".join(f"{b:02X}" for b in self.raw_bytes).ljust(8)
        line = f"{self.address:04X}  {hex_bytes}  {self.text}"
        if self.comment:
            line = f"{line:<30}; {self.comment}"
        return line.rstrip()


# =============================================================================
# 6502 Disassembler
# =============================================================================

class Mos6502Disassembler:
    """
    Disassembler for 6502 machine code.

    Builds a reverse lookup table (opcode byte -> OpcodeEntry) from the
    assembler's OPCODE_TABLE. The base 6502 has no opcode aliases, so the
    inversion is one-to-one.
    """

    def __init__(self):
        self._reverse_table = self._build_reverse_table()

    @staticmethod
    def _build_reverse_table() -> Dict[int, OpcodeEntry]:
        return {entry.opcode: entry for entry in OPCODE_TABLE}

    def disassemble_one(
        self,
        data: bytes,
        address: int = 0,
        offset: int = 0,
    ) -> DisassembledInstruction:
        """
        Disassemble a single instruction.

        Args:
            data: Byte buffer containing the instruction
            address: Memory address of the instruction (for branch targets)
            offset: Offset into data where the instruction starts

        Returns:
            DisassembledInstruction with decoded information

        Raises:
            ValueError: If offset is beyond the end of data
        """
        if offset >= len(data):
            raise ValueError(f"Offset {offset} beyond data length {len(data)}")

        opcode = data[offset]
        entry = self._reverse_table.get(opcode)

        if entry is None:
            return DisassembledInstruction(
                address=address,
                raw_bytes=bytes([opcode]),
                mnemonic="???",
                mode=None,
                comment="unknown opcode",
            )

        raw_bytes = bytes(data[offset:offset + entry.length])
        if len(raw_bytes) < entry.length:
            return DisassembledInstruction(
                address=address,
                raw_bytes=raw_bytes,
                mnemonic=entry.mnemonic,
                mode=entry.mode,
                comment="incomplete instruction",
            )

        return DisassembledInstruction(
            address=address,
            raw_bytes=raw_bytes,
            mnemonic=entry.mnemonic,
            mode=entry.mode,
            operand_str=self._format_operand(entry.mode, raw_bytes[1:], address),
        )

    def _format_operand(
        self,
        mode: AddressingMode,
        operand: bytes,
        address: int,
    ) -> str:
        """
        Format operand bytes in line-assembler syntax.

        Args:
            mode: Addressing mode
            operand: Operand bytes (little-endian for words)
            address: Address of the instruction

        Returns:
            Operand text, empty for implicit mode
        """
        if mode is AddressingMode.RELATIVE:
            displacement = int.from_bytes(operand, "little", signed=True)
            target = (address + 2 + displacement) & 0xFFFF
            return f"{target:04X}"

        if mode.operand_size == 0:
            return mode.syntax

        width = mode.operand_size * 2
        value = int.from_bytes(operand, "little")
        return mode.syntax.replace("n" * width, f"{value:0{width}X}")

    def disassemble(
        self,
        data: bytes,
        start_address: int = 0,
        count: Optional[int] = None,
    ) -> List[DisassembledInstruction]:
        """
        Disassemble multiple instructions.

        Args:
            data: Byte buffer containing machine code
            start_address: Memory address of first byte
            count: Maximum number of instructions (None = all)

        Returns:
            List of DisassembledInstruction objects
        """
        result = []
        offset = 0
        address = start_address

        while offset < len(data):
            if count is not None and len(result) >= count:
                break

            instr = self.disassemble_one(data, address, offset)
            result.append(instr)

            offset += instr.size
            address = (address + instr.size) & 0xFFFF

        return result

    def disassemble_to_text(
        self,
        data: bytes,
        start_address: int = 0,
        count: Optional[int] = None,
    ) -> str:
        """Disassemble and return a multi-line listing."""
        instructions = self.disassemble(data, start_address, count)
        return "\n".join(str(instr) for instr in instructions)
