"""
miniasm6502 Disassembler Module
===============================

Lists 6502 machine code in the syntax the line assembler accepts. Used by
the monitor's L command and by the minidis tool.

Usage:
    from miniasm6502.disassembler import Mos6502Disassembler

    disasm = Mos6502Disassembler()
    print(disasm.disassemble_to_text(code, start_address=0x6000))
"""

from .mos6502 import Mos6502Disassembler, DisassembledInstruction

__all__ = [
    "Mos6502Disassembler",
    "DisassembledInstruction",
]
