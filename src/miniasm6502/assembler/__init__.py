"""
6502 Line Assembler
===================

The assembly engine: every line typed at an address prompt is turned into
machine code and written to memory immediately. There are no labels, no
forward references and no second pass.

Main Components
---------------
- **classify_operand**: operand text -> addressing mode + value
- **ByteEmitter**: writes an instruction and verifies it by read-back
- **LineAssembler**: per-line state machine tying it all together

Example Usage
-------------
>>> import io
>>> from miniasm6502.assembler import LineAssembler
>>> from miniasm6502.monitor.console import ConsoleInput, ConsoleOutput
>>> from miniasm6502.monitor.memory import Memory
>>> memory = Memory()
>>> source = ConsoleInput(io.StringIO("JSR FFEF\\n"))
>>> asm = LineAssembler(memory, source, ConsoleOutput(io.StringIO()))
>>> result = asm.assemble_line(0x6003)
>>> result.emission.hex()
'20 EF FF'
"""

from miniasm6502.assembler.operand import (
    OPERAND_CHARSET,
    Operand,
    classify_operand,
    parse_hex,
)
from miniasm6502.assembler.emitter import (
    ByteEmitter,
    Emission,
    encode_operand,
    relative_offset,
)
from miniasm6502.assembler.line import (
    LineAssembler,
    LineOutcome,
    LineResult,
    LineState,
    ParsedLine,
)

__all__ = [
    "OPERAND_CHARSET",
    "Operand",
    "classify_operand",
    "parse_hex",
    "ByteEmitter",
    "Emission",
    "encode_operand",
    "relative_offset",
    "LineAssembler",
    "LineOutcome",
    "LineResult",
    "LineState",
    "ParsedLine",
]
