"""
miniasm6502 Command-Line Interface
==================================

Command-line tools:

- **miniasm**: interactive line assembler and monitor
- **minidis**: 6502 disassembler

Each tool is a Click application.
"""

__all__ = ["miniasm", "minidis"]
