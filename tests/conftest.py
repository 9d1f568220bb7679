"""
Shared Test Fixtures
====================

Fixtures for driving the line assembler and the monitor from in-memory
text streams instead of a terminal.
"""

import io

import pytest

from miniasm6502.assembler import LineAssembler, LineOutcome
from miniasm6502.monitor.console import ConsoleInput, ConsoleOutput
from miniasm6502.monitor.memory import Memory

ESC = "\x1b"


class Transcript:
    """
    A line assembler reading from a string and printing into a buffer.

    Attributes:
        memory: Target memory
        assembler: The LineAssembler under test
    """

    def __init__(self, text: str, memory: Memory):
        self.memory = memory
        self._out = io.StringIO()
        self.assembler = LineAssembler(
            memory,
            ConsoleInput(io.StringIO(text)),
            ConsoleOutput(self._out),
        )

    def line(self, address: int):
        """Assemble a single line."""
        return self.assembler.assemble_line(address)

    def run(self, address: int):
        """Assemble until the session ends; returns every non-final result."""
        results = []
        while True:
            result = self.assembler.assemble_line(address)
            if result.outcome is LineOutcome.SESSION_ENDED:
                return results
            results.append(result)
            address = result.next_address

    @property
    def output(self) -> str:
        return self._out.getvalue()


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def memory() -> Memory:
    """Fresh 64 KB RAM, all zero."""
    return Memory()


@pytest.fixture
def transcript(memory):
    """Factory: transcript("LDA #01\\n") -> Transcript over the memory fixture."""
    def make(text: str) -> Transcript:
        return Transcript(text, memory)
    return make
