"""
Console Input and Output
========================

The line assembler talks to the user through two small protocols:

- **LineInput**: hands out the mnemonic and operand of the current line,
  already filtered and upper-cased, and reports Escape as ``None``
- **TextOutput**: prints the ``XXXX: `` prompt and one-line messages

ConsoleInput and ConsoleOutput implement them over text streams, which
covers both an interactive terminal and a script file.

Input rules
-----------
- One physical line holds ``<mnemonic> [operand]``
- Input is upper-cased; anything after ``;`` is a comment
- The mnemonic is the first three letters on the line; other characters
  before the third letter are dropped
- The operand is the rest of the line, keeping only ``0-9 A-F # ( ) , X Y``
- Blank lines at the mnemonic prompt are skipped
- ESC anywhere on the line, or end of file, is Escape. Before the mnemonic
  is complete it ends the session; after it, only the line is aborted. When
  the line has no operand to read, the Escape ends the session at the next
  mnemonic prompt instead.
"""

import logging
from typing import Callable, Optional, Protocol, TextIO

import click

from miniasm6502.assembler.operand import OPERAND_CHARSET

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"
COMMENT = ";"
MNEMONIC_LENGTH = 3


# =============================================================================
# Protocols
# =============================================================================

class LineInput(Protocol):
    """Source of mnemonic/operand fields. ``None`` means Escape."""

    def read_mnemonic(self) -> Optional[str]:
        """Wait for the next line and return its mnemonic."""
        ...

    def read_operand(self) -> Optional[str]:
        """Return the operand text of the current line."""
        ...

    def read_command(self) -> Optional[str]:
        """Wait for a monitor command line."""
        ...


class TextOutput(Protocol):
    """Sink for prompts and messages."""

    def prompt(self, address: int) -> None:
        """Show the address prompt, ``XXXX: ``, without a newline."""
        ...

    def write(self, text: str) -> None:
        """Print text without ending the line."""
        ...

    def message(self, text: str) -> None:
        """Print one full line of text."""
        ...

    def newline(self) -> None:
        """End the current output line."""
        ...


# =============================================================================
# Stream Implementations
# =============================================================================

class ConsoleInput:
    """
    LineInput reading whole lines from a text stream.

    Attributes:
        escape_char: Character that signals Escape
    """

    def __init__(
        self,
        stream: TextIO,
        escape_char: str = ESCAPE,
        echo: Optional[Callable[[str], None]] = None,
    ):
        """
        Initialize the input.

        Args:
            stream: Text stream to read lines from
            escape_char: Character treated as Escape
            echo: Called with each consumed line (without newline). Use it
                  when the stream is not a terminal, so the transcript shows
                  what was typed.
        """
        self._stream = stream
        self.escape_char = escape_char
        self._echo = echo
        self._pending: Optional[str] = None

    def _readline(self) -> Optional[str]:
        """Read one raw line; None at end of file."""
        line = self._stream.readline()
        if line == "":
            logger.debug("End of input")
            return None
        line = line.rstrip("\r\n")
        if self._echo is not None:
            self._echo(line.replace(self.escape_char, ""))
        return line

    def _clean(self, line: str) -> str:
        """Upper-case and drop the comment."""
        return line.split(COMMENT, 1)[0].upper()

    def read_mnemonic(self) -> Optional[str]:
        unread, self._pending = self._pending, None
        if unread is not None and self.escape_char in unread:
            # Escape typed after an implicit instruction ends the session here
            logger.debug("Escape left over from the previous line")
            return None

        while True:
            raw = self._readline()
            if raw is None:
                return None

            line = self._clean(raw)
            letters = ""
            rest = ""
            for index, ch in enumerate(line):
                if ch == self.escape_char:
                    logger.debug("Escape at mnemonic prompt")
                    return None
                if "A" <= ch <= "Z":
                    letters += ch
                    if len(letters) == MNEMONIC_LENGTH:
                        rest = line[index + 1:]
                        break

            if letters or line.strip():
                self._pending = rest
                return letters

    def read_operand(self) -> Optional[str]:
        rest, self._pending = self._pending or "", None

        if self.escape_char in rest:
            logger.debug("Escape at operand prompt")
            return None
        return "".join(ch for ch in rest if ch in OPERAND_CHARSET)

    def read_command(self) -> Optional[str]:
        self._pending = None

        raw = self._readline()
        if raw is None or self.escape_char in raw:
            return None
        return self._clean(raw).strip()


class ConsoleOutput:
    """TextOutput writing through click.echo."""

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the output.

        Args:
            stream: Destination stream (default: stdout)
        """
        self._stream = stream

    def prompt(self, address: int) -> None:
        click.echo(f"{address & 0xFFFF:04X}: ", nl=False, file=self._stream)

    def write(self, text: str) -> None:
        click.echo(text, nl=False, file=self._stream)

    def message(self, text: str) -> None:
        click.echo(text, file=self._stream)

    def newline(self) -> None:
        click.echo("", file=self._stream)
