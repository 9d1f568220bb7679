"""
Operand Classifier
==================

Turns raw operand text into an addressing mode and a numeric value.

The text reaching this module has already been filtered by the input layer
to the operand charset (``0-9 A-F # ( ) , X Y``). All numbers are
hexadecimal with exactly 2 or 4 digits and no radix prefix, so the digit
count alone separates zero-page from absolute operands:

    A         accumulator
    #nn       immediate
    nn        zero page         nn,X  nn,Y
    nnnn      absolute/relative nnnn,X  nnnn,Y
    (nn,X)    indexed indirect
    (nn),Y    indirect indexed
    (nnnn)    indirect

A bare 4-digit operand is either absolute or a branch target. The text
cannot tell them apart, so the caller passes the instruction's legal modes
and RELATIVE wins whenever it is among them.

classify_operand() does no table lookups and keeps no state.
"""

import re
from dataclasses import dataclass
from typing import AbstractSet

from miniasm6502.cpu import AddressingMode
from miniasm6502.errors import InvalidOperandError


# Characters the input layer lets through for an operand
OPERAND_CHARSET = frozenset("0123456789ABCDEF#(),XY")

_HEX2 = r"([0-9A-F]{2})"
_HEX4 = r"([0-9A-F]{4})"

# Checked in order; the first full match decides the mode.
# RELATIVE is never listed here, it is resolved from ABSOLUTE below.
_OPERAND_PATTERNS: tuple[tuple[re.Pattern, AddressingMode], ...] = (
    (re.compile(r"A"), AddressingMode.ACCUMULATOR),
    (re.compile(rf"#{_HEX2}"), AddressingMode.IMMEDIATE),
    (re.compile(_HEX2), AddressingMode.ZERO_PAGE),
    (re.compile(rf"{_HEX2},X"), AddressingMode.ZERO_PAGE_X),
    (re.compile(rf"{_HEX2},Y"), AddressingMode.ZERO_PAGE_Y),
    (re.compile(_HEX4), AddressingMode.ABSOLUTE),
    (re.compile(rf"{_HEX4},X"), AddressingMode.ABSOLUTE_X),
    (re.compile(rf"{_HEX4},Y"), AddressingMode.ABSOLUTE_Y),
    (re.compile(rf"\({_HEX2},X\)"), AddressingMode.INDEXED_INDIRECT),
    (re.compile(rf"\({_HEX2}\),Y"), AddressingMode.INDIRECT_INDEXED),
    (re.compile(rf"\({_HEX4}\)"), AddressingMode.INDIRECT),
)


@dataclass(frozen=True)
class Operand:
    """
    A classified operand.

    Attributes:
        mode: Detected addressing mode
        value: Operand value (0-255 or 0-65535); 0 for modes without one
    """
    mode: AddressingMode
    value: int = 0

    def __str__(self) -> str:
        size = self.mode.operand_size
        if self.mode is AddressingMode.RELATIVE:
            size = 2
        if size == 0:
            return self.mode.syntax
        digits = f"{self.value:0{size * 2}X}"
        return self.mode.syntax.replace("n" * size * 2, digits)


def parse_hex(text: str) -> int:
    """
    Parse an upper-case hexadecimal string.

    Only ``0-9`` and ``A-F`` are digits; lower case, signs, blanks and
    prefixes are rejected.

    Raises:
        InvalidOperandError: If any character is not a hex digit
    """
    if not text or any(ch not in "0123456789ABCDEF" for ch in text):
        raise InvalidOperandError(text, detail=f"'{text}' is not a hex number")
    return int(text, 16)


def classify_operand(
    text: str,
    legal_modes: AbstractSet[AddressingMode] = frozenset(),
) -> Operand:
    """
    Determine the addressing mode and value of an operand.

    Args:
        text: Operand text, upper case, already filtered to OPERAND_CHARSET
        legal_modes: Addressing modes legal for the current instruction.
                     Decides absolute vs. relative for 4-digit operands, and
                     whether an empty operand means the accumulator.

    Returns:
        The classified Operand

    Raises:
        InvalidOperandError: If the text matches no operand shape
    """
    if text == "":
        if AddressingMode.ACCUMULATOR in legal_modes:
            return Operand(AddressingMode.ACCUMULATOR)
        raise InvalidOperandError(text, detail="missing operand")

    for pattern, mode in _OPERAND_PATTERNS:
        match = pattern.fullmatch(text)
        if match is None:
            continue

        value = parse_hex(match.group(1)) if match.groups() else 0

        if mode is AddressingMode.ABSOLUTE and AddressingMode.RELATIVE in legal_modes:
            mode = AddressingMode.RELATIVE

        return Operand(mode, value)

    raise InvalidOperandError(text)
