"""
Byte Emitter
============

Encodes operands into their final byte form and writes instructions to
target memory, verifying every byte by reading it back.

Operand encoding:
    - 1-byte operands are written as-is
    - 2-byte operands are little-endian (low byte first)
    - relative branches store target - (address + length) as a signed byte

Addresses wrap at $FFFF, matching the 6502 program counter.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from dataclasses import dataclass

from miniasm6502.cpu import AddressingMode
from miniasm6502.errors import BranchRangeError, WriteVerificationError
from miniasm6502.monitor.memory import MemoryTarget

logger = logging.getLogger(__name__)

ADDRESS_MASK = 0xFFFF

BRANCH_MIN = -128
BRANCH_MAX = 127


@dataclass(frozen=True)
class Emission:
    """
    Bytes written for one instruction.

    Attributes:
        address: Address of the first byte (the opcode)
        data: Opcode followed by operand bytes
        next_address: Address following the instruction
    """
    address: int
    data: bytes

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def next_address(self) -> int:
        return (self.address + len(self.data)) & ADDRESS_MASK

    def hex(self) -> str:
        """Bytes as space-separated hex pairs, e.g. ``"20 EF FF"``."""
        return " ".join(f"{b:02X}" for b in self.data)


def relative_offset(target: int, address: int, length: int = 2) -> int:
    """
    Compute a branch displacement.

    The displacement is measured from the address after the branch
    instruction, in 16-bit wraparound arithmetic, so a branch near $FFFF
    can reach the bottom of memory.

    Args:
        target: Branch target address
        address: Address of the branch opcode
        length: Branch instruction length (always 2 on the 6502)

    Returns:
        Signed displacement in -128..127

    Raises:
        BranchRangeError: If the target is out of reach
    """
    offset = (target - (address + length)) & ADDRESS_MASK
    if offset >= 0x8000:
        offset -= 0x10000

    if not BRANCH_MIN <= offset <= BRANCH_MAX:
        raise BranchRangeError(target, offset, address=address)
    return offset


def encode_operand(
    mode: AddressingMode,
    value: int,
    address: int,
    length: int,
) -> bytes:
    """
    Encode an operand value into the bytes following the opcode.

    Args:
        mode: Addressing mode of the instruction
        value: Classified operand value
        address: Address of the opcode (needed for relative branches)
        length: Total instruction length

    Returns:
        0, 1 or 2 operand bytes

    Raises:
        BranchRangeError: If a relative target is out of reach
    """
    if mode is AddressingMode.RELATIVE:
        return bytes([relative_offset(value, address, length) & 0xFF])

    size = mode.operand_size
    if size == 0:
        return b""
    if size == 1:
        return bytes([value & 0xFF])
    return (value & 0xFFFF).to_bytes(2, "little")


class ByteEmitter:
    """
    Writes encoded instructions to a memory target.

    Every byte is written first, then all of them are read back and compared.
    The first mismatch raises WriteVerificationError carrying the failing
    address; the caller must then leave its current address unchanged.

    Example:
        >>> emitter = ByteEmitter(Memory())
        >>> emission = emitter.emit(0x6001, 0xA2, b"\\x0A")
        >>> f"{emission.next_address:04X}"
        '6003'
    """

    def __init__(self, memory: MemoryTarget):
        """
        Initialize the emitter.

        Args:
            memory: Target implementing read()/write()
        """
        self._memory = memory

    def emit(self, address: int, opcode: int, operand: bytes = b"") -> Emission:
        """
        Write one instruction and verify it.

        Args:
            address: Address of the opcode byte
            opcode: The opcode byte
            operand: Operand bytes already in final (encoded) form

        Returns:
            Emission describing what was written

        Raises:
            WriteVerificationError: If any byte fails to read back
        """
        data = bytes([opcode & 0xFF]) + bytes(operand)

        for i, value in enumerate(data):
            self._memory.write((address + i) & ADDRESS_MASK, value)

        for i, expected in enumerate(data):
            location = (address + i) & ADDRESS_MASK
            actual = self._memory.read(location)
            if actual != expected:
                logger.warning(
                    f"Write verification failed at ${location:04X}: "
                    f"wrote ${expected:02X}, read ${actual:02X}"
                )
                raise WriteVerificationError(location, expected, actual)

        emission = Emission(address & ADDRESS_MASK, data)
        logger.debug(f"Emitted {emission.hex()} at ${emission.address:04X}")
        return emission
