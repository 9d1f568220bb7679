"""
Target Memory for the Line Assembler
====================================

The assembler only needs two primitives from target memory: write a byte
and read it back. They are captured by MemoryTarget, so anything with
``read``/``write`` (a real monitor link, an emulator bus) can be assembled
into.

Memory is the in-process implementation: a flat 64 KB address space with
optional read-only (ROM) and unmapped regions, mirroring the way a real
6502 system behaves:

    - RAM: writes stick
    - ROM: writes are silently ignored, reads return the ROM contents
    - Unmapped: writes are ignored, reads return $FF (floating bus)

Writing into ROM or unmapped space therefore fails read-back verification,
which is how "Unable to write to $XXXX" reaches the user.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)

MEMORY_SIZE = 0x10000

# (start, end) inclusive address ranges
Region = tuple[int, int]


class MemoryTarget(Protocol):
    """
    Protocol defining the memory interface used by the byte emitter.

    No atomicity is assumed beyond single-byte operations.
    """
    def read(self, address: int) -> int:
        """Read byte from address."""
        ...

    def write(self, address: int, value: int) -> None:
        """Write byte to address."""
        ...


class Memory:
    """
    64 KB target memory with ROM and unmapped regions.

    Attributes:
        rom_regions: Read-only ranges (inclusive)
        unmapped_regions: Ranges with nothing behind them (inclusive)
    """

    UNMAPPED_VALUE = 0xFF

    def __init__(
        self,
        rom_regions: Iterable[Region] = (),
        unmapped_regions: Iterable[Region] = (),
        fill: int = 0x00,
    ):
        """
        Initialize memory.

        Args:
            rom_regions: Read-only address ranges (start, end), inclusive
            unmapped_regions: Unmapped address ranges (start, end), inclusive
            fill: Initial value of every byte
        """
        self.rom_regions = [_check_region(r) for r in rom_regions]
        self.unmapped_regions = [_check_region(r) for r in unmapped_regions]
        self._data = bytearray([fill & 0xFF]) * MEMORY_SIZE

    def is_rom(self, address: int) -> bool:
        """Check if address lies in a read-only region."""
        return _in_regions(address & 0xFFFF, self.rom_regions)

    def is_mapped(self, address: int) -> bool:
        """Check if address has memory behind it."""
        return not _in_regions(address & 0xFFFF, self.unmapped_regions)

    def read(self, address: int) -> int:
        """
        Read byte from memory.

        Args:
            address: 16-bit address

        Returns:
            Byte value at address, or $FF if unmapped
        """
        address &= 0xFFFF
        if not self.is_mapped(address):
            return self.UNMAPPED_VALUE
        return self._data[address]

    def write(self, address: int, value: int) -> None:
        """
        Write byte to memory. Writes to ROM or unmapped space are ignored.

        Args:
            address: 16-bit address
            value: Byte value to write
        """
        address &= 0xFFFF
        if self.is_rom(address) or not self.is_mapped(address):
            logger.debug(f"Ignored write of ${value & 0xFF:02X} to ${address:04X}")
            return
        self._data[address] = value & 0xFF

    def load(self, address: int, data: bytes) -> None:
        """
        Copy an image into memory, bypassing ROM protection.

        Used to preload ROM contents or an existing program. Wraps at $FFFF.
        """
        for i, value in enumerate(data):
            self._data[(address + i) & 0xFFFF] = value
        logger.debug(f"Loaded {len(data)} bytes at ${address & 0xFFFF:04X}")

    def dump(self, address: int, length: int) -> bytes:
        """Read `length` bytes starting at address (wrapping at $FFFF)."""
        return bytes(self.read((address + i) & 0xFFFF) for i in range(length))


def _check_region(region: Region) -> Region:
    start, end = region
    if not (0 <= start <= end <= 0xFFFF):
        raise ValueError(f"Invalid memory region ${start:04X}-${end:04X}")
    return (start, end)


def _in_regions(address: int, regions: list[Region]) -> bool:
    return any(start <= address <= end for start, end in regions)
