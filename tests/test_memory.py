"""
Memory Unit Tests
=================

Tests for the 64 KB target memory with ROM and unmapped regions.
"""

import pytest

from miniasm6502.monitor.memory import Memory


# =============================================================================
# RAM Tests
# =============================================================================

class TestMemory:
    """Test plain read/write behaviour."""

    def test_initialized_to_zero(self):
        memory = Memory()
        assert memory.read(0x0000) == 0
        assert memory.read(0xFFFF) == 0

    def test_fill(self):
        memory = Memory(fill=0xAA)
        assert memory.read(0x1234) == 0xAA

    def test_read_write(self):
        memory = Memory()
        memory.write(0x6000, 0x42)
        assert memory.read(0x6000) == 0x42

    def test_value_masked_to_byte(self):
        memory = Memory()
        memory.write(0x6000, 0x1FF)
        assert memory.read(0x6000) == 0xFF

    def test_address_masked_to_16_bits(self):
        memory = Memory()
        memory.write(0x10000, 0x12)
        assert memory.read(0x0000) == 0x12

    def test_dump_wraps(self):
        memory = Memory()
        memory.write(0xFFFF, 0x01)
        memory.write(0x0000, 0x02)
        assert memory.dump(0xFFFF, 2) == b"\x01\x02"


# =============================================================================
# ROM and Unmapped Regions
# =============================================================================

class TestRegions:
    """Test write protection and unmapped space."""

    def test_rom_ignores_writes(self):
        memory = Memory(rom_regions=[(0xE000, 0xFFFF)])
        memory.write(0xE000, 0x42)
        assert memory.read(0xE000) == 0x00
        assert memory.is_rom(0xFFFF)
        assert not memory.is_rom(0xDFFF)

    def test_rom_boundaries_are_inclusive(self):
        memory = Memory(rom_regions=[(0xC000, 0xC0FF)])
        memory.write(0xBFFF, 1)
        memory.write(0xC0FF, 2)
        memory.write(0xC100, 3)
        assert memory.dump(0xBFFF, 1) == b"\x01"
        assert memory.read(0xC0FF) == 0
        assert memory.read(0xC100) == 3

    def test_load_bypasses_rom(self):
        """Images are loaded into ROM regions regardless of protection."""
        memory = Memory(rom_regions=[(0xE000, 0xFFFF)])
        memory.load(0xE000, b"\x4C\x00\xE0")
        assert memory.dump(0xE000, 3) == b"\x4C\x00\xE0"

    def test_unmapped_reads_ff(self):
        memory = Memory(unmapped_regions=[(0x8000, 0x9FFF)])
        memory.write(0x8000, 0x00)
        assert memory.read(0x8000) == 0xFF
        assert not memory.is_mapped(0x9FFF)
        assert memory.is_mapped(0xA000)

    def test_invalid_region(self):
        with pytest.raises(ValueError):
            Memory(rom_regions=[(0xF000, 0xE000)])
        with pytest.raises(ValueError):
            Memory(unmapped_regions=[(0x0000, 0x10000)])
