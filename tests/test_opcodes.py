"""
Unit Tests for the 6502 Instruction Tables
==========================================

Tests for the mnemonic table, the opcode table and their lookup functions.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import pytest

from miniasm6502.cpu import (
    AddressingMode,
    InstructionId,
    MNEMONIC_TABLE,
    OPCODE_TABLE,
    OpcodeEntry,
    get_valid_modes,
    is_branch,
    is_implicit_only,
    lookup_mnemonic,
    lookup_opcode,
)


IMPLICIT_ONLY = {
    "BRK", "RTI", "RTS", "NOP",
    "PHP", "PLP", "PHA", "PLA",
    "CLC", "SEC", "CLI", "SEI", "CLV", "CLD", "SED",
    "TXA", "TXS", "TYA", "TAY", "TAX", "TSX",
    "DEY", "INY", "DEX", "INX",
}

BRANCHES = {"BPL", "BMI", "BVC", "BVS", "BCC", "BCS", "BNE", "BEQ"}


# =============================================================================
# Mnemonic Table Tests
# =============================================================================

class TestMnemonicTable:
    """Tests for mnemonic lookup."""

    def test_has_all_56_instructions(self):
        """The base 6502 has 56 mnemonics."""
        assert len(MNEMONIC_TABLE) == 56

    def test_mnemonics_are_unique(self):
        """No mnemonic appears twice."""
        texts = [entry.text for entry in MNEMONIC_TABLE]
        assert len(texts) == len(set(texts))

    def test_mnemonics_are_three_upper_case_letters(self):
        for entry in MNEMONIC_TABLE:
            assert len(entry.text) == 3
            assert entry.text.isalpha() and entry.text.isupper()

    def test_lookup_known(self):
        """Known mnemonics resolve to their instruction."""
        assert lookup_mnemonic("LDA") is InstructionId.LDA
        assert lookup_mnemonic("JSR") is InstructionId.JSR
        assert lookup_mnemonic("TYA") is InstructionId.TYA

    def test_lookup_unknown(self):
        """Unknown text returns the INVALID sentinel."""
        assert lookup_mnemonic("XYZ") is InstructionId.INVALID
        assert lookup_mnemonic("") is InstructionId.INVALID
        assert lookup_mnemonic("LDAX") is InstructionId.INVALID

    def test_lookup_is_case_sensitive(self):
        """Callers upper-case first; lower case does not match."""
        assert lookup_mnemonic("lda") is InstructionId.INVALID

    def test_no_65c02_mnemonics(self):
        """Extended instructions are not part of the base set."""
        for text in ("BRA", "STZ", "PHX", "TRB"):
            assert lookup_mnemonic(text) is InstructionId.INVALID


# =============================================================================
# Opcode Table Tests
# =============================================================================

class TestOpcodeTable:
    """Tests for the (instruction, mode) -> opcode table."""

    def test_has_151_documented_opcodes(self):
        assert len(OPCODE_TABLE) == 151

    def test_pairs_are_unique(self):
        """At most one entry per (instruction, mode)."""
        pairs = [(e.instruction, e.mode) for e in OPCODE_TABLE]
        assert len(pairs) == len(set(pairs))

    def test_opcodes_are_unique(self):
        """Every opcode byte decodes to one instruction."""
        opcodes = [e.opcode for e in OPCODE_TABLE]
        assert len(opcodes) == len(set(opcodes))

    def test_length_matches_mode(self):
        """Instruction length is opcode plus the mode's operand size."""
        for entry in OPCODE_TABLE:
            assert entry.length == 1 + entry.mode.operand_size, repr(entry)

    def test_every_instruction_has_an_encoding(self):
        for entry in MNEMONIC_TABLE:
            assert get_valid_modes(entry.instruction), entry.text

    def test_entries_are_frozen(self):
        """Table entries cannot be modified."""
        entry = OPCODE_TABLE[0]
        with pytest.raises(AttributeError):
            entry.opcode = 0x00

    def test_known_encodings(self):
        """Spot check opcodes against the MOS programming manual."""
        cases = [
            (InstructionId.LDA, AddressingMode.IMMEDIATE, 0xA9),
            (InstructionId.LDX, AddressingMode.IMMEDIATE, 0xA2),
            (InstructionId.LDX, AddressingMode.ZERO_PAGE_Y, 0xB6),
            (InstructionId.STA, AddressingMode.INDIRECT_INDEXED, 0x91),
            (InstructionId.JSR, AddressingMode.ABSOLUTE, 0x20),
            (InstructionId.JMP, AddressingMode.INDIRECT, 0x6C),
            (InstructionId.ASL, AddressingMode.ACCUMULATOR, 0x0A),
            (InstructionId.BNE, AddressingMode.RELATIVE, 0xD0),
            (InstructionId.NOP, AddressingMode.IMPLICIT, 0xEA),
            (InstructionId.BRK, AddressingMode.IMPLICIT, 0x00),
        ]
        for instruction, mode, opcode in cases:
            entry = lookup_opcode(instruction, mode)
            assert entry is not None
            assert entry.opcode == opcode

    def test_illegal_combinations(self):
        """Absent pairs return None."""
        assert lookup_opcode(InstructionId.STA, AddressingMode.IMMEDIATE) is None
        assert lookup_opcode(InstructionId.LDA, AddressingMode.ZERO_PAGE_Y) is None
        assert lookup_opcode(InstructionId.JMP, AddressingMode.ZERO_PAGE) is None
        assert lookup_opcode(InstructionId.NOP, AddressingMode.ABSOLUTE) is None

    def test_invalid_has_no_modes(self):
        assert get_valid_modes(InstructionId.INVALID) == frozenset()

    def test_entry_repr(self):
        entry = lookup_opcode(InstructionId.JSR, AddressingMode.ABSOLUTE)
        assert isinstance(entry, OpcodeEntry)
        assert entry.mnemonic == "JSR"
        assert "$20" in repr(entry)


# =============================================================================
# Classification Helper Tests
# =============================================================================

class TestInstructionClasses:
    """Tests for is_implicit_only() and is_branch()."""

    def test_implicit_only_set(self):
        found = {e.text for e in MNEMONIC_TABLE if is_implicit_only(e.instruction)}
        assert found == IMPLICIT_ONLY

    def test_branch_set(self):
        found = {e.text for e in MNEMONIC_TABLE if is_branch(e.instruction)}
        assert found == BRANCHES

    def test_accumulator_forms(self):
        """Only the shifts and rotates operate on the accumulator."""
        found = {
            e.text for e in MNEMONIC_TABLE
            if AddressingMode.ACCUMULATOR in get_valid_modes(e.instruction)
        }
        assert found == {"ASL", "LSR", "ROL", "ROR"}


class TestAddressingMode:
    """Tests for AddressingMode properties."""

    def test_operand_sizes(self):
        assert AddressingMode.IMPLICIT.operand_size == 0
        assert AddressingMode.ACCUMULATOR.operand_size == 0
        assert AddressingMode.IMMEDIATE.operand_size == 1
        assert AddressingMode.RELATIVE.operand_size == 1
        assert AddressingMode.ABSOLUTE_Y.operand_size == 2
        assert AddressingMode.INDIRECT.operand_size == 2

    def test_syntax(self):
        assert AddressingMode.INDIRECT_INDEXED.syntax == "(nn),Y"
        assert AddressingMode.ABSOLUTE_X.syntax == "nnnn,X"

    def test_str_is_readable(self):
        assert str(AddressingMode.ZERO_PAGE_X) == "zero page x"
        assert str(AddressingMode.IMMEDIATE) == "immediate"
