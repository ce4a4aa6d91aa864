"""
Unit tests for byte classification and encoding (rxd.format).
"""

import pytest

from rxd.format import (
    Ansi,
    Base,
    DisplayClass,
    NibbleCodec,
    classify,
    encode,
    printable_char,
)

# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

class TestClassify:
    def test_nul(self):
        assert classify(0x00) is DisplayClass.NULL

    @pytest.mark.parametrize("byte", [0x09, 0x0A, 0x20])
    def test_whitespace(self, byte):
        assert classify(byte) is DisplayClass.WHITESPACE

    def test_fill_ff(self):
        assert classify(0xFF) is DisplayClass.FILL_FF

    @pytest.mark.parametrize("byte", [0x21, 0x41, 0x7E])
    def test_printable(self, byte):
        assert classify(byte) is DisplayClass.PRINTABLE

    @pytest.mark.parametrize("byte", [0x01, 0x0D, 0x7F, 0x80, 0xFE])
    def test_other(self, byte):
        assert classify(byte) is DisplayClass.OTHER

    def test_total(self):
        assert all(isinstance(classify(b), DisplayClass) for b in range(256))

    def test_colors(self):
        assert DisplayClass.NULL.color == Ansi.WHITE
        assert DisplayClass.WHITESPACE.color == Ansi.YELLOW
        assert DisplayClass.FILL_FF.color == Ansi.BLUE
        assert DisplayClass.PRINTABLE.color == Ansi.GREEN
        assert DisplayClass.OTHER.color == Ansi.RED


class TestPrintableChar:
    def test_letter(self):
        assert printable_char(0x41) == "A"

    def test_nul_is_dot(self):
        assert printable_char(0x00) == "."

    def test_space_is_literal(self):
        assert printable_char(0x20) == " "

    @pytest.mark.parametrize("byte", [0x09, 0x0A, 0x7F, 0xFF])
    def test_non_graphic_is_dot(self, byte):
        assert printable_char(byte) == "."


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

class TestEncode:
    def test_hex_lower(self):
        assert encode(0xAB) == "ab"
        assert encode(0x05) == "05"

    def test_hex_upper(self):
        assert encode(0xAB, uppercase=True) == "AB"

    def test_case_only_difference(self):
        for b in range(256):
            lower = encode(b, Base.HEX, False)
            upper = encode(b, Base.HEX, True)
            assert len(lower) == len(upper) == 2
            assert lower.upper() == upper
            assert upper.lower() == lower

    def test_binary_low_nibble_first(self):
        assert encode(0x41, Base.BINARY) == "00010100"
        assert encode(0x0F, Base.BINARY) == "11110000"
        assert encode(0xF0, Base.BINARY) == "00001111"

    def test_binary_width(self):
        assert all(len(encode(b, Base.BINARY)) == 8 for b in range(256))

    def test_binary_ignores_case(self):
        assert encode(0xAA, Base.BINARY, True) == encode(0xAA, Base.BINARY, False)


class TestNibbleCodec:
    def test_resolve(self):
        assert NibbleCodec.resolve() is NibbleCodec.HEX_LOWER
        assert NibbleCodec.resolve(uppercase=True) is NibbleCodec.HEX_UPPER
        assert NibbleCodec.resolve(bits=True, uppercase=True) is NibbleCodec.BINARY

    def test_widths(self):
        assert NibbleCodec.HEX_LOWER.width == 2
        assert NibbleCodec.HEX_UPPER.width == 2
        assert NibbleCodec.BINARY.width == 8

    def test_tables_cover_every_byte(self):
        for codec in NibbleCodec:
            assert len(codec.table) == 256
            assert codec.encode(0xFF) == codec.table[255]
