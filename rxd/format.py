"""
Byte classification and encoding

This module holds the two per-byte building blocks of a dump line: the
display class of a byte (which drives its terminal color and whether it is
shown as itself in the printable column) and the text a byte is encoded to
in the hex or binary field.

Encoders are resolved once per run into a NibbleCodec member. Each member
carries a precomputed 256-entry table, so formatting a row is a plain table
lookup per byte.
"""

from enum import Enum


class Ansi:
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    WHITE = "\033[97m"
    RESET = "\033[0m"
    BOLD = "\033[1m"


class DisplayClass(Enum):
    NULL = "null"
    WHITESPACE = "whitespace"
    FILL_FF = "fill_ff"
    PRINTABLE = "printable"
    OTHER = "other"

    @property
    def color(self) -> str:
        return CLASS_COLORS[self]


CLASS_COLORS = {
    DisplayClass.NULL: Ansi.WHITE,
    DisplayClass.WHITESPACE: Ansi.YELLOW,
    DisplayClass.FILL_FF: Ansi.BLUE,
    DisplayClass.PRINTABLE: Ansi.GREEN,
    DisplayClass.OTHER: Ansi.RED,
}

WHITESPACE_BYTES = (0x09, 0x0A, 0x20)


def is_graphic(byte: int) -> bool:
    return 0x21 <= byte <= 0x7E


def classify(byte: int) -> DisplayClass:
    """
    Map a byte value to its display class.

    Checked in priority order: NUL, tab/newline/space, 0xFF, ASCII graphic,
    anything else.
    """
    if byte == 0:
        return DisplayClass.NULL
    if byte in WHITESPACE_BYTES:
        return DisplayClass.WHITESPACE
    if byte == 0xFF:
        return DisplayClass.FILL_FF
    if is_graphic(byte):
        return DisplayClass.PRINTABLE
    return DisplayClass.OTHER


def printable_char(byte: int) -> str:
    # 0x20 is whitespace for coloring but still shown as a space
    if is_graphic(byte) or byte == 0x20:
        return chr(byte)
    return "."


class Base(Enum):
    HEX = "hex"
    BINARY = "binary"


def _hex_lower(byte: int) -> str:
    return "%02x" % byte


def _hex_upper(byte: int) -> str:
    return "%02X" % byte


def _binary(byte: int) -> str:
    return "{:04b}{:04b}".format(byte & 0x0F, byte >> 4 & 0x0F)


class NibbleCodec(Enum):
    HEX_LOWER = (2, _hex_lower)
    HEX_UPPER = (2, _hex_upper)
    BINARY = (8, _binary)

    def __init__(self, width, encoder):
        self.width = width
        self.table = tuple(encoder(b) for b in range(256))

    def encode(self, byte: int) -> str:
        return self.table[byte]

    @classmethod
    def resolve(cls, bits: bool = False, uppercase: bool = False) -> "NibbleCodec":
        if bits:
            return cls.BINARY
        return cls.HEX_UPPER if uppercase else cls.HEX_LOWER


def encode(byte: int, base: Base = Base.HEX, uppercase: bool = False) -> str:
    """
    Encode one byte as display text.

    Args:
        byte (int): value in 0-255
        base (Base): Base.HEX for two hex digits, Base.BINARY for eight bits
        uppercase (bool): upper-case hex letters; ignored for binary

    Returns:
        str: "41"/"4F" style hex, or the binary spelling of the low nibble
        followed by the high nibble ("00010100" for 0x41)
    """
    return NibbleCodec.resolve(base is Base.BINARY, uppercase).encode(byte & 0xFF)
