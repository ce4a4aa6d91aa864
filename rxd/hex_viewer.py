"""
Hex Viewer Row Layout

This module turns rows of bytes into dump lines in the classic xxd layout:
an offset, the bytes encoded in hex (or binary) and split into groups, and
the printable ASCII column. It is the piece that has to be byte-exact, so
every knob that changes a line lives here: column count, group size,
little-endian groups, letter case, binary digits, terminal colors and the
flat "plain" style without offsets.

Lines are produced one row at a time. Nothing but the current row is kept,
which keeps memory independent of the input size.

Main features:
- Offsets in hex or decimal, biased by a display offset
- Byte grouping with optional little-endian order inside each group
- Per byte ANSI coloring driven by the byte's display class
- Padding of the final short row so the printable column stays aligned
- Optional autoskip of repeated all-NUL rows
"""

import logging

from .format import Ansi, NibbleCodec, classify, printable_char
from .utils import DEFAULT_GROUP_SIZE

logger = logging.getLogger(__name__)

_COLORS = tuple(classify(b).color for b in range(256))
_PRINTABLE = tuple(printable_char(b) for b in range(256))

SKIP_MARKER = "*\n"


class _RowScratch:
    """Per-row buffers, reused for every row and cleared before each one."""

    __slots__ = ("hex_parts", "printable")

    def __init__(self):
        self.hex_parts = []
        self.printable = []

    def clear(self):
        self.hex_parts.clear()
        self.printable.clear()


class RowLayoutEngine:
    """
    Format rows of at most `columns` bytes into dump lines.

    The only state carried between rows is the row index, used for the
    displayed offset `base_offset + row_index * columns`.

    Args:
        columns (int): bytes per row
        group_size (int): bytes per group in the hex field
        codec (NibbleCodec): byte encoder, resolved once for the run
        little_endian (bool): encode each group's bytes right to left
        color (bool): emit ANSI colors
        base_offset (int): offset displayed for the first row
        flat (bool): plain style, encoded bytes only
        decimal (bool): show offsets in decimal
        autoskip (bool): collapse runs of all-NUL rows into '*'
    """

    def __init__(self, columns, group_size=DEFAULT_GROUP_SIZE, codec=NibbleCodec.HEX_LOWER,
                 little_endian=False, color=False, base_offset=0, flat=False,
                 decimal=False, autoskip=False):
        if columns < 1:
            raise ValueError("columns must be at least 1, got %d" % columns)
        if group_size < 1:
            raise ValueError("group size must be at least 1, got %d" % group_size)
        self.columns = columns
        self.group_size = group_size
        self.codec = codec
        self.little_endian = little_endian
        self.color = color and not flat
        self.base_offset = base_offset
        self.flat = flat
        self.decimal = decimal
        self.autoskip = autoskip and not flat
        self.row_index = 0

        groups = -(-columns // group_size)
        self.total_width = columns * codec.width + groups
        self._scratch = _RowScratch()

    @classmethod
    def from_options(cls, options, base_offset=0):
        return cls(
            columns=options.resolved_columns,
            group_size=options.group_size,
            codec=NibbleCodec.resolve(options.bits and not options.postscript, options.uppercase),
            little_endian=options.little_endian,
            color=options.color,
            base_offset=base_offset + options.offset,
            flat=options.postscript,
            decimal=options.decimal,
            autoskip=options.autoskip,
        )

    def offset_of(self, row_index):
        return self.base_offset + row_index * self.columns

    def format_offset(self, offset):
        if self.decimal:
            return "%08d" % offset
        return "%08x" % offset

    def format_row(self, row, row_index=None):
        """
        Format a single row. Without an explicit `row_index` the row is
        taken to be the next one in the stream.

        Returns:
            str: the complete line including its newline, or "" for an
            empty row
        """
        if row_index is None:
            row_index = self.row_index
        self.row_index = row_index + 1

        if not row:
            return ""
        if self.flat:
            return self._format_flat(row)
        return self._format_dump(row, self.offset_of(row_index))

    def _format_flat(self, row):
        table = self.codec.table
        return "".join(table[b] for b in row) + "\n"

    def _format_dump(self, row, offset):
        scratch = self._scratch
        scratch.clear()
        hex_parts = scratch.hex_parts
        printable = scratch.printable
        table = self.codec.table
        width = self.codec.width
        color = self.color

        emitted = 0
        if color:
            hex_parts.append(Ansi.BOLD)
        for start in range(0, len(row), self.group_size):
            group = row[start:start + self.group_size]
            if self.little_endian:
                group = group[::-1]
            for b in group:
                if color:
                    hex_parts.append(_COLORS[b])
                hex_parts.append(table[b])
            hex_parts.append(" ")
            emitted += len(group) * width + 1
        if color:
            hex_parts.append(Ansi.RESET)

        for b in row:
            if color:
                printable.append(_COLORS[b])
            printable.append(_PRINTABLE[b])
        if color:
            printable.append(Ansi.RESET)

        padding = max(0, self.total_width - emitted)
        return "%s: %s%s %s\n" % (
            self.format_offset(offset),
            "".join(hex_parts),
            " " * padding,
            "".join(printable),
        )

    def _is_nul_row(self, row):
        return len(row) == self.columns and row.count(0) == len(row)

    def render(self, rows):
        """
        Yield one line per row of `rows`, in order.

        With autoskip, the first all-NUL row of a run is printed and the
        following ones are held back. A single held row is printed as is;
        two or more become one '*' line. If the input ends inside the run
        its last row is printed after the '*'.
        """
        previous_nul = False
        held = None
        starred = False
        for row in rows:
            nul = self.autoskip and self._is_nul_row(row)
            if nul and previous_nul:
                if held is not None and not starred:
                    yield SKIP_MARKER
                    starred = True
                held = (row, self.row_index)
                self.row_index += 1
                continue
            if held is not None and not starred:
                yield self.format_row(*held)
            held = None
            starred = False
            previous_nul = nul
            line = self.format_row(row)
            if line:
                yield line
        if held is not None:
            row, row_index = held
            logger.debug("Input ended inside a NUL run at row %d", row_index)
            yield self.format_row(row, row_index)
