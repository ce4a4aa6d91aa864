"""
Dump Dispatcher

Picks the render path for a run from the resolved Options and streams the
source through it:

- regular: offset, grouped hex, printable column
- binary: the same layout with bytes spelled out in bits
- flat: hex digits only, one line per row ("-ps" / plain style)
- include: a C array literal plus a length constant ("-i")

The path is chosen once, before the first byte is read, and every line is
written to the sink as soon as it is complete.
"""

import io
import logging
from typing import Iterator, Optional

from .format import NibbleCodec
from .hex_viewer import RowLayoutEngine
from .options import Options, OutputMode
from .utils import BoundedReader, chunk_capacity, seek_source

logger = logging.getLogger(__name__)


class OutputModeDispatcher:
    """
    Render a byte source according to `options`.

    Args:
        options (Options): resolved settings for the run
    """

    def __init__(self, options: Options):
        self.options = options
        self.mode = options.mode
        self.columns = options.resolved_columns
        self.reader: Optional[BoundedReader] = None
        self.base_offset = 0

    def open(self, source, base_offset=0) -> BoundedReader:
        self.reader = BoundedReader(chunk_capacity(self.columns), source, self.options.length)
        self.base_offset = base_offset
        logger.debug("Dumping in %s mode, %d columns, limit %s",
                      self.mode.value, self.columns, self.options.length)
        return self.reader

    def lines(self, source, base_offset=0) -> Iterator[str]:
        reader = self.open(source, base_offset)
        if self.mode is OutputMode.INCLUDE:
            return self._include_lines(reader)
        engine = RowLayoutEngine.from_options(self.options, base_offset)
        return engine.render(reader.rows(self.columns))

    def _include_lines(self, reader) -> Iterator[str]:
        options = self.options
        table = NibbleCodec.HEX_LOWER.table
        yield "unsigned char %s[] = {\n" % options.array_name
        for row in reader.rows(self.columns):
            yield "  " + "".join("0x%s, " % table[b] for b in row) + "\n"
        yield "};\nunsigned int %s = %d;\n" % (options.length_name, reader.total_consumed())

    def total_consumed(self) -> int:
        if self.reader is None:
            return 0
        return self.reader.total_consumed()


def render(source, options: Options, base_offset=0) -> Iterator[str]:
    """Yield the dump lines for an already positioned `source`."""
    return OutputModeDispatcher(options).lines(source, base_offset)


def dump(source, sink, options: Options) -> int:
    """
    Seek `source` as requested by `options`, then write its dump to `sink`.

    Args:
        source: binary file-like object with read()
        sink: text file-like object with write()
        options (Options): resolved settings

    Returns:
        int: number of input bytes rendered

    Raises:
        SeekError: the seek cannot be honoured on this source
        OSError: writing to the sink failed
    """
    start = seek_source(source, options.seek, options.seek_relative)
    dispatcher = OutputModeDispatcher(options)
    for line in dispatcher.lines(source, start):
        sink.write(line)
    total = dispatcher.total_consumed()
    logger.debug("Rendered %d bytes starting at offset %d", total, start)
    return total


def hexdump(data, options: Optional[Options] = None, **kwargs) -> str:
    """
    Dump in-memory bytes to a string.

    Keyword arguments are Options fields, e.g. hexdump(b"abc", columns=8),
    and cannot be combined with a ready-made `options`.
    """
    if options is not None and kwargs:
        raise TypeError("hexdump() takes either options or Options fields, not both")
    if options is None:
        options = Options(**kwargs)
    sink = io.StringIO()
    dump(io.BytesIO(bytes(data)), sink, options)
    return sink.getvalue()
