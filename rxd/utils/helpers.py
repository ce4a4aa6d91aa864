import argparse
import io
import logging

from . import SKIP_CHUNK_SIZE, SeekError

logger = logging.getLogger(__name__)


def arg_auto_int(x):
    return int(x, 0)


def arg_unsigned_int(x):
    value = int(x, 0)
    if value < 0:
        raise argparse.ArgumentTypeError("%s is not a non-negative integer" % x)
    return value


def arg_seek(x):
    """
    Parse an xxd style seek argument.

    A leading '+' marks the seek as relative to the current position of the
    input, otherwise it is absolute (negative values count from the end).

    Returns:
        tuple: (amount, relative)
    """
    relative = x.startswith('+')
    if relative:
        x = x[1:]
    return int(x, 0), relative


def _seekable(handle):
    try:
        return handle.seekable()
    except (AttributeError, ValueError):
        return False


def skip_bytes(handle, count):
    """Read and discard up to `count` bytes. Returns the number discarded."""
    skipped = 0
    while skipped < count:
        data = handle.read(min(SKIP_CHUNK_SIZE, count - skipped))
        if not data:
            break
        skipped += len(data)
    return skipped


def seek_source(handle, seek, relative=False):
    """
    Position `handle` before any byte of it is dumped.

    Seekable handles are moved with seek(); forward seeks on pipes and
    terminals are emulated by reading and discarding. Backward or
    end-relative seeks on such handles cannot be honoured.

    Returns:
        int: the absolute position of the first byte that will be dumped,
        used as the base of the displayed offsets.
    """
    if _seekable(handle):
        try:
            if relative:
                return handle.seek(seek, io.SEEK_CUR)
            if seek < 0:
                return handle.seek(seek, io.SEEK_END)
            return handle.seek(seek, io.SEEK_SET)
        except OSError as e:
            raise SeekError(seek) from e

    if seek < 0:
        raise SeekError(seek)
    if seek:
        skipped = skip_bytes(handle, seek)
        logger.debug("Skipped %d of %d bytes on unseekable input", skipped, seek)
    return seek
