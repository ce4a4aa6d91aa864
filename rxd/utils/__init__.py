DEFAULT_COLUMNS = 16
DEFAULT_BINARY_COLUMNS = 6
DEFAULT_FLAT_COLUMNS = 16
DEFAULT_INCLUDE_COLUMNS = 30
DEFAULT_GROUP_SIZE = 2
DEFAULT_LITTLE_ENDIAN_GROUP_SIZE = 4
MAX_GROUP_SIZE = 16

DEFAULT_INCLUDE_NAME = "buffer"

# reads are sized to a whole number of rows
CHUNK_ROWS = 128 * 16
SKIP_CHUNK_SIZE = 64 * 1024


class FatalError(RuntimeError):
    def __init__(self, message):
        RuntimeError.__init__(self, message)


class SeekError(FatalError):
    def __init__(self, seek):
        FatalError.__init__(self, "Sorry, cannot seek %d bytes on this input." % seek)
        self.seek = seek


class UnsupportedOperationError(FatalError):
    def __init__(self, operation):
        FatalError.__init__(self, "%s is not supported." % operation)


def chunk_capacity(columns):
    return columns * CHUNK_ROWS


from .bufio import BoundedReader
from .helpers import (
    arg_auto_int,
    arg_seek,
    arg_unsigned_int,
    seek_source,
    skip_bytes,
)

__all__ = [
    'DEFAULT_COLUMNS',
    'DEFAULT_BINARY_COLUMNS',
    'DEFAULT_FLAT_COLUMNS',
    'DEFAULT_INCLUDE_COLUMNS',
    'DEFAULT_GROUP_SIZE',
    'DEFAULT_LITTLE_ENDIAN_GROUP_SIZE',
    'MAX_GROUP_SIZE',
    'DEFAULT_INCLUDE_NAME',
    'CHUNK_ROWS',
    'SKIP_CHUNK_SIZE',
    'FatalError',
    'SeekError',
    'UnsupportedOperationError',
    'chunk_capacity',
    'BoundedReader',
    'arg_auto_int',
    'arg_seek',
    'arg_unsigned_int',
    'seek_source',
    'skip_bytes',
]
