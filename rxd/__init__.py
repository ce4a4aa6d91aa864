from .dumper import OutputModeDispatcher, dump, hexdump, render
from .format import Base, DisplayClass, NibbleCodec, classify, encode, printable_char
from .hex_viewer import RowLayoutEngine
from .options import ColorMode, Options, OutputMode
from .utils import BoundedReader, FatalError, SeekError, UnsupportedOperationError

__version__ = "2025.10"
VERSION = "rxd %s" % __version__

__all__ = [
    'Base',
    'BoundedReader',
    'ColorMode',
    'DisplayClass',
    'FatalError',
    'NibbleCodec',
    'Options',
    'OutputMode',
    'OutputModeDispatcher',
    'RowLayoutEngine',
    'SeekError',
    'UnsupportedOperationError',
    'VERSION',
    'classify',
    'dump',
    'encode',
    'hexdump',
    'printable_char',
    'render',
]
