"""
Command line front end

Parses xxd style switches, opens and positions the input, resolves the
color mode against the output and hands everything to the dumper. All
user-facing error reporting happens here; the dumper only raises.
"""

import argparse
import logging
import os
import sys

from rich.console import Console

from . import VERSION
from .dumper import dump
from .options import ColorMode, Options
from .utils import (
    DEFAULT_GROUP_SIZE,
    DEFAULT_LITTLE_ENDIAN_GROUP_SIZE,
    MAX_GROUP_SIZE,
    FatalError,
    UnsupportedOperationError,
    arg_auto_int,
    arg_seek,
    arg_unsigned_int,
)
from .utils.logs import setup_logging

logger = logging.getLogger(__name__)

USAGE = """
       rxd [options] [infile [outfile]]
    or
       rxd -r [-s [-]offset] [-c cols] [-ps] [infile [outfile]]"""


def build_parser():
    parser = argparse.ArgumentParser(
        prog="rxd",
        usage=USAGE,
        description="Make a hex dump of a file or standard input.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument('-a', '-autoskip', dest='autoskip', action='store_true',
                        help="toggle autoskip: A single '*' replaces nul-lines. Default off.")
    parser.add_argument('-b', '-bits', dest='bits', action='store_true',
                        help="binary digit dump (incompatible with -ps,-i). Default hex.")
    parser.add_argument('-C', '-capitalize', dest='capitalize', action='store_true',
                        help="capitalize variable names in C include file style (-i).")
    parser.add_argument('-c', '-cols', dest='cols', type=arg_auto_int, metavar='cols',
                        help="format <cols> octets per line. Default 16 (-b: 6, -i: 30).")
    parser.add_argument('-d', dest='decimal', action='store_true',
                        help="show offset in decimal instead of hex.")
    parser.add_argument('-e', dest='little_endian', action='store_true',
                        help="little-endian dump (incompatible with -ps,-i,-r).")
    parser.add_argument('-g', '-groupsize', dest='group_size', type=arg_auto_int, metavar='bytes',
                        help="number of octets per group in normal output. Default 2 (-e: 4).")
    parser.add_argument('-h', '-help', action='help',
                        help="print this summary.")
    parser.add_argument('-i', '-include', dest='include', action='store_true',
                        help="output in C include file style.")
    parser.add_argument('-l', '-len', dest='length', type=arg_auto_int, metavar='len',
                        help="stop after <len> octets.")
    parser.add_argument('-n', '-name', dest='name', metavar='name',
                        help="set the variable name used in C include output (-i).")
    parser.add_argument('-o', '-offset', dest='offset', type=arg_unsigned_int, default=0, metavar='off',
                        help="add <off> to the displayed file position.")
    parser.add_argument('-p', '-ps', '-postscript', '-plain', dest='postscript', action='store_true',
                        help="output in postscript plain hexdump style.")
    parser.add_argument('-r', '-revert', dest='revert', action='store_true',
                        help="reverse operation: convert hexdump into binary (not supported).")
    parser.add_argument('-R', '-color', dest='color', type=ColorMode, default=ColorMode.AUTO,
                        metavar='when',
                        help="colorize the output; <when> can be 'always', 'auto' or 'never'. Default: 'auto'.")
    parser.add_argument('-s', '-seek', dest='seek', type=arg_seek, default=(0, False), metavar='[+][-]seek',
                        help="start at <seek> bytes abs. (or +: rel.) infile offset.")
    parser.add_argument('-u', dest='uppercase', action='store_true',
                        help="use upper case hex letters.")
    parser.add_argument('-v', '-version', action='version', version=VERSION,
                        help="show version: \"%s\"." % VERSION)
    parser.add_argument('--debug', action='store_true',
                        help="log diagnostics to stderr.")
    parser.add_argument('infile', nargs='?', default=None,
                        help="input file, '-' or missing for standard input.")
    parser.add_argument('outfile', nargs='?', default=None,
                        help="output file, missing for standard output.")
    return parser


def resolve_options(args, color=False):
    """Turn parsed arguments into the immutable Options used for the run."""
    group_size = args.group_size
    if group_size is None:
        group_size = DEFAULT_LITTLE_ENDIAN_GROUP_SIZE if args.little_endian else DEFAULT_GROUP_SIZE
    group_size = min(max(group_size, 1), MAX_GROUP_SIZE)

    columns = args.cols
    if columns is not None:
        columns = max(1, columns)

    seek, seek_relative = args.seek
    return Options(
        columns=columns,
        group_size=group_size,
        little_endian=args.little_endian,
        uppercase=args.uppercase,
        bits=args.bits,
        postscript=args.postscript,
        include=args.include,
        include_name=args.name,
        capitalize=args.capitalize,
        length=args.length,
        offset=args.offset,
        seek=seek,
        seek_relative=seek_relative,
        autoskip=args.autoskip,
        decimal=args.decimal,
        color=color,
    )


def _report(console, message):
    console.print("[!] %s" % message, style="yellow", markup=False, highlight=False)


def _open_input(path):
    if path is None or path == '-':
        return sys.stdin.buffer, False
    return open(path, 'rb'), True


def _open_output(path):
    if path is None or path == '-':
        return sys.stdout, False
    return open(path, 'w', encoding='utf-8', newline=''), True


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(verbose=args.debug)
    console = Console(stderr=True)

    if args.revert:
        _report(console, UnsupportedOperationError("Reverting a hex dump"))
        return 1

    try:
        infile, close_in = _open_input(args.infile)
    except OSError as e:
        _report(console, "Could not open %s: %s" % (args.infile, e.strerror or e))
        return 1

    try:
        outfile, close_out = _open_output(args.outfile)
    except OSError as e:
        _report(console, "Could not create %s: %s" % (args.outfile, e.strerror or e))
        if close_in:
            infile.close()
        return 1

    color = args.color.resolve(Console(file=outfile).is_terminal)
    options = resolve_options(args, color)
    logger.debug("Resolved options: %s", options)

    try:
        dump(infile, outfile, options)
        outfile.flush()
    except BrokenPipeError:
        # the reader went away; silence the flush at interpreter exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 1
    except FatalError as e:
        _report(console, e)
        return 1
    except OSError as e:
        _report(console, "Write failed: %s" % (e.strerror or e))
        return 1
    finally:
        if close_in:
            infile.close()
        if close_out:
            outfile.close()
    return 0
