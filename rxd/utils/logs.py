import logging
import sys

LOGGER_NAME = "rxd"


def setup_logging(verbose=False, stream=None, log_format=None):
    """
    Configure the package logger.

    Diagnostics always go to stderr (or `stream`) so they never mix with
    the dump written to stdout.

    Args:
        verbose (bool): DEBUG level when True, WARNING otherwise
        stream: stream for the handler, defaults to sys.stderr
        log_format (str, optional): custom format string

    Returns:
        logging.Logger: the configured "rxd" logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if log_format is None:
        log_format = "[%(asctime)s] %(levelname)-8s %(name)s: %(message)s"

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
