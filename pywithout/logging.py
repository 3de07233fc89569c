"""
Logging for pywithout.

The package logs under ``pywithout`` and never attaches handlers on
import. Blocks and unblocks are logged at INFO; scrubbed cache entries,
hook moves and every intercepted import at DEBUG.
"""

import logging
import sys

LOGGER_NAME = "pywithout"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(LOGGER_NAME)


class PyWithoutFormatter(logging.Formatter):
    """``level | logger | message``, optionally prefixed by a timestamp."""

    def __init__(self, include_timestamp: bool = True):
        fmt = "%(levelname)-8s | %(name)s | %(message)s"
        if include_timestamp:
            super().__init__(fmt=f"%(asctime)s | {fmt}", datefmt=TIMESTAMP_FORMAT)
        else:
            super().__init__(fmt=fmt)


def configure_logging(
    level: int = logging.WARNING,
    handler: logging.Handler | None = None,
    format_timestamps: bool = True,
) -> logging.Logger:
    """
    Send pywithout log records to ``handler`` (stderr by default).

    Calling this again replaces the handler set by the previous call.
    ``Blocker.enable_from_settings`` calls it with ``PYWITHOUT_LOG_LEVEL``.

    Example:
        configure_logging(logging.DEBUG)  # show every blocked import
    """
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(PyWithoutFormatter(include_timestamp=format_timestamps))
    handler.setLevel(level)

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the pywithout logger, e.g. ``get_logger("hook")``."""
    return logger.getChild(name)


hook_logger = get_logger("hook")
blocker_logger = get_logger("blocker")
scrubber_logger = get_logger("scrubber")
