"""Logging setup for processes that embed sidebyside.

The package itself only obtains loggers; the host process calls
setup_logging() once at startup.
"""

import logging
import sys

from sidebyside.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request logs from the HTTP stack would drown the GSA fetch logs.
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: int | None = None) -> None:
    """Configure root logging to stdout.

    Args:
        level: Explicit log level; defaults to DEBUG when settings.debug is
            True, otherwise INFO.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
