"""structlog setup shared by the library and the CLI.

Library modules call ``get_logger(__name__)`` at import time; the CLI calls
``configure_logging()`` once before dispatching a command. Until structlog
is configured (here or by the host application), library loggers only
emit warnings and errors, on stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog

from skipscan.config import debug_enabled

_configured = False


def configure_logging(debug: bool | None = None, force: bool = False) -> None:
    """Configure structlog to write to stderr.

    Args:
        debug: Force DEBUG level on/off. None = read SKIPSCAN_DEBUG.
        force: Reconfigure even if logging was already configured.
    """
    global _configured
    if _configured and not force:
        return

    if debug is None:
        debug = debug_enabled()
    level = logging.DEBUG if debug else logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def _unconfigured_logger():
    return structlog.wrap_logger(
        structlog.PrintLogger(file=sys.stderr),
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )


class LibraryLogger:
    """Logger handle that defers to structlog once it is configured.

    structlog's defaults print every level to stdout, which would mix
    debug events into a caller's output. Before configuration, events go
    through a WARNING-level logger on stderr instead.
    """

    def __init__(self, name: str | None = None):
        self._name = name

    def _resolve(self):
        if structlog.is_configured():
            return structlog.get_logger(self._name)
        return _unconfigured_logger()

    def __getattr__(self, attr: str):
        return getattr(self._resolve(), attr)


def get_logger(name: str | None = None) -> LibraryLogger:
    return LibraryLogger(name)
