"""
Logging setup for the command line, plus a queue bridge for editors that
embed the toolkit and want scanner/search/spell-check messages in their
own console pane.
"""
from __future__ import annotations

import logging
from queue import Queue
from typing import Optional

PACKAGE_LOGGER = "tex_toolkit"
LOG_FORMAT = "%(message)s"
VERBOSE_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Install the root handler used by `tex-toolkit`.

    Quiet mode prints bare WARNING+ messages (skipped files, corrupt
    ignore lists). Verbose mode adds DEBUG detail tagged with the
    emitting module.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=VERBOSE_FORMAT if verbose else LOG_FORMAT,
        force=True,
    )


class QueueLogHandler(logging.Handler):
    """
    Forward records to a queue as (message, level_name) pairs.

    Consoles usually only style INFO/WARNING/ERROR, so DEBUG records are
    relabelled INFO.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level_name = "INFO" if record.levelno == logging.DEBUG else record.levelname
            self.log_queue.put((self.format(record), level_name))
        except Exception:
            self.handleError(record)


def attach_queue_handler(
    log_queue: Queue,
    logger_name: Optional[str] = PACKAGE_LOGGER,
    level: int = logging.INFO,
) -> QueueLogHandler:
    """
    Start forwarding `logger_name` records at `level` or above to `log_queue`.

    The logger's own level is lowered if it would otherwise filter those
    records out before they reach the handler.

    Returns:
        The handler, to pass to detach_queue_handler() later
    """
    target = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue, level)
    target.addHandler(handler)
    if target.getEffectiveLevel() > level:
        target.setLevel(level)
    return handler


def detach_queue_handler(
    handler: QueueLogHandler,
    logger_name: Optional[str] = PACKAGE_LOGGER,
) -> None:
    """Stop forwarding records through `handler`."""
    logging.getLogger(logger_name).removeHandler(handler)
