"""
Logging utilities: queue forwarding for the GUI activity log and
process-wide hooks for uncaught exceptions.
"""
from __future__ import annotations

import logging
import sys
import threading
from queue import Queue
from typing import Optional

PACKAGE_LOGGER = "class_registration"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends log records to a queue.

    Used to capture package logs and display them in the GUI console.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            # Map DEBUG to INFO for GUI display
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = PACKAGE_LOGGER) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger.

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    logger.addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = PACKAGE_LOGGER) -> None:
    """Remove a QueueLogHandler from the specified logger."""
    logging.getLogger(logger_name).removeHandler(handler)


def configure_logging(level: int = logging.INFO) -> None:
    """Send package logs to stderr. Safe to call more than once."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(getattr(h, "_registration_stream", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._registration_stream = True
        logger.addHandler(handler)


def install_exception_hooks() -> None:
    """
    Log uncaught exceptions from the UI thread and from worker threads.

    Qt swallows exceptions raised inside slots after printing them, so
    routing them through logging makes them visible in the activity log.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    original_excepthook = sys.excepthook

    def excepthook(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            original_excepthook(exc_type, exc_value, exc_tb)
            return
        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))

    def thread_excepthook(args):
        thread_name = args.thread.name if args.thread else "Unknown"
        logger.critical(
            f"Unhandled exception in thread '{thread_name}'",
            exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = excepthook
    threading.excepthook = thread_excepthook
