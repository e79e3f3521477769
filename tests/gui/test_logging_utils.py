"""Tests for GUI logging utilities."""

import logging
import sys
import threading
from queue import Queue

import pytest

from class_registration.gui.utils.logging_utils import (
    PACKAGE_LOGGER,
    QueueLogHandler,
    attach_queue_handler,
    configure_logging,
    detach_queue_handler,
    install_exception_hooks,
)


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    old_level = logger.level
    old_handlers = list(logger.handlers)
    logger.setLevel(logging.DEBUG)
    yield logger
    logger.setLevel(old_level)
    logger.handlers = old_handlers


class TestQueueLogHandler:
    def test_records_forwarded_with_level(self, package_logger):
        q = Queue()
        handler = attach_queue_handler(q)
        try:
            logging.getLogger("class_registration.submission.gateway").warning("Submission failed")
        finally:
            detach_queue_handler(handler)

        assert q.get_nowait() == ("Submission failed", "WARNING")

    def test_debug_records_shown_as_info(self):
        q = Queue()
        handler = QueueLogHandler(q, level=logging.DEBUG)
        record = logging.LogRecord("x", logging.DEBUG, __file__, 1, "details", None, None)
        handler.emit(record)
        assert q.get_nowait() == ("details", "INFO")

    def test_detach_stops_forwarding(self, package_logger):
        q = Queue()
        handler = attach_queue_handler(q)
        detach_queue_handler(handler)

        package_logger.info("after detach")

        assert q.empty()


class TestConfigureLogging:
    def test_idempotent(self, package_logger):
        configure_logging()
        configure_logging()
        streams = [h for h in package_logger.handlers if getattr(h, "_registration_stream", False)]
        assert len(streams) == 1
        assert package_logger.level == logging.INFO


class TestExceptionHooks:
    def test_uncaught_exceptions_logged(self, package_logger, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        monkeypatch.setattr(threading, "excepthook", threading.excepthook)
        q = Queue()
        handler = attach_queue_handler(q)
        try:
            install_exception_hooks()
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                sys.excepthook(*sys.exc_info())
        finally:
            detach_queue_handler(handler)

        message, level = q.get_nowait()
        assert level == "CRITICAL"
        assert message.startswith("Unhandled exception")

    def test_thread_exceptions_logged(self, package_logger, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.excepthook)
        monkeypatch.setattr(threading, "excepthook", threading.excepthook)
        q = Queue()
        handler = attach_queue_handler(q)
        try:
            install_exception_hooks()

            def worker():
                raise ValueError("worker failed")

            thread = threading.Thread(target=worker, name="test-worker")
            thread.start()
            thread.join()
        finally:
            detach_queue_handler(handler)

        message, level = q.get_nowait()
        assert level == "CRITICAL"
        assert "test-worker" in message
