from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
stderr-only console output and log file rotation.
"""

import logging
import sys
import time
from pathlib import Path

import pytest

from filez_mcp.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from filez_mcp.infra.logging.core import _QUEUE_LISTENER_ATTR
from filez_mcp.infra.logging.handlers import _HANDLER_TAG_ATTR


@pytest.fixture(autouse=True)
def reset_logging() -> None:
    """Clean up our root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _our_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == initial == 1


def test_force_reconfigures() -> None:
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_queue_listener_architecture() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_console_targets_stderr() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    streams = [getattr(h, "stream", None) for h in listener.handlers]
    assert sys.stderr in streams
    assert sys.stdout not in streams


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "server.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("filez_mcp.test").warning("Error accessing /r/x: denied")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "Error accessing /r/x: denied" in content
    assert "WARNING" in content


def test_log_rotation(tmp_path: Path) -> None:
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(level="DEBUG", console=False, log_file=str(log_file), max_bytes=100, backup_count=1)

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    time.sleep(0.5)
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_unwritable_log_file_keeps_console(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    configure_logging(LoggingConfig(level="INFO", console=True, log_file=str(blocker / "sub" / "a.log")))

    listener = getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR)
    assert len(listener.handlers) == 1
