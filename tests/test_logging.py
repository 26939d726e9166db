"""Tests for target_docs.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from target_docs.logging import configure_logging, get_logger


def test_get_logger_nests_under_package_logger() -> None:
    assert get_logger().name == "target_docs"
    assert get_logger("generator").name == "target_docs.generator"


def test_configure_logging_does_not_stack_handlers() -> None:
    configure_logging()
    logger = configure_logging(verbose=True)
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_configure_logging_quiet_limits_console(tmp_path: Path) -> None:
    log_file = tmp_path / "target-docs.log"
    logger = configure_logging(quiet=True, log_file=log_file)

    console, file_handler = logger.handlers
    assert console.level == logging.WARNING
    assert file_handler.level == logging.INFO

    get_logger("generator").info("wrote pages")
    file_handler.flush()
    assert "INFO target_docs.generator: wrote pages" in log_file.read_text(encoding="utf-8")
    file_handler.close()
