"""Tests for the stderr-only logging configuration."""

import logging
import sys

import pytest

from mem0_mcp.server.logging_config import configure_logging, set_mcp_log_level


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    package_level = logging.getLogger('mem0_mcp').level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    logging.getLogger('mem0_mcp').setLevel(package_level)


def test_configure_logging_installs_single_stderr_handler(restore_root_logger):
    configure_logging('debug')
    configure_logging('debug')

    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
    assert restore_root_logger.level == logging.DEBUG


def test_configure_logging_reads_env(restore_root_logger, monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'error')
    configure_logging()
    assert restore_root_logger.level == logging.ERROR


def test_configure_logging_unknown_level_defaults_to_warning(restore_root_logger):
    configure_logging('chatty')
    assert restore_root_logger.level == logging.WARNING


@pytest.mark.parametrize("level,expected", [
    ("debug", logging.DEBUG),
    ("notice", logging.INFO),
    ("error", logging.ERROR),
    ("emergency", logging.CRITICAL),
    ("bogus", logging.WARNING),
])
def test_set_mcp_log_level(restore_root_logger, level, expected):
    assert set_mcp_log_level(level) == expected
    assert logging.getLogger('mem0_mcp').level == expected
