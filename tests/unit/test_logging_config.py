"""Tests for logging setup."""

from __future__ import annotations

import logging
import sys

import pytest

from gitlab_mcp_server.logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _stderr_handlers(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if getattr(h, "stream", None) is sys.stderr]


def test_logs_to_stderr(root_logger):
    setup_logging("DEBUG")
    assert root_logger.level == logging.DEBUG
    assert len(_stderr_handlers(root_logger)) == 1
    assert not [h for h in root_logger.handlers if getattr(h, "stream", None) is sys.stdout]


def test_idempotent(root_logger):
    setup_logging("INFO")
    setup_logging("info")
    assert len(_stderr_handlers(root_logger)) == 1
    assert root_logger.level == logging.INFO


def test_quiets_httpx_above_debug(root_logger):
    setup_logging("WARNING")
    assert logging.getLogger("httpx").level == logging.WARNING
