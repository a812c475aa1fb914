"""Process-wide logging setup for the server."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure root logging to stderr at *level*.

    stdout carries the stdio transport, so nothing may be logged there.
    Idempotent: calling multiple times won't add duplicate handlers.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    stderr_handler_exists = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr
        for h in root_logger.handlers
    )
    if not stderr_handler_exists:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(handler)

    # httpx logs every request at INFO; keep it quiet unless debugging.
    if root_logger.level > logging.DEBUG:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(__name__)
