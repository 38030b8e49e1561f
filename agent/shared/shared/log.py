"""structlog setup shared by the service entry points."""

from __future__ import annotations

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "INFO", stderr: bool = False) -> None:
    """Configure structlog for JSON output on stdout, or stderr if asked.

    The MCP stdio server and the CLI log to stderr because stdout carries
    protocol frames or command output.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=_stderr_logger if stderr else structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
