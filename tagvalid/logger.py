"""Structured logging setup for the validation engine."""

import logging
from typing import Optional

import structlog

from tagvalid.config import get_settings


def configure_logging(level: Optional[str] = None, debug: Optional[bool] = None) -> None:
    """Install the structlog processor chain.

    Args:
        level: Log level name (debug, info, warning...). Defaults to settings.
        debug: Console renderer when True, JSON lines otherwise. Defaults to settings.
    """
    settings = get_settings()
    level = level or settings.LOG_LEVEL
    debug = settings.DEBUG if debug is None else debug

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )
