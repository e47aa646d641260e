# Copyright (c) 2026 Itameter
# SPDX-License-Identifier: MIT

"""structlog configuration for Itameter."""

from __future__ import annotations

import logging
from typing import Optional

import structlog

from itameter.config import get_settings


def setup_logging(log_level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """Configure structlog output.

    Args:
        log_level: Override the level from settings (e.g. "DEBUG")
        json: Override ``log_json`` from settings. JSON output is meant for
            services that embed the library; the console renderer is the
            default for local use.
    """
    settings = get_settings()
    level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    use_json = settings.log_json if json is None else json

    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

    get_logger(__name__).debug("Logging configured", level=level_name, json=use_json)


def get_logger(name: str):
    """Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        structlog logger instance
    """
    return structlog.get_logger(name)
