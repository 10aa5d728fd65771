"""
Logging Setup - Capital Compass
compass/core/logging.py

Configures stdlib logging for the HTTP layer and structlog for the
structured events emitted by the scoring pipeline and services, at one
shared level.
"""

import logging

import structlog

from compass.config import get_settings


def configure_logging() -> None:
    """Configure stdlib logging and structlog from settings."""
    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_FORMAT == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
