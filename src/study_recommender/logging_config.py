"""structlog setup shared by the application entry points."""

import logging
import os

import structlog


def is_production() -> bool:
    return os.getenv("ENV", "development").lower() == "production"


def configure_logging(production: bool | None = None) -> None:
    """Configure structlog.

    Production renders JSON at INFO and above; development renders
    colored console output at DEBUG.

    Args:
        production: Force a mode. Defaults to the ``ENV`` environment variable.
    """
    if production is None:
        production = is_production()

    if production:
        renderer = structlog.processors.JSONRenderer()
        level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        level = logging.DEBUG

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
