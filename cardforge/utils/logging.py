"""
Logging utilities for Card Forge.
"""

import logging
import sys
from typing import Optional

import structlog

# Run on records from plain ``logging`` loggers before they reach the renderer.
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
]


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a standard library logger instance.

    Records from these loggers are rendered by structlog once
    :func:`configure_logging` has run.

    Args:
        name: Logger name. Defaults to the package logger

    Returns:
        A standard library logger
    """
    return logging.getLogger(name or "cardforge")


def configure_logging(log_level: str = "WARNING", json_output: bool = False) -> None:
    """
    Configure structlog and route the package logger through it.

    Safe to call more than once; the handler installed by a previous call is
    replaced rather than duplicated.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render one JSON object per line instead of console text
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json_output:
        # Tracebacks must be plain strings before they can be serialised
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.dev.ConsoleRenderer(colors=False)]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderers],
    )

    # Diagnostics go to stderr so piped CLI output stays clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler.set_name("cardforge")

    package_logger = logging.getLogger("cardforge")
    for existing in list(package_logger.handlers):
        if existing.get_name() == "cardforge":
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
