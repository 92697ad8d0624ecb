"""Logging configuration for termcal."""

import logging
import time
from contextlib import contextmanager
from typing import Generator

import structlog

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger bound to ``logger=<name>``, default ``termcal``."""
    return structlog.get_logger(logger=name or "termcal")


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure termcal logging.

    Registry writes log at info, rejected overrides and stores at warning,
    and work-day walks at debug with their elapsed time.

    Args:
        level: One of "DEBUG", "INFO", "WARNING", "ERROR".
        json_output: True for one JSON object per event, False for console
    """
    name = level.upper()
    if name not in _LEVELS:
        raise ValueError(f"Unknown log level {level!r}; expected one of {_LEVELS}")

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, name)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **fields,
) -> Generator[None, None, None]:
    """Context manager that logs how long the wrapped block took."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **fields)
