"""Structured logging configuration for repoinit.

structlog is layered over the standard library so that GitPython's own
loggers flow through the same handler:

- Pretty console output by default
- JSON output when ``REPOINIT_LOG_FORMAT=json``
- Level from ``REPOINIT_LOG_LEVEL`` unless overridden by the caller

Usage:
    from repoinit.logging import configure_logging, get_logger

    configure_logging()

    log = get_logger(__name__)
    log.info("repository_initialized", kind="git", path="/tmp/project")
"""

from __future__ import annotations

import logging
import os
import sys

import structlog
from structlog.types import Processor

__all__ = [
    "get_logger",
    "configure_logging",
]

LOG_FORMAT_ENV_VAR = "REPOINIT_LOG_FORMAT"

LOG_LEVEL_ENV_VAR = "REPOINIT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level() -> int:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.WARNING)


def _is_json_output() -> bool:
    return os.environ.get(LOG_FORMAT_ENV_VAR, "").lower() == "json"


def _get_shared_processors() -> list[Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    force_json: bool = False,
    level: int | None = None,
) -> None:
    """Configure structlog and the root stdlib logger.

    Safe to call more than once; each call replaces the previous handler.

    Args:
        force_json: Emit JSON lines regardless of ``REPOINIT_LOG_FORMAT``.
        level: Override log level. If None, reads ``REPOINIT_LOG_LEVEL``.
    """
    use_json = force_json or _is_json_output()
    log_level = level if level is not None else _get_log_level()

    renderer: Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        )

    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *([structlog.processors.dict_tracebacks] if use_json else []),
                renderer,
            ],
            foreign_pre_chain=_get_shared_processors(),
        )
    )
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        A bound structlog logger.

    Example:
        log = get_logger(__name__)
        log.debug("git_discovery_failed", path=str(path))
    """
    log: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return log
