"""structlog setup. Logs go to stderr so stdout stays free for callers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from pkglens.config import LoggingSettings


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # sys.stderr looked up per logger so redirected streams are honoured
    return structlog.PrintLogger(sys.stderr)


def configure_logging(settings: LoggingSettings) -> None:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if settings.format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[settings.level]
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )
