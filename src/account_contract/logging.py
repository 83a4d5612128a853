"""Structured logging configuration.

Console output for interactive runs, JSON lines for CI and log aggregation.
Logs go to stderr so stdout stays free for the run report.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from account_contract.constants import LogContext


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Tag every entry with the verifier's app name."""
    event_dict.setdefault("app", LogContext.APP_NAME)
    return event_dict


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(part in lowered for part in LogContext.SENSITIVE_KEY_PARTS)


def mask_sensitive_data(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask account passwords and credentials before rendering.

    Emails stay visible so a failing run can be traced to its test account.
    """
    for key in [k for k in event_dict if _is_sensitive(k)]:
        event_dict[key] = LogContext.MASK
    return event_dict


def configure_logging(log_format: str = "console", level: int = logging.INFO) -> None:
    """Configure structured logging for the verifier.

    - console: Human-readable output
    - json: JSON-formatted logs for CI pipelines
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        mask_sensitive_data,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors = [*shared_processors, structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors = [*shared_processors, structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a configured structured logger.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("scenario_passed", scenario="happy_path")
    """
    return structlog.get_logger(name)
