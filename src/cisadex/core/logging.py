"""Logging setup for the entity engine.

Every module logs through structlog with snake_case event names and keyword
fields. setup_logging() installs one stdout handler on the root logger whose
ProcessorFormatter renders both structlog events and plain stdlib records,
as JSON in production and as console lines everywhere else.
"""
# ruff: noqa: ARG001  # structlog processors take (logger, method_name, event_dict)

import logging
import sys
from collections.abc import Mapping
from contextvars import Token
from typing import Any, Literal

import structlog
from structlog.types import EventDict, Processor

from cisadex.config.settings import get_settings
from cisadex.utils.exceptions import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_LEVEL_NAMES = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def add_environment_info(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Stamp each event with the deployment environment."""
    event_dict["environment"] = get_settings().environment
    return event_dict


def _resolve_level(log_level: str | None) -> int:
    name = (log_level or get_settings().log_level).upper()
    if name not in _LEVEL_NAMES:
        raise ConfigurationError(f"Unknown log level: {name}", details={"log_level": name})
    return logging.getLevelName(name)


def _event_chain(add_timestamp: bool) -> list[Processor]:
    chain: list[Processor] = []
    if add_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso"))
    chain += [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_environment_info,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    return chain


def setup_logging(
    log_level: LogLevel | None = None,
    json_format: bool | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structlog and the root logger.

    Args:
        log_level: Level name; settings.log_level when None.
        json_format: JSON lines; defaults to True only in production.
        add_timestamp: Prefix events with an ISO timestamp.

    Raises:
        ConfigurationError: If log_level is not a standard level name.
    """
    level = _resolve_level(log_level)
    if json_format is None:
        json_format = get_settings().environment == "production"

    chain = _event_chain(add_timestamp)
    renderer: Processor
    if json_format:
        chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    # Rendering happens once, in the root handler's formatter
    structlog.configure(
        processors=[*chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a module; pass __name__."""
    return structlog.get_logger(name)


class LogContext:
    """Bind context fields for the duration of a with block.

    Fields bound by an enclosing block are restored on exit, not dropped.

    Example:
        with LogContext(snapshot="2026-10", zoom_level=5):
            engine.search(criteria)  # search events carry both fields
    """

    def __init__(self, **fields: Any) -> None:
        self.fields = fields
        self._tokens: Mapping[str, Token[Any]] = {}

    def __enter__(self) -> "LogContext":
        self._tokens = structlog.contextvars.bind_contextvars(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        structlog.contextvars.reset_contextvars(**self._tokens)


def bind_contextvars(**fields: Any) -> None:
    """Attach fields to every later event in this context until unbound."""
    structlog.contextvars.bind_contextvars(**fields)


def unbind_contextvars(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_contextvars() -> None:
    structlog.contextvars.clear_contextvars()


def log_engine_operation(
    logger: structlog.stdlib.BoundLogger,
    operation: str,
    duration_ms: float,
    result_count: int,
    **fields: Any,
) -> None:
    """Record one finished query at DEBUG with its timing and result size."""
    logger.debug(
        "engine_operation",
        operation=operation,
        duration_ms=round(duration_ms, 3),
        result_count=result_count,
        **fields,
    )


def log_exception(logger: structlog.stdlib.BoundLogger, exc: Exception, **fields: Any) -> None:
    """Log exc with its type and message, plus the active traceback."""
    logger.exception(
        "exception_occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        **fields,
    )
