"""Core services and utilities for Cisadex."""

from .logging import (
    LogContext,
    bind_contextvars,
    clear_contextvars,
    get_logger,
    log_engine_operation,
    log_exception,
    setup_logging,
    unbind_contextvars,
)

__all__ = [
    "LogContext",
    "bind_contextvars",
    "clear_contextvars",
    "get_logger",
    "log_engine_operation",
    "log_exception",
    "setup_logging",
    "unbind_contextvars",
]
