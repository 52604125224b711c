# ABOUTME: Logger utilities with context binding for structured logging
# ABOUTME: Provides get_logger and a timed LogContext used by the CLI pipeline

import sys
import time
import uuid

import structlog


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after ``name`` or, when omitted, the calling module."""
    if name is None:
        name = sys._getframe(1).f_globals.get("__name__")
    return structlog.get_logger(name or "podium_watch")


def generate_operation_id() -> str:
    """Short random id used to correlate the events of one CLI run."""
    return uuid.uuid4().hex[:8]


class LogContext:
    """Bind ``context`` to a logger for a block and report how the block ended.

    A failing block logs one error with the exception type and message, then
    lets the exception propagate. A clean exit logs the elapsed time at debug level.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger, **context):
        self.bound_logger = logger.bind(**context)
        self.started_at = 0.0

    def __enter__(self) -> structlog.stdlib.BoundLogger:
        self.started_at = time.perf_counter()
        return self.bound_logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = round((time.perf_counter() - self.started_at) * 1000, 1)
        if exc_type is None:
            self.bound_logger.debug("Operation finished", duration_ms=duration_ms)
        else:
            self.bound_logger.error(
                "Operation failed", error=str(exc_val), error_type=exc_type.__name__, duration_ms=duration_ms
            )


def with_pipeline_context(pipeline_name: str, **context) -> LogContext:
    """Create a LogContext tagged with the pipeline name and a fresh operation id."""
    return LogContext(get_logger(), pipeline=pipeline_name, operation_id=generate_operation_id(), **context)
