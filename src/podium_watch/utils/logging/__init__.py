# ABOUTME: Logging configuration, progress tracking, and output formatting
# ABOUTME: Provides rich console output and structured logging for the CLI

from .config import LoggingMode, configure_logging, detect_logging_mode, get_logging_status
from .progress import ProgressReporter
from .utils import LogContext, generate_operation_id, get_logger, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "detect_logging_mode",
    "get_logging_status",
    # Progress Reporting
    "ProgressReporter",
    # Utilities
    "LogContext",
    "generate_operation_id",
    "get_logger",
    "with_pipeline_context",
]
