# ABOUTME: Logging configuration, progress tracking, and output formatting
# ABOUTME: Provides rich console output and structured logging for the pipeline

from .config import LoggingMode, configure_logging, get_logging_status, suppress_library_output
from .progress import PageProgressTracker, create_page_progress
from .utils import get_logger, log_api_call, log_extraction_step, with_pipeline_context

__all__ = [
    # Configuration
    "LoggingMode",
    "configure_logging",
    "get_logging_status",
    "suppress_library_output",
    # Progress
    "PageProgressTracker",
    "create_page_progress",
    # Utilities
    "get_logger",
    "log_api_call",
    "log_extraction_step",
    "with_pipeline_context",
]
