# ABOUTME: Logging configuration using loguru for file and stdout sinks
# ABOUTME: Dual-mode operation: interactive CLI vs production JSON logging

import contextlib
import io
import logging
import os
import sys
from pathlib import Path
from typing import Any

from loguru import logger

LOG_DIR = Path("logs")

SUPPRESSED_LOGGERS = [
    "crawl4ai",
    "crawl4ai.async_webcrawler",
    "crawl4ai.async_crawler_strategy",
    "playwright",
    "undetected_chromedriver",
]

WARNING_LOGGERS = ["httpx", "httpcore", "urllib3", "asyncio", "websockets", "aiohttp"]


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("ROCKET_LINEUPS_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Keep browser automation and HTTP client chatter out of the CLI."""
    for logger_name in SUPPRESSED_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.CRITICAL)

    for logger_name in WARNING_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    logger.remove()

    if mode == LoggingMode.INTERACTIVE:
        try:
            LOG_DIR.mkdir(exist_ok=True)
        except OSError:
            # No writable log directory, fall back to stdout
            mode = LoggingMode.PRODUCTION

    if mode == LoggingMode.PRODUCTION:
        logger.add(sys.stdout, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)
        return

    log_file_path = log_file or str(LOG_DIR / "rocket-lineups.log")

    # Human-readable logs
    logger.add(
        log_file_path,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation="10 MB",
        retention="7 days",
    )

    # JSON logs for machine processing
    logger.add(
        LOG_DIR / "rocket-lineups.json",
        level=log_level,
        format="{time} | {level} | {name} | {message}",
        serialize=True,
        rotation="10 MB",
        retention="7 days",
    )

    # Errors only
    logger.add(
        LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status."""
    mode = detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": str(LOG_DIR / "rocket-lineups.log") if interactive else None,
            "json": str(LOG_DIR / "rocket-lineups.json") if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": ["crawl4ai", "playwright", "httpx", "urllib3", "py.warnings"],
    }


@contextlib.contextmanager
def suppress_library_output():
    """Context manager to completely suppress stdout/stderr from noisy libraries."""
    original_stdout, original_stderr = sys.stdout, sys.stderr

    try:
        sys.stdout = sys.stderr = io.StringIO()
        yield
    finally:
        sys.stdout, sys.stderr = original_stdout, original_stderr
