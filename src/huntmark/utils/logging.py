"""Structured logging setup for huntmark."""

import structlog
from pathlib import Path
from typing import Any, TextIO
import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# One append handle per log file. Cached loggers keep writing to the handle
# they were built with, so handles stay open for the life of the process.
_log_files: dict[Path, TextIO] = {}


def configure_logging(log_dir: Path | None = None) -> Path:
    """
    Configure structlog for JSON logging to ~/.cache/huntmark/logs/huntmark.log.

    Log level can be controlled via HUNTMARK_LOG_LEVEL environment variable:
    - Set to "DEBUG" to see per-token parser details
    - Defaults to "INFO" if not set

    Log levels:
    - DEBUG: Unknown handwriting styles, typewriter ticks, config overrides
    - INFO: CLI commands, config loading, editor saves
    - WARNING: Parser circuit breaker tripped (output truncated)
    - ERROR: Config validation failures, unreadable input files

    Args:
        log_dir: Directory for the log file (default: ~/.cache/huntmark/logs)

    Returns:
        Path of the log file

    Example:
        # Enable debug logging
        HUNTMARK_LOG_LEVEL=DEBUG huntmark parse riddle.txt

        # View logs with jq for readability:
        tail -f ~/.cache/huntmark/logs/huntmark.log | jq .
    """
    if log_dir is None:
        log_dir = Path.home() / ".cache" / "huntmark" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "huntmark.log"

    log_level = os.environ.get("HUNTMARK_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=_open_log_file(log_file)),
        cache_logger_on_first_use=True,
    )
    return log_file


def _open_log_file(log_file: Path) -> TextIO:
    """Return the shared append handle for a log file, opening it on first use."""
    key = log_file.resolve()
    handle = _log_files.get(key)
    if handle is None or handle.closed:
        handle = open(key, "a", encoding="utf-8")
        _log_files[key] = handle
    return handle


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Returns:
        Structured logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("render_started", blocks=12)
    """
    return structlog.get_logger(name)
