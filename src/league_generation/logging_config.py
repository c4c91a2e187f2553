"""
Logging Configuration for League Generation

Sets up the root logger once per process:
- Colored console output
- Rotating log files (main INFO+, debug DEBUG+, error ERROR+)
- Per-subsystem levels for the generators and the sampling core

Usage Example:
    import logging

    from league_generation.logging_config import setup_logging

    setup_logging(level="INFO", log_dir="logs")

    logger = logging.getLogger(__name__)
    logger.info("Generation started")

Log Files Created:
- logs/league_generation.log: Main log (INFO+)
- logs/league_generation_debug.log: Debug log (DEBUG+)
- logs/league_generation_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backups.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "league_generation"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


def _rotating_handler(log_dir: str, suffix: str, level: int, log_format: str,
                      max_bytes: int, backup_count: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Configure the root logger. Call once at startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to the console
        enable_file: Whether to write rotating log files
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of rotated files to keep
        format_style: "detailed" or "simple" format for the main log
    """
    numeric_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        main_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

        root_logger.addHandler(_rotating_handler(log_dir, "", logging.INFO, main_format,
                                                 max_bytes, backup_count))
        root_logger.addHandler(_rotating_handler(log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT,
                                                 max_bytes, backup_count))
        root_logger.addHandler(_rotating_handler(log_dir, "_error", logging.ERROR, DETAILED_FORMAT,
                                                 max_bytes, backup_count))

    root_logger.debug(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with traceback and key=value context.

    Example:
        >>> try:
        ...     generator.generate_complete_league(country, config)
        ... except ConfigurationError as e:
        ...     log_exception(logger, e, context={"country": "GB", "seed": 42})
    """
    context_str = ""
    if context:
        context_str = f" [{', '.join(f'{k}={v}' for k, v in context.items())}]"

    logger.log(
        getattr(logging, level.upper()),
        f"Exception occurred{context_str}: {type(exception).__name__}: {exception}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """Set the level (and propagation) of one module's logger."""
    logger = logging.getLogger(module_name)
    if level:
        logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = propagate
    return logger


class LogContext:
    """
    Context manager for a temporary log level.

    Example:
        >>> with LogContext(logging.getLogger("league_generation.naming"), "DEBUG"):
        ...     generator.generate_divisions(country, config)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


# Subsystem presets

def setup_generator_logging(level: str = "INFO") -> None:
    """Level for the team, player, stadium and league generators."""
    configure_module_logger("league_generation.generators", level=level)


def setup_naming_logging(level: str = "INFO") -> None:
    """
    Level for name resolution.

    Suffix fallbacks are logged at DEBUG; use level="DEBUG" to see every
    name that needed one.
    """
    configure_module_logger("league_generation.naming", level=level)

