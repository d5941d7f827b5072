"""
Logging configuration and utilities for the Career Companion job tracker.

This module provides structured logging with file rotation and context
fields (application id, AI operation, chat mode) for the various components.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from datetime import datetime
import json


class StructuredFormatter(logging.Formatter):
    """Custom formatter that outputs structured logs with context."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured information."""
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, default=str)

class ColoredConsoleFormatter(logging.Formatter):
    """Colored console formatter for better readability."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format with colors for console output."""
        color = self.COLORS.get(record.levelname, '')
        timestamp = datetime.fromtimestamp(record.created).strftime('%H:%M:%S')

        formatted = f"{color}[{timestamp}] {record.levelname:8} {record.name:20} | {record.getMessage()}{self.RESET}"

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted

class CompanionLogger:
    """Logger wrapper that attaches context fields to every record."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.context: Dict[str, Any] = {}

    def set_context(self, **kwargs) -> None:
        """Set context fields that will be included in all log messages."""
        self.context.update(kwargs)

    def clear_context(self) -> None:
        """Clear all context fields."""
        self.context.clear()

    def _log_with_context(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        extra_fields = {**self.context, **kwargs}
        extra = {"extra_fields": extra_fields} if extra_fields else {}
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def debug(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log an error with the active exception's traceback."""
        self._log_with_context(logging.ERROR, message, exc_info=True, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        self._log_with_context(logging.CRITICAL, message, **kwargs)

    def operation_started(self, operation: str, **kwargs) -> None:
        """Log the start of an AI operation."""
        self.info(f"Started {operation}", operation=operation, **kwargs)

    def operation_failed(self, operation: str, error: str, **kwargs) -> None:
        """Log a failed AI operation."""
        self.error(f"{operation} failed: {error}", operation=operation, **kwargs)

def setup_logging(config: Optional[Any] = None) -> None:
    """Setup logging configuration for the application."""
    if config is None:
        from ..config.settings import get_config
        config = get_config()

    level = getattr(logging, str(config.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    if config.log_to_file:
        log_dir = Path(config.data_dir) / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / "app.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            log_dir / "errors.log",
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(error_handler)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.info("Logging system initialized")

def get_logger(name: str) -> CompanionLogger:
    """Get a logger instance with context support."""
    return CompanionLogger(name)

# Component-specific loggers
def get_ai_logger() -> CompanionLogger:
    """Get logger for AI orchestration components."""
    return get_logger("ai_processing")

def get_chat_logger() -> CompanionLogger:
    """Get logger for the chat assistant."""
    return get_logger("chat")

def get_tracker_logger() -> CompanionLogger:
    """Get logger for the application tracker."""
    return get_logger("tracker")

def get_ui_logger() -> CompanionLogger:
    """Get logger for UI components."""
    return get_logger("ui")
