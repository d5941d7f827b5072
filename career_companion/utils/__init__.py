"""
Utility modules for the Career Companion job tracker.

This package provides logging helpers shared by every component.
"""

from .logger import (
    setup_logging,
    get_logger,
    get_ai_logger,
    get_chat_logger,
    get_tracker_logger,
    get_ui_logger,
    CompanionLogger,
    StructuredFormatter
)

__all__ = [
    'setup_logging',
    'get_logger',
    'get_ai_logger',
    'get_chat_logger',
    'get_tracker_logger',
    'get_ui_logger',
    'CompanionLogger',
    'StructuredFormatter'
]
