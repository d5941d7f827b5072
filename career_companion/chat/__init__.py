"""
Chat assistant for the Career Companion job tracker.

This module provides the conversation controller, message history and the
per-citation save tracker used to import jobs found in chat.
"""

from .controller import (
    ChatController,
    ChatIntent,
    ChatMode,
    classify_input,
    format_fit_analysis,
    is_job_url
)
from .messages import GREETING, Message, MessageHistory, MessageRole
from .save_tracker import (
    InvalidSaveTransition,
    SaveButton,
    SaveState,
    SourceSaveTracker
)

__all__ = [
    'ChatController',
    'ChatIntent',
    'ChatMode',
    'classify_input',
    'format_fit_analysis',
    'is_job_url',
    'GREETING',
    'Message',
    'MessageHistory',
    'MessageRole',
    'InvalidSaveTransition',
    'SaveButton',
    'SaveState',
    'SourceSaveTracker'
]
