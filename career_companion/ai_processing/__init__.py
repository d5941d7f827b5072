"""
AI Processing module for the Career Companion job tracker.

This module provides Gemini integration and the AI-powered features.
"""

from .llm_manager import (
    LLMManager,
    LLMProvider,
    LLMRequest,
    LLMResponse,
    GeminiProvider,
    Part,
    Source,
    get_llm_manager,
    reset_llm_manager
)

from .results import (
    AIErrorKind,
    AIParseError,
    AIResult,
    AIServiceError,
    PARSE_ERROR_MESSAGE
)

from .career_assistant import (
    BotReply,
    CareerAssistant,
    ExtractedJob,
    FAILURE_MESSAGES
)

__all__ = [
    'LLMManager',
    'LLMProvider',
    'LLMRequest',
    'LLMResponse',
    'GeminiProvider',
    'Part',
    'Source',
    'get_llm_manager',
    'reset_llm_manager',
    'AIErrorKind',
    'AIParseError',
    'AIResult',
    'AIServiceError',
    'PARSE_ERROR_MESSAGE',
    'BotReply',
    'CareerAssistant',
    'ExtractedJob',
    'FAILURE_MESSAGES'
]
