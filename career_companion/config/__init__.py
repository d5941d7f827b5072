"""
Configuration module for the Career Companion job tracker.

This module provides document persistence and application configuration.
"""

from .settings import (
    ConfigManager,
    AppConfig,
    GeminiConfig,
    get_config,
    get_gemini_config,
    validate_config,
    config_manager
)
from .store import DocumentStore, PersistedState, StoreKey, open_store

__all__ = [
    'DocumentStore',
    'PersistedState',
    'StoreKey',
    'open_store',
    'ConfigManager',
    'AppConfig',
    'GeminiConfig',
    'get_config',
    'get_gemini_config',
    'validate_config',
    'config_manager'
]
