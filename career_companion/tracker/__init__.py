"""
Application tracker for the Career Companion.

This module holds the application records, the repository that owns them,
and the derived dashboard views. The AI action layer lives in
``career_companion.tracker.workbench`` and is imported on demand.
"""

from .models import (
    Application,
    ApplicationStatus,
    ContentType,
    DashboardFilters,
    FitAnalysis,
    GeneratedContent,
    InterviewPrep,
    InterviewQuestion,
    Job,
    STATUS_COLUMNS,
    TEXT_CONTENT_TYPES,
    MOCK_APPLICATIONS,
    MOCK_RESUME
)
from .repository import ApplicationRepository, filter_applications, matches_filters
from .view_state import Tab, ViewState

__all__ = [
    'Application',
    'ApplicationStatus',
    'ContentType',
    'DashboardFilters',
    'FitAnalysis',
    'GeneratedContent',
    'InterviewPrep',
    'InterviewQuestion',
    'Job',
    'STATUS_COLUMNS',
    'TEXT_CONTENT_TYPES',
    'MOCK_APPLICATIONS',
    'MOCK_RESUME',
    'ApplicationRepository',
    'filter_applications',
    'matches_filters',
    'Tab',
    'ViewState'
]
