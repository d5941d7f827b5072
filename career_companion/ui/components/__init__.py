"""
UI Components module for the Career Companion.

This module contains the Streamlit components for the user interface.
"""

from .dashboard import DashboardTab
from .job_detail import JobDetailPanel
from .resume_page import ResumePageTab, PreferencesTab
from .chat_panel import ChatPanel
from .guide import GuideTab, render_tour

__all__ = [
    'DashboardTab',
    'JobDetailPanel',
    'ResumePageTab',
    'PreferencesTab',
    'ChatPanel',
    'GuideTab',
    'render_tour'
]
