"""
User interface module for the Career Companion job tracker.

This module provides the Streamlit web interface. Components are imported
by ``app.py``; nothing is imported here so the domain packages stay usable
without Streamlit loaded.
"""

__all__ = []
