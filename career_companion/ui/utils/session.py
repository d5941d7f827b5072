"""
Session state management for the Streamlit application.

This module builds the domain objects once per browser session and wires the
repository to the persistent store so every change rewrites the stored
applications document.
"""

import asyncio
import copy
from typing import Any, Coroutine

import streamlit as st

from ...config import PersistedState, get_config, open_store
from ...ai_processing import CareerAssistant, get_llm_manager
from ...chat import ChatController, SourceSaveTracker
from ...tracker import ApplicationRepository, DashboardFilters, ViewState, MOCK_APPLICATIONS, MOCK_RESUME
from ...tracker.workbench import ApplicationWorkbench
from ...utils import setup_logging, get_ui_logger

def _current_resume() -> str:
    return st.session_state.get('resume', '')

def _current_preferences() -> str:
    return st.session_state.get('preferences', '')

def init_session_state():
    """Initialize all session state variables."""

    if 'logger_initialized' not in st.session_state:
        config = get_config()
        setup_logging(config)
        st.session_state.logger_initialized = True
        st.session_state.logger = get_ui_logger()

    if 'persisted' not in st.session_state:
        try:
            st.session_state.persisted = PersistedState(open_store())
            st.session_state.store_status = "connected"
        except Exception as e:
            st.session_state.logger.error(f"Document store unavailable: {e}")
            st.session_state.persisted = None
            st.session_state.store_status = f"error: {str(e)}"

    persisted = st.session_state.persisted

    if 'repository' not in st.session_state:
        if persisted is not None:
            st.session_state.repository = ApplicationRepository(
                persisted.load_applications(), on_change=persisted.save_applications
            )
            st.session_state.resume = persisted.load_resume()
            st.session_state.preferences = persisted.load_preferences()
            st.session_state.view_state = ViewState(filters=persisted.load_filters())
            st.session_state.tour_completed = persisted.has_completed_tour()
        else:
            st.session_state.repository = ApplicationRepository(copy.deepcopy(MOCK_APPLICATIONS))
            st.session_state.resume = MOCK_RESUME
            st.session_state.preferences = ""
            st.session_state.view_state = ViewState()
            st.session_state.tour_completed = True

    if 'assistant' not in st.session_state:
        st.session_state.assistant = CareerAssistant(get_llm_manager())

    repository = st.session_state.repository
    assistant = st.session_state.assistant

    if 'workbench' not in st.session_state:
        st.session_state.workbench = ApplicationWorkbench(assistant, repository, _current_resume)

    if 'chat' not in st.session_state:
        st.session_state.chat = ChatController(
            assistant, repository, _current_resume, _current_preferences
        )

    if 'save_tracker' not in st.session_state:
        st.session_state.save_tracker = SourceSaveTracker(assistant, repository)

def run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """Drive a coroutine to completion from a Streamlit callback."""
    return asyncio.run(coro)

def save_resume(text: str) -> None:
    st.session_state.resume = text
    if st.session_state.persisted is not None:
        st.session_state.persisted.save_resume(text)
    st.session_state.logger.info("Resume updated", size=len(text))

def save_preferences(text: str) -> None:
    st.session_state.preferences = text
    if st.session_state.persisted is not None:
        st.session_state.persisted.save_preferences(text)
    st.session_state.logger.info("Career preferences updated", size=len(text))

def save_filters(filters: DashboardFilters) -> None:
    st.session_state.view_state.set_filters(filters)
    if st.session_state.persisted is not None:
        st.session_state.persisted.save_filters(filters)

def complete_tour() -> None:
    st.session_state.tour_completed = True
    if st.session_state.persisted is not None:
        st.session_state.persisted.mark_tour_completed()
