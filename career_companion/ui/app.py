"""
Main Streamlit Application for the Career Companion job tracker.

This is the entry point for the web interface: the kanban dashboard, resume
and preferences pages, the guide, and the assistant chat in the sidebar.

Run with: streamlit run career_companion/ui/app.py
"""

import streamlit as st

from career_companion.tracker import Tab
from career_companion.ui.components import (
    ChatPanel,
    DashboardTab,
    GuideTab,
    PreferencesTab,
    ResumePageTab,
    render_tour,
)
from career_companion.ui.utils.session import init_session_state
from career_companion.ui.utils.styling import apply_custom_css

st.set_page_config(
    page_title="Career Companion",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded"
)

TAB_LABELS = {
    Tab.DASHBOARD: "📊 Dashboard",
    Tab.RESUME: "📄 Resume",
    Tab.PREFERENCES: "🧭 Preferences",
    Tab.GUIDE: "📘 Guide",
}

def main():
    """Main application entry point."""
    init_session_state()
    apply_custom_css()

    st.markdown("""
    <div class="app-header">
        <h1>🎯 Career Companion</h1>
        <p>Track your applications and let AI help you land the job</p>
    </div>
    """, unsafe_allow_html=True)

    if not st.session_state.tour_completed:
        render_tour()

    view_state = st.session_state.view_state
    tabs = list(TAB_LABELS)
    choice = st.radio(
        "Navigation",
        tabs,
        index=tabs.index(view_state.active_tab),
        format_func=TAB_LABELS.get,
        horizontal=True,
        label_visibility="collapsed",
    )
    view_state.active_tab = choice

    if choice is Tab.DASHBOARD:
        DashboardTab().render()
    elif choice is Tab.RESUME:
        ResumePageTab().render()
    elif choice is Tab.PREFERENCES:
        PreferencesTab().render()
    else:
        GuideTab().render()

    with st.sidebar:
        ChatPanel().render()

if __name__ == "__main__":
    main()
