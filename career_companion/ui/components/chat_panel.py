"""
Chat Panel Component for the Career Companion assistant.

Renders the conversation with a search box, the citation list with a save
button per source, and the message input. Input is disabled while a
request is outstanding.
"""

import streamlit as st

from ...chat import ChatMode, MessageRole, SaveState
from ..utils.session import run_async

class ChatPanel:
    """Sidebar chat with the Career Companion assistant."""

    def __init__(self):
        self.chat = st.session_state.get('chat')
        self.save_tracker = st.session_state.get('save_tracker')

    def render(self):
        st.markdown("### 💬 Career Companion")
        st.caption("Paste a job link to import it, ask me to analyze a job, or search for openings.")

        query = st.text_input("Search conversation", key="chat_search", placeholder="Search conversation...")
        messages = self.chat.search(query) if query else self.chat.messages

        for index, message in enumerate(messages):
            role = "user" if message.role is MessageRole.USER else "assistant"
            with st.chat_message(role):
                st.markdown(message.text)
                if message.sources:
                    self._render_sources(index, message.sources)

        if self.chat.mode is ChatMode.AWAITING_JOB_DESCRIPTION:
            st.info("Waiting for a job description...")

        prompt = st.chat_input("Ask me anything...", disabled=self.chat.is_busy)
        if prompt:
            with st.spinner("Thinking..."):
                run_async(self.chat.send(prompt))
            st.rerun()

    def _render_sources(self, index, sources):
        st.markdown("**Sources**")
        for source in sources:
            col1, col2 = st.columns([3, 2])
            with col1:
                st.markdown(f"[{source.title}]({source.uri})")
            with col2:
                button = self.save_tracker.button(source.uri)
                clicked = st.button(
                    button.label,
                    key=f"save_{index}_{source.uri}",
                    disabled=button.disabled,
                )
                if clicked:
                    with st.spinner("Saving..."):
                        run_async(self.save_tracker.save(source))
                    st.rerun()
            if self.save_tracker.state(source.uri) is SaveState.ERROR:
                st.caption(f"⚠️ {self.save_tracker.error(source.uri)}")
