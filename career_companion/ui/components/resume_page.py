"""
Resume and Career Preferences tabs for the Career Companion.

The resume text feeds every AI feature; the preferences text is given to
the chat assistant so job searches are tailored.
"""

import streamlit as st

from ...documents import SUPPORTED_UPLOAD_TYPES, UploadedFile, read_document_text
from ..utils.session import run_async, save_preferences, save_resume

class ResumePageTab:
    """Edit, upload and save the resume text."""

    def __init__(self):
        self.assistant = st.session_state.get('assistant')

    def render(self):
        st.markdown("### 📄 My Resume")
        st.caption(
            "Keep your resume text updated here. The AI uses this content to analyze job "
            "descriptions and generate tailored application materials for you."
        )

        if 'resume_draft' not in st.session_state:
            st.session_state.resume_draft = st.session_state.resume

        uploaded = st.file_uploader(
            "Upload a resume (.txt, .md, .pdf, .docx)",
            type=SUPPORTED_UPLOAD_TYPES,
            key="resume_upload",
        )
        if uploaded is not None and st.session_state.get('resume_upload_name') != uploaded.name:
            self._load_upload(uploaded)

        draft = st.text_area(
            "Resume text",
            key="resume_draft",
            height=420,
            placeholder="Paste your resume here...",
        )

        has_changes = draft != st.session_state.resume
        if st.button("💾 Save Resume", disabled=not has_changes):
            save_resume(draft)
            st.success("Resume saved")

    def _load_upload(self, uploaded):
        upload = UploadedFile(name=uploaded.name, data=uploaded.getvalue(), mime_type=uploaded.type)
        with st.spinner(f"Reading {uploaded.name}..."):
            result = run_async(read_document_text(upload, self.assistant))
        st.session_state.resume_upload_name = uploaded.name
        if result.success:
            st.session_state.resume_draft = result.data
            st.info("File loaded. Review the text and save it.")
        else:
            st.error(result.error)

class PreferencesTab:
    """Free-text career preferences used by the chat assistant."""

    def render(self):
        st.markdown("### 🧭 Career Preferences")
        st.caption(
            "Describe the roles, locations, salary range and industries you are looking for. "
            "The assistant uses this when searching for jobs."
        )
        text = st.text_area(
            "Preferences",
            value=st.session_state.preferences,
            height=240,
            placeholder="e.g. Senior frontend roles, remote or NYC, fintech or climate tech...",
        )
        if st.button("💾 Save Preferences", disabled=text == st.session_state.preferences):
            save_preferences(text)
            st.success("Preferences saved")
