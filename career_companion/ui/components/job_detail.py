"""
Job Detail Panel for the Career Companion.

This module renders one application with its AI tools: fit analysis, the
application builder (cover letter, resume bullets, outreach pitch),
interview prep and company research. Each tool has its own spinner and an
inline retry when it fails.
"""

import streamlit as st

from ...tracker import Application, ContentType
from ...tracker.workbench import WorkbenchAction
from ..utils.session import run_async
from ..utils.styling import fit_score_class

BUILDER_SECTIONS = [
    (ContentType.COVER_LETTER, "Cover Letter"),
    (ContentType.RESUME_BULLETS, "Resume Bullet Points"),
    (ContentType.OUTREACH_PITCH, "Outreach Pitch"),
]

class JobDetailPanel:
    """Detail view for a single application."""

    def __init__(self, application: Application):
        self.app = application
        self.workbench = st.session_state.get('workbench')
        self.view_state = st.session_state.get('view_state')

    def render(self):
        header, close = st.columns([6, 1])
        with header:
            st.markdown(f"### {self.app.title}")
            st.caption(f"{self.app.company} · {self.app.location} · {self.app.status.value}")
        with close:
            if st.button("✖ Close", key="close_detail"):
                self.view_state.clear_selection()
                st.rerun()

        left, right = st.columns([1, 1])
        with left:
            st.markdown("#### Job Description")
            st.markdown(self.app.description or "_No description_")
            if self.app.url and self.app.url != "#":
                st.link_button("View Posting", self.app.url)

        with right:
            self._render_analysis()
            st.markdown("#### Application Builder")
            for content_type, title in BUILDER_SECTIONS:
                self._render_generator(content_type, title)
            self._render_interview_prep()
            self._render_research()

    def _render_error(self, action: WorkbenchAction, retry_label: str = "Retry") -> bool:
        error = self.workbench.error_for(self.app.id, action)
        if not error:
            return False
        st.error(error)
        return st.button(retry_label, key=f"retry_{action.value}_{self.app.id}")

    def _render_analysis(self):
        st.markdown("#### Fit Analysis")
        retry = self._render_error(WorkbenchAction.ANALYSIS)
        analysis = self.app.fit_analysis

        if analysis is not None and not retry:
            score_class = fit_score_class(analysis.fit_score)
            st.markdown(
                f'<div class="fit-score {score_class}">{analysis.fit_score}%</div>',
                unsafe_allow_html=True,
            )
            st.write(analysis.summary)
            pros, cons = st.columns(2)
            with pros:
                st.markdown("**Strengths**")
                for item in analysis.pros:
                    st.markdown(f"- {item}")
            with cons:
                st.markdown("**Potential Gaps**")
                for item in analysis.cons:
                    st.markdown(f"- {item}")

        label = "Re-analyze" if analysis is not None else "Analyze My Fit"
        if retry or st.button(label, key=f"analyze_{self.app.id}"):
            with st.spinner("Analyzing your fit..."):
                run_async(self.workbench.analyze_fit(self.app.id))
            st.rerun()

    def _render_generator(self, content_type: ContentType, title: str):
        action = WorkbenchAction.for_content(content_type)
        content = self.app.content(content_type)

        with st.expander(title, expanded=bool(content)):
            retry = self._render_error(action)
            if content:
                st.markdown(content)
                improve = st.button("✨ Improve", key=f"improve_{content_type.value}_{self.app.id}")
                if improve or retry:
                    with st.spinner(f"Improving {title.lower()}..."):
                        run_async(self.workbench.improve(self.app.id, content_type))
                    st.rerun()
            else:
                generate = st.button("Generate", key=f"generate_{content_type.value}_{self.app.id}")
                if generate or retry:
                    with st.spinner(f"Generating {title.lower()}..."):
                        run_async(self.workbench.generate(self.app.id, content_type))
                    st.rerun()

    def _render_interview_prep(self):
        prep = self.app.content(ContentType.INTERVIEW_PREP)
        with st.expander("Interview Prep", expanded=prep is not None):
            retry = self._render_error(WorkbenchAction.INTERVIEW_PREP)
            if prep is not None:
                for index, item in enumerate(prep.questions, start=1):
                    st.markdown(f"**{index}. {item.question}**  \n_{item.type}_")
                    st.caption(f"Tip: {item.tip}")
            label = "Regenerate Questions" if prep is not None else "Generate Questions"
            if retry or st.button(label, key=f"interview_{self.app.id}"):
                with st.spinner("Preparing interview questions..."):
                    run_async(self.workbench.prepare_interview(self.app.id))
                st.rerun()

    def _render_research(self):
        research = self.workbench.research_for(self.app.id)
        with st.expander(f"Research {self.app.company}", expanded=research is not None):
            retry = self._render_error(WorkbenchAction.RESEARCH)
            if research:
                st.markdown(research)
            if retry or st.button("Research Company", key=f"research_{self.app.id}"):
                with st.spinner(f"Researching {self.app.company}..."):
                    run_async(self.workbench.research_company(self.app.id))
                st.rerun()
