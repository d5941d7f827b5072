"""
Guide tab and onboarding tour for the Career Companion.
"""

import streamlit as st

from ..utils.session import complete_tour

TOUR_STEPS = [
    ("Welcome to Your AI Job Search Companion!",
     "This quick tour will show you how to get the most out of the app. Let's get started!"),
    ("The Kanban Board",
     "This is your mission control. All your job applications are organized by status. "
     "Use the selector under each card to move it between columns."),
    ("Your Resume",
     "Open the Resume tab to add or update your resume. The AI uses this text to analyze jobs "
     "and generate content for you, so keeping it updated is key!"),
    ("AI-Powered Insights",
     "Open any job card to see its details. Inside, use \"Analyze My Fit\" to see how well you "
     "match the job description."),
    ("Application Builder",
     "In the same detail view, the Application Builder can generate tailored cover letters, "
     "resume bullet points, and outreach pitches to speed up your application process."),
    ("You're All Set!",
     "That's it! You're ready to supercharge your job search. Good luck!"),
]

def render_tour():
    """Step through the onboarding tour until it is finished or skipped."""
    step = st.session_state.setdefault('tour_step', 0)
    title, content = TOUR_STEPS[step]

    with st.container(border=True):
        st.markdown(f"#### {title}")
        st.write(content)
        st.caption(f"Step {step + 1} of {len(TOUR_STEPS)}")

        col1, col2, col3 = st.columns([1, 1, 4])
        with col1:
            if st.button("Back", disabled=step == 0, key="tour_back"):
                st.session_state.tour_step = step - 1
                st.rerun()
        with col2:
            last = step == len(TOUR_STEPS) - 1
            if st.button("Finish" if last else "Next", key="tour_next"):
                if last:
                    complete_tour()
                else:
                    st.session_state.tour_step = step + 1
                st.rerun()
        with col3:
            if st.button("Skip tour", key="tour_skip"):
                complete_tour()
                st.rerun()

class GuideTab:
    """Static how-to for the main workflows."""

    def render(self):
        st.markdown("### 📘 Guide")
        for title, content in TOUR_STEPS[1:-1]:
            st.markdown(f"**{title}**")
            st.write(content)
        st.markdown("**Importing Jobs**")
        st.write(
            "Paste a job posting link into the assistant chat and it will be added to your "
            "Discovery Hub. Ask the assistant to find jobs and save any listing it cites."
        )
        if st.button("Restart tour"):
            st.session_state.tour_completed = False
            st.session_state.tour_step = 0
            st.rerun()
