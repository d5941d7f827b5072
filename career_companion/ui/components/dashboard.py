"""
Dashboard Tab Component for the Career Companion.

This module provides the kanban board with filters, pipeline metrics and
per-card status changes, plus the detail panel for the selected card.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from ...tracker import STATUS_COLUMNS, ApplicationStatus, DashboardFilters
from ..utils.session import save_filters
from ..utils.styling import (
    STATUS_COLORS,
    create_application_card,
    create_column_header,
    create_metric_card,
    fit_score_class,
)
from .job_detail import JobDetailPanel

ALL_STATUSES = "All Statuses"

def _reset_filters():
    st.session_state.filter_status = ALL_STATUSES
    st.session_state.filter_company = ""
    st.session_state.filter_location = ""
    save_filters(DashboardFilters())

class DashboardTab:
    """Dashboard tab component for the main application interface."""

    def __init__(self):
        """Initialize the dashboard tab."""
        self.repository = st.session_state.get('repository')
        self.view_state = st.session_state.get('view_state')

    def render(self):
        """Render the dashboard tab content."""
        self._render_filters()
        self._render_add_job()

        applications = self.repository.all()
        filtered = self.view_state.filtered(applications)

        self._render_key_metrics(filtered)

        selected = self.view_state.selected(applications)
        if selected is not None:
            JobDetailPanel(selected).render()
            st.divider()

        self._render_board(applications)

    def _render_filters(self):
        filters = self.view_state.filters
        options = [ALL_STATUSES] + [status.value for status in STATUS_COLUMNS]

        if 'filter_status' not in st.session_state:
            st.session_state.filter_status = filters.status if filters.status in options else ALL_STATUSES
            st.session_state.filter_company = filters.company
            st.session_state.filter_location = filters.location

        col1, col2, col3, col4 = st.columns([2, 2, 2, 1])
        with col1:
            status = st.selectbox("Status", options, key="filter_status")
        with col2:
            company = st.text_input("Company", placeholder="Company...", key="filter_company")
        with col3:
            location = st.text_input("Location", placeholder="Location...", key="filter_location")
        with col4:
            st.write("")
            st.button("Reset Filters", width="stretch", on_click=_reset_filters)

        new_filters = DashboardFilters(
            status="" if status == ALL_STATUSES else status,
            company=company,
            location=location,
        )
        if new_filters != filters:
            save_filters(new_filters)

    def _render_add_job(self):
        with st.expander("➕ Add Job"):
            with st.form("add_job", clear_on_submit=True):
                col1, col2 = st.columns(2)
                with col1:
                    title = st.text_input("Job Title", key="new_job_title")
                    company = st.text_input("Company", key="new_job_company")
                with col2:
                    location = st.text_input("Location", key="new_job_location")
                    url = st.text_input("Posting URL", key="new_job_url")
                description = st.text_area("Job Description", height=160)

                if st.form_submit_button("Add to Discovery Hub", width="stretch"):
                    if not title.strip() or not company.strip():
                        st.warning("Job title and company are required")
                        return
                    app = self.repository.add({
                        "title": title.strip(),
                        "company": company.strip(),
                        "location": location.strip(),
                        "description": description.strip(),
                        "url": url.strip(),
                    })
                    self.view_state.select(app.id)
                    st.rerun()

    def _render_key_metrics(self, applications):
        counts = self.view_state.status_counts(applications)
        total = sum(counts.values())
        scored = [app.fit_analysis.fit_score for app in applications if app.fit_analysis is not None]
        avg_score = round(sum(scored) / len(scored)) if scored else None
        avg_fit = f"{avg_score}%" if avg_score is not None else "-"
        avg_class = fit_score_class(avg_score) if avg_score is not None else ""

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.markdown(create_metric_card(total, "Tracked Jobs"), unsafe_allow_html=True)
        with col2:
            st.markdown(create_metric_card(counts[ApplicationStatus.APPLIED.value], "Applied"), unsafe_allow_html=True)
        with col3:
            st.markdown(create_metric_card(counts[ApplicationStatus.INTERVIEW.value], "Interviews"), unsafe_allow_html=True)
        with col4:
            st.markdown(create_metric_card(avg_fit, "Average Fit", avg_class), unsafe_allow_html=True)

        if total:
            with st.expander("📊 Pipeline Overview"):
                df = pd.DataFrame({"Status": list(counts.keys()), "Applications": list(counts.values())})
                fig = px.bar(
                    df,
                    x="Status",
                    y="Applications",
                    color="Status",
                    color_discrete_map={s.value: STATUS_COLORS[s] for s in STATUS_COLUMNS},
                )
                fig.update_layout(height=280, showlegend=False)
                st.plotly_chart(fig, width="stretch")

    def _render_board(self, applications):
        columns = self.view_state.board_columns(applications)
        st_columns = st.columns(len(columns))
        status_values = [status.value for status in STATUS_COLUMNS]

        for st_col, (status, apps) in zip(st_columns, columns.items()):
            with st_col:
                st.markdown(create_column_header(status, len(apps)), unsafe_allow_html=True)
                if not apps:
                    st.caption("No applications")
                for app in apps:
                    st.markdown(create_application_card(app), unsafe_allow_html=True)
                    new_status = st.selectbox(
                        "Move to",
                        status_values,
                        index=status_values.index(app.status.value),
                        key=f"status_{app.id}",
                        label_visibility="collapsed",
                    )
                    if new_status != app.status.value:
                        self.repository.set_status(app.id, ApplicationStatus(new_status))
                        st.rerun()
                    if st.button("Open", key=f"open_{app.id}", width="stretch"):
                        self.view_state.select(app.id)
                        st.rerun()
