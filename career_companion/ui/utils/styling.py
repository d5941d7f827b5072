"""
Custom CSS styling for the Streamlit application.

This module provides consistent styling for the board, cards and chat.
"""

import html

import streamlit as st

from ...tracker.models import Application, ApplicationStatus

STATUS_COLORS = {
    ApplicationStatus.DISCOVERY: "#14b8a6",
    ApplicationStatus.APPLIED: "#3b82f6",
    ApplicationStatus.INTERVIEW: "#a855f7",
    ApplicationStatus.OFFER: "#22c55e",
    ApplicationStatus.REJECTED: "#ef4444",
}

def apply_custom_css():
    """Apply custom CSS styling to the Streamlit application."""

    st.markdown("""
    <style>
    .stDeployButton {
        display: none !important;
    }

    .main .block-container {
        padding-top: 1rem !important;
        padding-bottom: 2rem !important;
        max-width: 1400px;
    }

    /* Application header */
    .app-header {
        background: linear-gradient(135deg, #0f766e 0%, #1e3a8a 100%);
        color: white;
        padding: 1.5rem 2rem;
        border-radius: 10px;
        margin-bottom: 1.5rem;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1);
    }

    .app-header h1 {
        margin: 0;
        font-size: 2rem;
        font-weight: 700;
    }

    .app-header p {
        margin: 0.25rem 0 0 0;
        opacity: 0.9;
    }

    /* Kanban */
    .kanban-header {
        padding: 0.5rem 0.75rem;
        border-radius: 8px;
        font-weight: 600;
        color: white;
        margin-bottom: 0.75rem;
    }

    .app-card {
        padding: 0.75rem;
        border-radius: 8px;
        border: 1px solid rgba(128, 128, 128, 0.25);
        margin-bottom: 0.5rem;
    }

    .app-card img {
        width: 32px;
        height: 32px;
        border-radius: 6px;
        float: right;
    }

    .app-card .title {
        font-weight: 600;
    }

    .app-card .meta {
        font-size: 0.85rem;
        opacity: 0.75;
    }

    /* Metric cards */
    .metric-card {
        padding: 1rem;
        border-radius: 10px;
        box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
        text-align: center;
        margin-bottom: 1rem;
    }

    .metric-value {
        font-size: 1.75rem;
        font-weight: 700;
        margin: 0;
    }

    .metric-label {
        font-size: 0.8rem;
        margin: 0.25rem 0 0 0;
        text-transform: uppercase;
        letter-spacing: 0.5px;
        opacity: 0.8;
    }

    .fit-score {
        font-size: 2.5rem;
        font-weight: 700;
    }

    .fit-high { color: #16a34a; }
    .fit-mid { color: #d97706; }
    .fit-low { color: #dc2626; }

    .stButton > button {
        border-radius: 8px;
        font-weight: 500;
    }
    </style>
    """, unsafe_allow_html=True)

def create_metric_card(value, label, value_class=""):
    """Create a styled metric card."""

    return f"""
    <div class="metric-card">
        <div class="metric-value {value_class}">{value}</div>
        <div class="metric-label">{label}</div>
    </div>
    """

def create_column_header(status: ApplicationStatus, count: int) -> str:
    color = STATUS_COLORS[status]
    return f'<div class="kanban-header" style="background:{color}">{status.value} · {count}</div>'

def create_application_card(app: Application) -> str:
    """Card body for one application; user-supplied text is escaped."""
    score = ""
    if app.fit_analysis is not None:
        score = f" · Fit {app.fit_analysis.fit_score}%"
    return f"""
    <div class="app-card">
        <img src="{html.escape(app.logo, quote=True)}" alt="">
        <div class="title">{html.escape(app.title)}</div>
        <div class="meta">{html.escape(app.company)}</div>
        <div class="meta">{html.escape(app.location)}{score}</div>
    </div>
    """

def fit_score_class(score: int) -> str:
    if score >= 75:
        return "fit-high"
    if score >= 50:
        return "fit-mid"
    return "fit-low"
