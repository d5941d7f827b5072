"""Session and styling helpers for the Streamlit UI."""
