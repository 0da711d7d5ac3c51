"""Streamlit view layer for the segment composer."""
