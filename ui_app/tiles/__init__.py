"""Streamlit tiles."""
