"""Streamlit viewer for the markdown presenter."""
