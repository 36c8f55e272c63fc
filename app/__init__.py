"""Streamlit rendering layer for the Free Recall Dashboard."""
