"""Streamlit dashboard for the ROI projector."""
