"""Streamlit dashboard for the SynthData API."""
