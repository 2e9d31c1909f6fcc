"""
This script is the Streamlit front end of E-Power, an AI energy advisor.
It collects smart-meter readings (CSV) or a photo of an electricity bill plus
the user's location, asks Google's Generative AI for a structured analysis and
renders the reply as an action plan, appliance cards and a renewable forecast.

Modules Used:
- streamlit: For building the interactive web app.
- pandas: For parsing the consumption preview.
- plotly: For the consumption and forecast charts.
- google.generativeai: For the AI analysis (through epower.advisor).
- python-dotenv: For reading the API key from a local .env file.

Run with: streamlit run streamlit_app/EPower.py
"""

import logging
import os

import streamlit as st

from epower.advisor import EnergyAdvisor
from epower.config import Settings, configure_logging
from epower.controls import render_inputs, render_preview
from epower.errors import ConfigurationError
from epower.jobs import create_executor
from epower.render import LOADING_MESSAGE, render_results
from epower.session import collect_analysis, init_session, is_loading

logger = logging.getLogger(__name__)

CSS_PATH = os.path.join(os.path.dirname(__file__), "custom.css")


def load_custom_css(css_file_path):
    """Return the page stylesheet, or an empty string when it is missing."""
    try:
        with open(css_file_path, "r") as css_file:
            return css_file.read()
    except FileNotFoundError:
        logger.warning("CSS file not found at: %s", css_file_path)
        return ""


@st.cache_resource
def get_advisor(settings):
    """One Gemini client per process and settings."""
    return EnergyAdvisor(settings)


@st.cache_resource
def get_executor(max_workers):
    """Worker pool shared by every browser session of this server."""
    return create_executor(max_workers)


def main():
    """
    Main entry point for the E-Power page.

    Loads settings, collects the inputs, runs the analysis job and renders the
    result or the last error.
    """
    st.set_page_config(page_title="E-Power", page_icon="⚡", layout="wide")
    st.title("⚡ E-Power")
    custom_styles = load_custom_css(CSS_PATH)
    if custom_styles:
        st.markdown(f"<style>{custom_styles}</style>", unsafe_allow_html=True)

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        st.error(str(e))
        st.stop()
    configure_logging(settings.log_level)

    state = st.session_state
    init_session(state)
    advisor = get_advisor(settings)
    executor = get_executor(settings.max_workers)

    st.header("Get Your Personalized Energy Analysis")
    st.write(
        "Upload your smart meter data (CSV) or a picture of your bill to receive "
        "AI-powered recommendations."
    )

    render_inputs(state, executor, advisor)

    if state.error:
        st.error(state.error)

    render_preview(state.consumption, state.file_name)

    if is_loading(state):
        with st.spinner(LOADING_MESSAGE):
            collect_analysis(state)
        # Redraw with the button enabled again and the result or error shown
        st.rerun()

    if state.result is not None:
        render_results(state.result, state.result_location or state.location)


if __name__ == "__main__":
    main()
