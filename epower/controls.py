"""
Streamlit input section: file picker, location box, submit button and preview.

Widget callbacks only touch `st.session_state` through `epower.session`.
"""

import logging

import streamlit as st

from epower.charts import consumption_chart
from epower.inputs import ACCEPTED_TYPES, ConsumptionLoader
from epower.session import can_submit, is_loading, select_file, set_location, submit_analysis

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Analyze My Energy"
LOADING_LABEL = "Analyzing..."


def on_file_change():
    """Read the newly picked file into the session."""
    select_file(st.session_state, st.session_state.get("uploaded_file"))


def on_location_change():
    """Copy the committed location box value into the session."""
    set_location(st.session_state, st.session_state.get("location_input", ""))


def on_submit(executor, advisor):
    """Start an analysis from the button click."""
    # The location box may still hold an uncommitted edit when the button is clicked
    state = st.session_state
    set_location(state, state.get("location_input", state.location))
    submit_analysis(state, executor, advisor)


def render_inputs(state, executor, advisor):
    """Render the picker, the location box and the submit button in one row."""
    upload_col, location_col, button_col = st.columns(3, vertical_alignment="bottom")
    with upload_col:
        st.file_uploader(
            "📤 Smart Meter Data or Bill Image",
            type=ACCEPTED_TYPES,
            key="uploaded_file",
            on_change=on_file_change,
            help="CSV, PNG, JPG, WEBP accepted",
        )
        st.caption(f"Current file: **{state.file_name}**")
    with location_col:
        st.text_input(
            "📍 Your Location",
            value=state.location,
            key="location_input",
            on_change=on_location_change,
            placeholder="e.g., Nairobi, Kenya; Lagos, Nigeria",
        )
    with button_col:
        st.button(
            LOADING_LABEL if is_loading(state) else SUBMIT_LABEL,
            type="primary",
            use_container_width=True,
            disabled=not can_submit(state),
            on_click=on_submit,
            args=(executor, advisor),
        )


def render_preview(consumption, file_name):
    """Show what will be sent: the bill image or a chart of the CSV readings."""
    with st.expander("Preview your data", expanded=False):
        if consumption.kind == "image":
            st.image(consumption.raw_bytes(), caption=file_name)
            return
        try:
            df = ConsumptionLoader.to_frame(consumption)
            st.plotly_chart(consumption_chart(df), use_container_width=True, key="consumption_chart")
        except ValueError as e:
            logger.info("No preview for %s: %s", file_name, e)
            st.caption("This file can't be previewed, but it will still be sent for analysis.")
