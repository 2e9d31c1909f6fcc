"""
Per-session UI state and its transitions.

The functions operate on any mutable mapping: `st.session_state` in the app,
a plain dict in tests. Keys:

- location: free-text location
- consumption: the active CsvConsumption or ImageConsumption
- file_name: name shown in the file picker
- result: last AnalysisResult, or None
- error: last user-facing error message, or None
- job: pending AnalysisJob, or None
- result_location: location the last result was requested for
"""

import logging
from concurrent.futures import CancelledError
from enum import Enum

from epower.advisor import MISSING_INPUT_MESSAGE
from epower.errors import AnalysisError, FileReadError, UnsupportedFileError
from epower.inputs import SAMPLE_FILE_NAME, ConsumptionLoader
from epower.jobs import AnalysisJob

logger = logging.getLogger(__name__)

DEFAULT_LOCATION = "Nairobi, Kenya"

READ_ERROR_MESSAGE = "Failed to read the file."
UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please upload a CSV or an image (JPEG, PNG, WEBP)."
CANCELLED_MESSAGE = "The analysis was cancelled."


class Phase(Enum):
    """UI state of the analysis request."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


def init_session(state):
    """Seed missing keys; existing values survive reruns."""
    state.setdefault("location", DEFAULT_LOCATION)
    state.setdefault("consumption", ConsumptionLoader.sample())
    state.setdefault("file_name", SAMPLE_FILE_NAME)
    state.setdefault("result", None)
    state.setdefault("error", None)
    state.setdefault("job", None)
    state.setdefault("result_location", None)


def set_location(state, value):
    """Store the location exactly as typed."""
    state["location"] = value


def select_file(state, uploaded):
    """Replace the consumption input with an uploaded file.

    A read failure falls back to the sample data; an unsupported type keeps the
    previous selection. Both set a user-facing error.
    """
    if uploaded is None:
        return

    try:
        consumption = ConsumptionLoader.read(uploaded)
    except UnsupportedFileError as e:
        logger.warning("Rejected upload: %s", e)
        state["error"] = UNSUPPORTED_FILE_MESSAGE
        return
    except FileReadError as e:
        logger.warning("Falling back to sample data: %s", e)
        state["consumption"] = ConsumptionLoader.sample()
        state["file_name"] = SAMPLE_FILE_NAME
        state["error"] = READ_ERROR_MESSAGE
        return

    logger.info("Selected %s input %r", consumption.kind, uploaded.name)
    state["consumption"] = consumption
    state["file_name"] = uploaded.name
    state["error"] = None


def is_loading(state):
    """True while an analysis job is pending."""
    return state.get("job") is not None


def can_submit(state):
    """True when the submit button should be active."""
    location = state.get("location") or ""
    return not is_loading(state) and bool(location.strip()) and state.get("consumption") is not None


def analysis_phase(state):
    """Derive the current Phase from the session keys."""
    if is_loading(state):
        return Phase.SUBMITTING
    if state.get("result") is not None:
        return Phase.SUCCESS
    if state.get("error"):
        return Phase.ERROR
    return Phase.IDLE


def submit_analysis(state, executor, advisor):
    """Start an analysis job. Returns False when nothing was submitted."""
    if is_loading(state):
        logger.info("Ignoring submit while an analysis is pending")
        return False

    location = state.get("location") or ""
    if not location.strip() or state.get("consumption") is None:
        state["error"] = MISSING_INPUT_MESSAGE
        return False

    state["error"] = None
    state["result"] = None
    state["job"] = AnalysisJob.submit(executor, advisor, state["consumption"], location)
    return True


def collect_analysis(state):
    """Wait for the pending job and store its result or error."""
    job = state.get("job")
    if job is None:
        return analysis_phase(state)

    try:
        state["result"] = job.result()
        state["result_location"] = job.location
    except AnalysisError as e:
        state["error"] = str(e)
    except CancelledError:
        state["error"] = CANCELLED_MESSAGE
    finally:
        state["job"] = None
    return analysis_phase(state)


def cancel_analysis(state):
    """Cancel a queued job. Returns False if none is pending or it already runs."""
    job = state.get("job")
    if job is None or not job.cancel():
        return False
    state["job"] = None
    return True
