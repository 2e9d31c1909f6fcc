"""
Background execution of analysis requests.

An `AnalysisJob` wraps the future of a single `EnergyAdvisor.analyze` call so
the page can keep it in the session across Streamlit reruns, wait on it and
cancel it if it has not started yet.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def create_executor(max_workers=DEFAULT_MAX_WORKERS):
    """Executor shared by all sessions of the server process.

    Each session holds at most one job, so `max_workers` bounds how many
    sessions can wait on the model at the same time.
    """
    return ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="epower-analysis")


class AnalysisJob:
    """
    One submitted analysis and the location it was requested for.

    Methods:
    - submit: Schedules EnergyAdvisor.analyze on an executor.
    - done: Tells whether the analysis has finished.
    - cancel: Cancels the analysis if it has not started.
    - result: Waits for the analysis result.
    """

    def __init__(self, future, location):
        self.future = future
        self.location = location

    @classmethod
    def submit(cls, executor, advisor, consumption, location):
        """Schedule one analyze call and wrap its future."""
        logger.info("Submitting %s analysis for %r", consumption.kind, location)
        return cls(executor.submit(advisor.analyze, consumption, location), location)

    def done(self):
        """Return True once the analysis has finished, failed or been cancelled."""
        return self.future.done()

    def cancel(self):
        """Cancel the job if it is still queued. Returns False once it is running."""
        cancelled = self.future.cancel()
        if cancelled:
            logger.info("Cancelled analysis for %r", self.location)
        return cancelled

    def result(self, timeout=None):
        """Block until the analysis finishes; re-raises its AnalysisError."""
        return self.future.result(timeout=timeout)
