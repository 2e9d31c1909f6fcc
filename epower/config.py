"""
Runtime configuration for E-Power.

Settings are read from the process environment, optionally populated from a
local `.env` file. The Google Generative AI key is mandatory; the app refuses
to start without it.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from epower.errors import ConfigurationError
from epower.jobs import DEFAULT_MAX_WORKERS

DEFAULT_MODEL = "gemini-2.5-flash"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    api_key: str
    model_name: str = DEFAULT_MODEL
    log_level: str = "INFO"
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls, env=None, dotenv=True):
        """Build settings from `env` (defaults to os.environ).

        GOOGLE_API_KEY takes precedence over the older API_KEY name.
        """
        if dotenv:
            load_dotenv()
        if env is None:
            env = os.environ

        api_key = env.get("GOOGLE_API_KEY") or env.get("API_KEY")
        if not api_key:
            raise ConfigurationError("API_KEY environment variable not set")

        return cls(
            api_key=api_key,
            model_name=env.get("EPOWER_MODEL") or DEFAULT_MODEL,
            log_level=(env.get("EPOWER_LOG_LEVEL") or "INFO").upper(),
            max_workers=_positive_int(env.get("EPOWER_MAX_WORKERS"), DEFAULT_MAX_WORKERS),
        )


def _positive_int(value, default):
    if not value:
        return default
    try:
        number = int(value)
    except ValueError as e:
        raise ConfigurationError(f"Expected a positive integer, got {value!r}") from e
    if number < 1:
        raise ConfigurationError(f"Expected a positive integer, got {value!r}")
    return number


def configure_logging(level="INFO"):
    """Send log records to the console; later calls are no-ops."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
