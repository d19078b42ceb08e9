"""Runtime settings read from the environment.

Variables may also come from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_ROOT = "http://localhost:5000"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def get_api_root() -> str:
    """Return the base URL of the external résumé backend."""
    return (os.getenv("RESUMIFY_API_ROOT") or DEFAULT_API_ROOT).rstrip("/")


def get_generate_timeout() -> float:
    """Seconds to wait for AI generation and file extraction."""
    return _float_env("RESUMIFY_GENERATE_TIMEOUT", 30.0)


def get_request_timeout() -> float:
    """Seconds to wait for ordinary backend requests."""
    return _float_env("RESUMIFY_REQUEST_TIMEOUT", 8.0)


def get_retries() -> int:
    """Extra attempts made after a network failure."""
    return max(0, int(_float_env("RESUMIFY_RETRIES", 1)))


def get_log_level() -> str:
    return (os.getenv("RESUMIFY_LOG_LEVEL") or "INFO").upper()
