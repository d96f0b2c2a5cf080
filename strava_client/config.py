"""Central configuration for the Strava API client.

All values are constants imported by the rest of the package. Secrets are read
from environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Strava settings
# ---------------------------------------------------------------------------
# Base Strava API URL. Every endpoint path is joined onto this value.
STRAVA_BASE_URL = os.getenv("STRAVA_BASE_URL", "https://www.strava.com/api/v3")

# Bearer token used when a client is built from the environment. Acquiring
# and refreshing it is the caller's job. Do not hardcode secrets.
STRAVA_ACCESS_TOKEN = os.getenv("STRAVA_ACCESS_TOKEN", "")


# ---------------------------------------------------------------------------
# HTTP settings
# ---------------------------------------------------------------------------
# Request timeout in seconds, used when a call carries no deadline.
REQUEST_TIMEOUT = _env_float("STRAVA_REQUEST_TIMEOUT", 15.0)

# HTTP session pool sizes for concurrent requests.
HTTP_POOL_CONNECTIONS = _env_int("STRAVA_HTTP_POOL_CONNECTIONS", 20)
HTTP_POOL_MAXSIZE = _env_int("STRAVA_HTTP_POOL_MAXSIZE", 20)
