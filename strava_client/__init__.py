"""Typed client for the Strava v3 REST API."""

from .activity_types import ActivityType, SportType
from .client import StravaClient
from .context import RequestContext
from .errors import (
    StravaAPIError,
    StravaCancelledError,
    StravaConfigError,
    StravaDecodeError,
    StravaError,
    StravaPaymentRequiredError,
    StravaPermissionError,
    StravaResourceNotFoundError,
    StravaTransportError,
)
from .models import NewActivity, UpdatableActivity, UpdatableAthlete
from .params import ListActivityCommentsOptions, ListAthleteActivitiesOptions, PageParams
from .transport import Transport, TransportConfig

__all__ = [
    "ActivityType",
    "SportType",
    "StravaClient",
    "RequestContext",
    "StravaError",
    "StravaConfigError",
    "StravaTransportError",
    "StravaCancelledError",
    "StravaAPIError",
    "StravaPermissionError",
    "StravaPaymentRequiredError",
    "StravaResourceNotFoundError",
    "StravaDecodeError",
    "NewActivity",
    "UpdatableActivity",
    "UpdatableAthlete",
    "PageParams",
    "ListAthleteActivitiesOptions",
    "ListActivityCommentsOptions",
    "Transport",
    "TransportConfig",
]
