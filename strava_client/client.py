"""Facade wiring one transport into every endpoint group."""

from __future__ import annotations

from dataclasses import replace

import requests

from .activities import ActivitiesAPI
from .athletes import AthletesAPI
from .clubs import ClubsAPI
from .segments import SegmentsAPI
from .transport import Transport, TransportConfig

__all__ = ["StravaClient"]


class StravaClient:
    """Entry point: ``client.activities.get(ctx, 12345)``.

    Each endpoint group holds the same :class:`Transport`; nothing else is
    shared between calls, so one client may serve many threads as long as the
    underlying ``requests`` session does.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        *,
        access_token: str | None = None,
        session: requests.Session | None = None,
        transport: Transport | None = None,
    ) -> None:
        if transport is None:
            config = config or TransportConfig.from_env()
            if access_token is not None:
                config = replace(config, access_token=access_token)
            transport = Transport(config, session=session)
        self._transport = transport
        self.activities = ActivitiesAPI(transport)
        self.athletes = AthletesAPI(transport)
        self.clubs = ClubsAPI(transport)
        self.segments = SegmentsAPI(transport)

    @property
    def transport(self) -> Transport:
        return self._transport
