"""Endpoints scoped to the authenticated athlete (and public athlete stats)."""

from __future__ import annotations

from typing import List, Optional

from .context import RequestContext
from .models import ActivityStats, DetailedAthlete, SummaryClub, UpdatableAthlete, Zones
from .params import PageParams, encode_options
from .serialization import ListOf
from .transport import Transport


class AthletesAPI:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get_authenticated(self, ctx: Optional[RequestContext]) -> DetailedAthlete:
        return self._transport.get(ctx, "/athlete", None, DetailedAthlete)

    def update_authenticated(
        self, ctx: Optional[RequestContext], changes: UpdatableAthlete
    ) -> DetailedAthlete:
        """Requires ``profile:write``."""

        return self._transport.put_json(
            ctx, "/athlete", changes.to_json(), DetailedAthlete
        )

    def get_zones(self, ctx: Optional[RequestContext]) -> Zones:
        """Requires ``profile:read_all``."""

        return self._transport.get(ctx, "/athlete/zones", None, Zones)

    def get_stats(self, ctx: Optional[RequestContext], athlete_id: int) -> ActivityStats:
        """Totals for an athlete; only Everyone-visible activities are counted."""

        return self._transport.get(
            ctx, f"/athletes/{athlete_id}/stats", None, ActivityStats
        )

    def list_clubs(
        self, ctx: Optional[RequestContext], opts: Optional[PageParams] = None
    ) -> List[SummaryClub]:
        return self._transport.get(
            ctx, "/athlete/clubs", encode_options(opts), ListOf(SummaryClub)
        )
