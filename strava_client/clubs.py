"""Club endpoints."""

from __future__ import annotations

from typing import List, Optional

from .context import RequestContext
from .models import ClubActivity, ClubAthlete, DetailedClub, SummaryAthlete
from .params import PageParams, encode_options
from .serialization import ListOf
from .transport import Transport


class ClubsAPI:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, ctx: Optional[RequestContext], club_id: int) -> DetailedClub:
        return self._transport.get(ctx, f"/clubs/{club_id}", None, DetailedClub)

    def list_administrators(
        self,
        ctx: Optional[RequestContext],
        club_id: int,
        opts: Optional[PageParams] = None,
    ) -> List[SummaryAthlete]:
        return self._transport.get(
            ctx,
            f"/clubs/{club_id}/admins",
            encode_options(opts),
            ListOf(SummaryAthlete),
        )

    def list_activities(
        self,
        ctx: Optional[RequestContext],
        club_id: int,
        opts: Optional[PageParams] = None,
    ) -> List[ClubActivity]:
        """Recent activities by club members.

        The authenticated athlete must belong to the club; athlete profile
        visibility is respected.
        """

        return self._transport.get(
            ctx,
            f"/clubs/{club_id}/activities",
            encode_options(opts),
            ListOf(ClubActivity),
        )

    def list_members(
        self,
        ctx: Optional[RequestContext],
        club_id: int,
        opts: Optional[PageParams] = None,
    ) -> List[ClubAthlete]:
        return self._transport.get(
            ctx,
            f"/clubs/{club_id}/members",
            encode_options(opts),
            ListOf(ClubAthlete),
        )
