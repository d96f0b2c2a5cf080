"""Activity endpoints: create, fetch, update and the per-activity listings."""

from __future__ import annotations

import logging
from typing import List, Optional

from .context import RequestContext
from .models import (
    ActivityZone,
    Comment,
    DetailedActivity,
    Lap,
    NewActivity,
    SummaryActivity,
    SummaryAthlete,
    UpdatableActivity,
)
from .params import (
    ListActivityCommentsOptions,
    ListAthleteActivitiesOptions,
    PageParams,
    encode_options,
)
from .serialization import ListOf
from .transport import Transport

LOGGER = logging.getLogger(__name__)


class ActivitiesAPI:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def create(
        self, ctx: Optional[RequestContext], activity: NewActivity
    ) -> DetailedActivity:
        """Create a manual activity. Requires ``activity:write``."""

        LOGGER.info("Creating manual activity name=%r", activity.name)
        return self._transport.post_form(
            ctx, "/activities", activity.to_form(), DetailedActivity
        )

    def get(
        self,
        ctx: Optional[RequestContext],
        activity_id: int,
        include_all_efforts: bool = False,
    ) -> DetailedActivity:
        """Return an activity owned by the authenticated athlete.

        Requires ``activity:read`` for Everyone and Followers activities and
        ``activity:read_all`` for Only Me activities.
        """

        params = {"include_all_efforts": "true" if include_all_efforts else "false"}
        return self._transport.get(
            ctx, f"/activities/{activity_id}", params, DetailedActivity
        )

    def get_zones(
        self, ctx: Optional[RequestContext], activity_id: int
    ) -> List[ActivityZone]:
        """Summit feature: heart rate and power zone distribution of an activity."""

        return self._transport.get(
            ctx, f"/activities/{activity_id}/zones", None, ListOf(ActivityZone)
        )

    def list_comments(
        self,
        ctx: Optional[RequestContext],
        activity_id: int,
        opts: Optional[ListActivityCommentsOptions] = None,
    ) -> List[Comment]:
        """Cursor-paginated; pass the last comment's ``cursor`` as ``after_cursor``."""

        return self._transport.get(
            ctx,
            f"/activities/{activity_id}/comments",
            encode_options(opts),
            ListOf(Comment),
        )

    def list_kudoers(
        self,
        ctx: Optional[RequestContext],
        activity_id: int,
        opts: Optional[PageParams] = None,
    ) -> List[SummaryAthlete]:
        return self._transport.get(
            ctx,
            f"/activities/{activity_id}/kudos",
            encode_options(opts),
            ListOf(SummaryAthlete),
        )

    def list_laps(self, ctx: Optional[RequestContext], activity_id: int) -> List[Lap]:
        return self._transport.get(
            ctx, f"/activities/{activity_id}/laps", None, ListOf(Lap)
        )

    def list_athlete_activities(
        self,
        ctx: Optional[RequestContext],
        opts: Optional[ListAthleteActivitiesOptions] = None,
    ) -> List[SummaryActivity]:
        """Activities of the authenticated athlete, newest first.

        Only Me activities are filtered out unless the token carries
        ``activity:read_all``.
        """

        return self._transport.get(
            ctx, "/athlete/activities", encode_options(opts), ListOf(SummaryActivity)
        )

    def update(
        self,
        ctx: Optional[RequestContext],
        activity_id: int,
        changes: UpdatableActivity,
    ) -> DetailedActivity:
        """Update an activity. Requires ``activity:write`` (and ``read_all`` for Only Me)."""

        return self._transport.put_json(
            ctx, f"/activities/{activity_id}", changes.to_json(), DetailedActivity
        )
