"""Segment and segment effort endpoints."""

from __future__ import annotations

from typing import List, Optional

from .context import RequestContext
from .models import DetailedSegment, DetailedSegmentEffort, SummarySegment
from .params import PageParams, encode_options
from .serialization import ListOf
from .transport import Transport


class SegmentsAPI:
    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def get(self, ctx: Optional[RequestContext], segment_id: int) -> DetailedSegment:
        return self._transport.get(
            ctx, f"/segments/{segment_id}", None, DetailedSegment
        )

    def list_starred(
        self, ctx: Optional[RequestContext], opts: Optional[PageParams] = None
    ) -> List[SummarySegment]:
        return self._transport.get(
            ctx, "/segments/starred", encode_options(opts), ListOf(SummarySegment)
        )

    def star(
        self, ctx: Optional[RequestContext], segment_id: int, starred: bool
    ) -> DetailedSegment:
        """Star or unstar a segment. Requires ``profile:write``."""

        return self._transport.put_json(
            ctx,
            f"/segments/{segment_id}/starred",
            {"starred": starred},
            DetailedSegment,
        )

    def get_effort(
        self, ctx: Optional[RequestContext], effort_id: int
    ) -> DetailedSegmentEffort:
        """Requires a Strava subscription."""

        return self._transport.get(
            ctx, f"/segment_efforts/{effort_id}", None, DetailedSegmentEffort
        )
