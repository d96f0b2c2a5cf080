"""Optional query parameters for list endpoints.

A zero or empty field means "not set" and is never sent, so a default
instance always encodes to an empty parameter dict.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Protocol

__all__ = [
    "ListActivityCommentsOptions",
    "ListAthleteActivitiesOptions",
    "PageParams",
    "QueryOptions",
    "encode_options",
]


class QueryOptions(Protocol):
    def to_params(self) -> Dict[str, Any]: ...


@dataclass
class PageParams:
    """Offset pagination. Strava defaults to page 1 with 30 items per page."""

    page: int = 0
    per_page: int = 0

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.page > 0:
            params["page"] = self.page
        if self.per_page > 0:
            params["per_page"] = self.per_page
        return params


@dataclass
class ListAthleteActivitiesOptions(PageParams):
    """Filters for ``GET /athlete/activities``.

    ``before``/``after`` take epoch seconds or a datetime; naive datetimes are
    interpreted in local time, as :meth:`datetime.timestamp` does.
    """

    before: int | datetime | None = None
    after: int | datetime | None = None

    def to_params(self) -> Dict[str, Any]:
        params = super().to_params()
        before = _epoch(self.before)
        if before:
            params["before"] = before
        after = _epoch(self.after)
        if after:
            params["after"] = after
        return params


@dataclass
class ListActivityCommentsOptions:
    """Cursor pagination for ``GET /activities/{id}/comments``."""

    page_size: int = 0
    after_cursor: str = ""

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.page_size > 0:
            params["page_size"] = self.page_size
        if self.after_cursor:
            params["after_cursor"] = self.after_cursor
        return params


def encode_options(opts: Optional[QueryOptions]) -> Dict[str, Any]:
    return opts.to_params() if opts is not None else {}


def _epoch(value: int | datetime | None) -> int | None:
    if isinstance(value, datetime):
        return int(value.timestamp())
    if value is not None and value > 0:
        return int(value)
    return None
