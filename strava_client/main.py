"""Command line access to a few read-only endpoints.

Usage examples:

    python -m strava_client activity 12345678 --include-all-efforts
    python -m strava_client activities --per-page 10
    python -m strava_client club-members 42 --page 2 --per-page 50

The bearer token comes from ``STRAVA_ACCESS_TOKEN`` (or ``.env``) unless
``--access-token`` is given.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, Optional, Sequence

from .client import StravaClient
from .context import RequestContext
from .errors import StravaError
from .params import ListAthleteActivitiesOptions, PageParams

LOGGER = logging.getLogger(__name__)

Command = Callable[[StravaClient, RequestContext, argparse.Namespace], Any]


def _setup_logging(level: str) -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=getattr(logging, level),
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return number


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--page", type=int, default=0, help="Page number (1-based)")
    parser.add_argument("--per-page", type=int, default=0, help="Items per page")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strava_client", description="Query the Strava v3 API"
    )
    parser.add_argument(
        "--access-token",
        help="Bearer token (default: STRAVA_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help="Overall deadline for the call in seconds",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Python logging level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    activity = sub.add_parser("activity", help="Fetch one activity")
    activity.add_argument("activity_id", type=int)
    activity.add_argument("--include-all-efforts", action="store_true")

    activities = sub.add_parser("activities", help="List the athlete's activities")
    _add_paging(activities)
    activities.add_argument("--before", type=int, default=None, help="Epoch seconds")
    activities.add_argument("--after", type=int, default=None, help="Epoch seconds")

    laps = sub.add_parser("laps", help="List the laps of an activity")
    laps.add_argument("activity_id", type=int)

    club = sub.add_parser("club", help="Fetch one club")
    club.add_argument("club_id", type=int)

    members = sub.add_parser("club-members", help="List the members of a club")
    members.add_argument("club_id", type=int)
    _add_paging(members)

    sub.add_parser("athlete", help="Fetch the authenticated athlete")
    return parser


def _cmd_activity(
    client: StravaClient, ctx: RequestContext, args: argparse.Namespace
) -> Any:
    return client.activities.get(
        ctx, args.activity_id, include_all_efforts=args.include_all_efforts
    )


def _cmd_activities(
    client: StravaClient, ctx: RequestContext, args: argparse.Namespace
) -> Any:
    opts = ListAthleteActivitiesOptions(
        page=args.page, per_page=args.per_page, before=args.before, after=args.after
    )
    return client.activities.list_athlete_activities(ctx, opts)


def _cmd_laps(
    client: StravaClient, ctx: RequestContext, args: argparse.Namespace
) -> Any:
    return client.activities.list_laps(ctx, args.activity_id)


def _cmd_club(
    client: StravaClient, ctx: RequestContext, args: argparse.Namespace
) -> Any:
    return client.clubs.get(ctx, args.club_id)


def _cmd_club_members(
    client: StravaClient, ctx: RequestContext, args: argparse.Namespace
) -> Any:
    opts = PageParams(page=args.page, per_page=args.per_page)
    return client.clubs.list_members(ctx, args.club_id, opts)


def _cmd_athlete(
    client: StravaClient, ctx: RequestContext, args: argparse.Namespace
) -> Any:
    return client.athletes.get_authenticated(ctx)


COMMANDS: Dict[str, Command] = {
    "activity": _cmd_activity,
    "activities": _cmd_activities,
    "laps": _cmd_laps,
    "club": _cmd_club,
    "club-members": _cmd_club_members,
    "athlete": _cmd_athlete,
}


def _to_json(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_json(item) for item in result]
    return result.to_dict()


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    client_factory: Callable[..., StravaClient] = StravaClient,
) -> int:
    """Entry point for ``python -m strava_client``; returns the exit code."""

    args = _build_parser().parse_args(argv)
    _setup_logging(args.log_level)
    try:
        client = client_factory(access_token=args.access_token)
        ctx = RequestContext(timeout=args.timeout)
        result = COMMANDS[args.command](client, ctx, args)
    except StravaError as exc:
        LOGGER.error("%s failed: %s", args.command, exc)
        return 1
    json.dump(_to_json(result), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0
