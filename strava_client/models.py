"""Response records and request payloads mirroring the Strava v3 JSON shapes.

Records are pydantic models. Optional fields default to ``None`` so a record
decodes whatever subset of keys the API returns for a given resource state;
``id`` is required on resources that are meaningless without one.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from .activity_types import ActivityType, SportType
from .serialization import TIMESTAMP_FORMAT, decode, format_timestamp

R = TypeVar("R", bound="Record")


def _utc_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(TIMESTAMP_FORMAT)


Timestamp = Annotated[datetime, PlainSerializer(_utc_timestamp, when_used="json")]
# Unknown names from newer API versions are kept as plain strings.
ActivityTypeName = Annotated[
    Union[ActivityType, str], Field(union_mode="left_to_right")
]
SportTypeName = Annotated[Union[SportType, str], Field(union_mode="left_to_right")]


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @classmethod
    def from_dict(cls: Type[R], data: Dict[str, Any]) -> R:
        return decode(cls, data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# --- Athletes ----------------------------------------------------------------
class MetaAthlete(Record):
    id: Optional[int] = None
    resource_state: Optional[int] = None


class SummaryAthlete(MetaAthlete):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    profile_medium: Optional[str] = None
    profile: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    sex: Optional[str] = None
    premium: Optional[bool] = None
    summit: Optional[bool] = None
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None


class SummaryGear(Record):
    id: str
    resource_state: Optional[int] = None
    primary: Optional[bool] = None
    name: Optional[str] = None
    distance: Optional[float] = None


class ClubAthlete(Record):
    """Club member; Strava does not expose member ids on this endpoint."""

    resource_state: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    member: Optional[str] = None
    admin: Optional[bool] = None
    owner: Optional[bool] = None


class ZoneRange(Record):
    min: Optional[int] = None
    max: Optional[int] = None


class HeartRateZoneRanges(Record):
    custom_zones: Optional[bool] = None
    zones: Optional[List[ZoneRange]] = None


class PowerZoneRanges(Record):
    zones: Optional[List[ZoneRange]] = None


class Zones(Record):
    heart_rate: Optional[HeartRateZoneRanges] = None
    power: Optional[PowerZoneRanges] = None


class ActivityTotal(Record):
    count: Optional[int] = None
    distance: Optional[float] = None
    moving_time: Optional[int] = None
    elapsed_time: Optional[int] = None
    elevation_gain: Optional[float] = None
    achievement_count: Optional[int] = None


class ActivityStats(Record):
    biggest_ride_distance: Optional[float] = None
    biggest_climb_elevation_gain: Optional[float] = None
    recent_ride_totals: Optional[ActivityTotal] = None
    recent_run_totals: Optional[ActivityTotal] = None
    recent_swim_totals: Optional[ActivityTotal] = None
    ytd_ride_totals: Optional[ActivityTotal] = None
    ytd_run_totals: Optional[ActivityTotal] = None
    ytd_swim_totals: Optional[ActivityTotal] = None
    all_ride_totals: Optional[ActivityTotal] = None
    all_run_totals: Optional[ActivityTotal] = None
    all_swim_totals: Optional[ActivityTotal] = None


# --- Clubs -------------------------------------------------------------------
class SummaryClub(Record):
    id: int
    resource_state: Optional[int] = None
    name: Optional[str] = None
    profile_medium: Optional[str] = None
    cover_photo: Optional[str] = None
    cover_photo_small: Optional[str] = None
    sport_type: Optional[str] = None
    activity_types: Optional[List[ActivityTypeName]] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    private: Optional[bool] = None
    member_count: Optional[int] = None
    featured: Optional[bool] = None
    verified: Optional[bool] = None
    url: Optional[str] = None


class DetailedClub(SummaryClub):
    membership: Optional[str] = None
    admin: Optional[bool] = None
    owner: Optional[bool] = None
    following_count: Optional[int] = None
    description: Optional[str] = None
    club_type: Optional[str] = None


class ClubActivity(Record):
    """Club feed entry; Strava strips ids and timestamps from these."""

    resource_state: Optional[int] = None
    athlete: Optional[SummaryAthlete] = None
    name: Optional[str] = None
    distance: Optional[float] = None
    moving_time: Optional[int] = None
    elapsed_time: Optional[int] = None
    total_elevation_gain: Optional[float] = None
    type: Optional[ActivityTypeName] = None
    sport_type: Optional[SportTypeName] = None
    workout_type: Optional[int] = None


class DetailedAthlete(SummaryAthlete):
    id: int
    follower_count: Optional[int] = None
    friend_count: Optional[int] = None
    measurement_preference: Optional[str] = None
    ftp: Optional[int] = None
    weight: Optional[float] = None
    clubs: Optional[List[SummaryClub]] = None
    bikes: Optional[List[SummaryGear]] = None
    shoes: Optional[List[SummaryGear]] = None


# --- Activities and segments -------------------------------------------------
class MetaActivity(Record):
    id: Optional[int] = None
    resource_state: Optional[int] = None


class PolylineMap(Record):
    id: Optional[str] = None
    polyline: Optional[str] = None
    summary_polyline: Optional[str] = None
    resource_state: Optional[int] = None


class SummarySegment(Record):
    id: int
    resource_state: Optional[int] = None
    name: Optional[str] = None
    activity_type: Optional[str] = None
    distance: Optional[float] = None
    average_grade: Optional[float] = None
    maximum_grade: Optional[float] = None
    elevation_high: Optional[float] = None
    elevation_low: Optional[float] = None
    start_latlng: Optional[List[float]] = None
    end_latlng: Optional[List[float]] = None
    climb_category: Optional[int] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    private: Optional[bool] = None
    hazardous: Optional[bool] = None
    starred: Optional[bool] = None


class DetailedSegment(SummarySegment):
    created_at: Optional[Timestamp] = None
    updated_at: Optional[Timestamp] = None
    total_elevation_gain: Optional[float] = None
    map: Optional[PolylineMap] = None
    effort_count: Optional[int] = None
    athlete_count: Optional[int] = None
    star_count: Optional[int] = None


class DetailedSegmentEffort(Record):
    id: int
    resource_state: Optional[int] = None
    name: Optional[str] = None
    activity: Optional[MetaActivity] = None
    athlete: Optional[MetaAthlete] = None
    elapsed_time: Optional[int] = None
    moving_time: Optional[int] = None
    start_date: Optional[Timestamp] = None
    start_date_local: Optional[Timestamp] = None
    distance: Optional[float] = None
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    device_watts: Optional[bool] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    segment: Optional[SummarySegment] = None
    kom_rank: Optional[int] = None
    pr_rank: Optional[int] = None
    hidden: Optional[bool] = None


class SummaryActivity(Record):
    id: int
    resource_state: Optional[int] = None
    external_id: Optional[str] = None
    upload_id: Optional[int] = None
    athlete: Optional[MetaAthlete] = None
    name: Optional[str] = None
    distance: Optional[float] = None
    moving_time: Optional[int] = None
    elapsed_time: Optional[int] = None
    total_elevation_gain: Optional[float] = None
    elev_high: Optional[float] = None
    elev_low: Optional[float] = None
    type: Optional[ActivityTypeName] = None
    sport_type: Optional[SportTypeName] = None
    start_date: Optional[Timestamp] = None
    start_date_local: Optional[Timestamp] = None
    timezone: Optional[str] = None
    start_latlng: Optional[List[float]] = None
    end_latlng: Optional[List[float]] = None
    achievement_count: Optional[int] = None
    kudos_count: Optional[int] = None
    comment_count: Optional[int] = None
    athlete_count: Optional[int] = None
    photo_count: Optional[int] = None
    total_photo_count: Optional[int] = None
    map: Optional[PolylineMap] = None
    trainer: Optional[bool] = None
    commute: Optional[bool] = None
    manual: Optional[bool] = None
    private: Optional[bool] = None
    flagged: Optional[bool] = None
    hide_from_home: Optional[bool] = None
    has_kudoed: Optional[bool] = None
    workout_type: Optional[int] = None
    gear_id: Optional[str] = None
    average_speed: Optional[float] = None
    max_speed: Optional[float] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    weighted_average_watts: Optional[int] = None
    max_watts: Optional[int] = None
    kilojoules: Optional[float] = None
    device_watts: Optional[bool] = None
    has_heartrate: Optional[bool] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None


class Split(Record):
    split: Optional[int] = None
    distance: Optional[float] = None
    elapsed_time: Optional[int] = None
    moving_time: Optional[int] = None
    elevation_difference: Optional[float] = None
    average_speed: Optional[float] = None
    pace_zone: Optional[int] = None


class Lap(Record):
    id: int
    resource_state: Optional[int] = None
    name: Optional[str] = None
    activity: Optional[MetaActivity] = None
    athlete: Optional[MetaAthlete] = None
    elapsed_time: Optional[int] = None
    moving_time: Optional[int] = None
    start_date: Optional[Timestamp] = None
    start_date_local: Optional[Timestamp] = None
    distance: Optional[float] = None
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    total_elevation_gain: Optional[float] = None
    average_speed: Optional[float] = None
    max_speed: Optional[float] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    device_watts: Optional[bool] = None
    lap_index: Optional[int] = None
    split: Optional[int] = None
    pace_zone: Optional[int] = None


class DetailedActivity(SummaryActivity):
    description: Optional[str] = None
    calories: Optional[float] = None
    device_name: Optional[str] = None
    embed_token: Optional[str] = None
    gear: Optional[SummaryGear] = None
    segment_efforts: Optional[List[DetailedSegmentEffort]] = None
    best_efforts: Optional[List[DetailedSegmentEffort]] = None
    splits_metric: Optional[List[Split]] = None
    splits_standard: Optional[List[Split]] = None
    laps: Optional[List[Lap]] = None


class TimedZoneRange(Record):
    min: Optional[float] = None
    max: Optional[float] = None
    time: Optional[float] = None


class ActivityZone(Record):
    type: Optional[str] = None
    score: Optional[int] = None
    distribution_buckets: Optional[List[TimedZoneRange]] = None
    sensor_based: Optional[bool] = None
    points: Optional[int] = None
    custom_zones: Optional[bool] = None
    max: Optional[int] = None
    resource_state: Optional[int] = None


class Comment(Record):
    id: int
    resource_state: Optional[int] = None
    activity_id: Optional[int] = None
    post_id: Optional[int] = None
    text: Optional[str] = None
    athlete: Optional[SummaryAthlete] = None
    created_at: Optional[Timestamp] = None
    cursor: Optional[str] = None


# --- Request payloads --------------------------------------------------------
class NewActivity(BaseModel):
    """Manual activity, sent form-encoded to ``POST /activities``.

    ``start_date_local`` is the athlete's wall-clock start. An aware value is
    sent with its own offset; a naive one is sent as-is with a ``Z`` suffix.
    """

    name: str
    sport_type: SportTypeName
    start_date_local: datetime
    elapsed_time: int
    type: Optional[ActivityTypeName] = None
    description: Optional[str] = None
    distance: Optional[float] = None
    trainer: bool = False
    commute: bool = False

    def to_form(self) -> Dict[str, str]:
        """Return the form fields; empty optional values are left out."""

        if not self.name:
            raise ValueError("name is required")
        if self.elapsed_time <= 0:
            raise ValueError("elapsed_time must be > 0")
        form = {
            "name": self.name,
            "sport_type": _enum_value(self.sport_type),
            "start_date_local": format_timestamp(self.start_date_local),
            "elapsed_time": str(self.elapsed_time),
        }
        if self.type:
            form["type"] = _enum_value(self.type)
        if self.description:
            form["description"] = self.description
        if self.distance:
            form["distance"] = _format_number(self.distance)
        if self.trainer:
            form["trainer"] = "1"
        if self.commute:
            form["commute"] = "1"
        return form


class UpdatableActivity(BaseModel):
    """Fields accepted by ``PUT /activities/{id}``; ``None`` means unchanged."""

    name: Optional[str] = None
    type: Optional[ActivityTypeName] = None
    sport_type: Optional[SportTypeName] = None
    description: Optional[str] = None
    gear_id: Optional[str] = None
    commute: Optional[bool] = None
    trainer: Optional[bool] = None
    hide_from_home: Optional[bool] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class UpdatableAthlete(BaseModel):
    """Fields accepted by ``PUT /athlete``."""

    weight: Optional[float] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
