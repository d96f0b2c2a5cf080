"""Global pytest fixtures & helpers.

Adds project root to path and provides a fake HTTP session so transport and
endpoint tests never touch the network.
"""
from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List

import pytest
import requests

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from strava_client.client import StravaClient
from strava_client.transport import Transport, TransportConfig

BASE_URL = "https://www.strava.com/api/v3"


class FakeResp:
    """Minimal fake response matching needed parts of requests.Response."""

    def __init__(self, status_code=200, data=None, text=None, headers=None):
        self.status_code = status_code
        self._data = data if data is not None else {}
        self._text = text
        self.headers = headers or {}

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._data

    @property
    def text(self):
        if self._text is not None:
            return self._text
        return json.dumps(self._data)


class FakeSession:
    """Records every request and replays queued responses in order."""

    def __init__(self, *responses: Any) -> None:
        self.responses: List[Any] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]

    def last_url(self) -> str:
        """Full URL including the encoded query string, as requests sends it."""

        call = self.last
        return requests.Request("GET", call["url"], params=call["params"]).prepare().url


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def transport(fake_session):
    return Transport(
        TransportConfig(access_token="tok-1234", base_url=BASE_URL, timeout=15),
        session=fake_session,
    )


@pytest.fixture
def client(transport):
    return StravaClient(transport=transport)


# --- JSON fixtures ---------------------------------------------------
@pytest.fixture
def detailed_activity_json():
    return {
        "id": 12345,
        "resource_state": 3,
        "external_id": "garmin_push_12345",
        "upload_id": 987654321,
        "athlete": {"id": 134815, "resource_state": 1},
        "name": "Happy Friday",
        "distance": 28099.0,
        "moving_time": 4207,
        "elapsed_time": 4410,
        "total_elevation_gain": 516.0,
        "type": "Ride",
        "sport_type": "MountainBikeRide",
        "start_date": "2018-02-16T14:52:54Z",
        "start_date_local": "2018-02-16T06:52:54Z",
        "timezone": "(GMT-08:00) America/Los_Angeles",
        "start_latlng": [37.83, -122.26],
        "end_latlng": [37.83, -122.26],
        "achievement_count": 0,
        "kudos_count": 19,
        "comment_count": 0,
        "map": {
            "id": "a1410355832",
            "polyline": "ki{eFvqfiVqAWQIGEEKAYJgBVqDJ",
            "resource_state": 3,
            "summary_polyline": "ki{eFvqfiVsBmA`Feh@qg@iX",
        },
        "trainer": False,
        "commute": False,
        "manual": False,
        "private": False,
        "flagged": False,
        "gear_id": "b12345678987654321",
        "average_speed": 6.679,
        "max_speed": 18.5,
        "device_watts": False,
        "has_heartrate": True,
        "average_heartrate": 140.3,
        "max_heartrate": 178.0,
        "description": "",
        "calories": 870.2,
        "laps": [
            {
                "id": 4479306946,
                "resource_state": 2,
                "name": "Lap 1",
                "activity": {"id": 12345, "resource_state": 1},
                "athlete": {"id": 134815, "resource_state": 1},
                "elapsed_time": 1573,
                "moving_time": 1569,
                "start_date": "2018-02-16T14:52:54Z",
                "start_date_local": "2018-02-16T06:52:54Z",
                "distance": 8046.72,
                "start_index": 0,
                "end_index": 1570,
                "total_elevation_gain": 276.0,
                "average_speed": 5.12,
                "max_speed": 9.5,
                "lap_index": 1,
                "split": 1,
            }
        ],
        "device_name": "Garmin Edge 1030",
        "embed_token": "18e4615989b47dd4ff3dc711b0aa4502e4b311a9",
    }
