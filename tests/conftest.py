"""Shared fixtures: a fake requests.Session that replays canned responses."""

from unittest.mock import MagicMock

import pytest
import requests

from local_info.config import ProviderConfig

GEOCODE_URL = "https://geocode.test/search"
POINTS_URL = "https://points.test/points/"
HOURLY_URL = "https://points.test/gridpoints/LOX/1,2/forecast/hourly"


def make_response(payload=None, status=200):
    """MagicMock standing in for a requests.Response."""
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    return resp


def geocode_payload(lat="33.6803", lon="-117.9880"):
    return [{"lat": lat, "lon": lon, "display_name": "Huntington Beach, CA"}]


def points_payload(url=HOURLY_URL):
    return {"properties": {"forecastHourly": url}}


def forecast_payload(periods=None):
    if periods is None:
        periods = [
            {"temperature": 72, "temperatureUnit": "F", "shortForecast": "Sunny"},
            {"temperature": 70, "temperatureUnit": "F", "shortForecast": "Clear"},
        ]
    return {"properties": {"periods": periods}}


@pytest.fixture
def config():
    return ProviderConfig(
        geocode_base_url=GEOCODE_URL,
        grid_point_base_url=POINTS_URL,
        client_identifier="local-info-tests (tests@example.com)",
    )


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def happy_responses():
    return [
        make_response(geocode_payload()),
        make_response(points_payload()),
        make_response(forecast_payload()),
    ]
