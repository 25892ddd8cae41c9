"""
Failure taxonomy for the local info view.

Every failure knows which pipeline stage produced it and the text that
ends up in the temperature/description region.  Diagnostic detail stays
in the log; only `message` and `temperature_text` reach the user.
"""

from typing import Optional

from .models import Stage


class LocalInfoError(Exception):
    """Base class for everything the view can report."""

    stage: Optional[Stage] = None
    message = "Error"
    temperature_text = "Error"
    # soft = "the provider had nothing to say", not "the lookup broke"
    soft = False

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class RouteNotMatched(LocalInfoError):
    message = "Error: Missing zip or timezone info"


class InvalidPostalCode(LocalInfoError):
    stage = Stage.GEOCODING
    message = "Invalid zip code."


class GeocodingFailed(LocalInfoError):
    stage = Stage.GEOCODING
    message = "Geocoding failed."


class GridPointFailed(LocalInfoError):
    stage = Stage.LOCATING_FORECAST
    message = "Grid point failed."


class NoForecastUrl(LocalInfoError):
    stage = Stage.LOCATING_FORECAST
    message = "No forecast URL."
    temperature_text = "N/A"
    soft = True


class ForecastFetchFailed(LocalInfoError):
    stage = Stage.FETCHING_CONDITIONS
    message = "Forecast failed."


class NoForecastData(LocalInfoError):
    stage = Stage.FETCHING_CONDITIONS
    message = "No forecast data."
    temperature_text = "N/A"
    soft = True
