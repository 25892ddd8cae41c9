"""Plain data carried between the route parser, the services and the view."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .errors import LocalInfoError


class Stage(str, Enum):
    GEOCODING = "geocoding"
    LOCATING_FORECAST = "locating_forecast"
    FETCHING_CONDITIONS = "fetching_conditions"


class PipelineState(str, Enum):
    IDLE = "idle"
    GEOCODING = "geocoding"
    LOCATING_FORECAST = "locating_forecast"
    FETCHING_CONDITIONS = "fetching_conditions"
    DISPLAYED = "displayed"
    NO_DATA = "no_data"
    FAILED = "failed"


@dataclass(frozen=True)
class LocationQuery:
    postal_code: str
    utc_offset_hours: int


@dataclass(frozen=True)
class Coordinates:
    """Lat/lon exactly as the geocoder returned them (usually strings)."""

    latitude: Union[str, float]
    longitude: Union[str, float]

    def as_query(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    temperature_unit: str
    short_description: str

    @property
    def temperature_text(self) -> str:
        return f"{self.temperature}°{self.temperature_unit}"


@dataclass(frozen=True)
class PipelineOutcome:
    """
    Terminal result of one pipeline run.

    Exactly one of `conditions` (DISPLAYED) or `error` (NO_DATA / FAILED)
    is set.  `stage` is the stage the run ended in.
    """

    state: PipelineState
    stage: Stage
    conditions: Optional[CurrentConditions] = None
    error: Optional["LocalInfoError"] = None

    @property
    def temperature_text(self) -> str:
        if self.conditions is not None:
            return self.conditions.temperature_text
        return self.error.temperature_text

    @property
    def description_text(self) -> str:
        if self.conditions is not None:
            return self.conditions.short_description
        return self.error.message

    @property
    def icon(self) -> str:
        # No iconography yet; the region is always cleared
        return ""
