"""
Weather pipeline – ZIP → coordinates → hourly forecast URL → conditions.

Each stage runs only after the previous one returned; the first failure
ends the run.  `run()` always returns a PipelineOutcome and never lets a
LocalInfoError escape.
"""

import logging
from typing import Callable, Optional

import requests

from ..config import ProviderConfig
from ..errors import LocalInfoError
from ..models import PipelineOutcome, PipelineState, Stage
from .weather_gov import WeatherGovService
from .zip_lookup import ZipLookupService

logger = logging.getLogger(__name__)

Transition = Callable[[PipelineState], None]


class WeatherPipeline:
    """Sequential three-stage lookup of current conditions for a ZIP."""

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        session: Optional[requests.Session] = None,
        on_transition: Optional[Transition] = None,
    ):
        self.config = config or ProviderConfig()
        # Only a session we created ourselves is ours to close
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.zip_service = ZipLookupService(self.config, self.session)
        self.weather_service = WeatherGovService(self.config, self.session)
        self.on_transition = on_transition

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "WeatherPipeline":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _enter(self, state: PipelineState) -> None:
        logger.debug("Weather pipeline -> %s", state.value)
        if self.on_transition is not None:
            self.on_transition(state)

    def run(self, postal_code: str) -> PipelineOutcome:
        self._enter(PipelineState.IDLE)
        stage = Stage.GEOCODING
        try:
            self._enter(PipelineState.GEOCODING)
            logger.info("Resolving lat/long for zip %s...", postal_code)
            coordinates = self.zip_service.resolve_location(postal_code)

            stage = Stage.LOCATING_FORECAST
            self._enter(PipelineState.LOCATING_FORECAST)
            logger.info("Locating forecast for %s...", coordinates.as_query())
            forecast_url = self.weather_service.locate_forecast(coordinates)

            stage = Stage.FETCHING_CONDITIONS
            self._enter(PipelineState.FETCHING_CONDITIONS)
            logger.info("Getting current conditions...")
            conditions = self.weather_service.fetch_conditions(forecast_url)
        except LocalInfoError as exc:
            state = PipelineState.NO_DATA if exc.soft else PipelineState.FAILED
            logger.info("Weather pipeline stopped at %s: %s", stage.value, exc.message)
            self._enter(state)
            return PipelineOutcome(state=state, stage=exc.stage or stage, error=exc)

        self._enter(PipelineState.DISPLAYED)
        return PipelineOutcome(
            state=PipelineState.DISPLAYED, stage=stage, conditions=conditions
        )
