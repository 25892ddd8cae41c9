import logging
from typing import Optional

import requests

from ..config import ProviderConfig
from ..errors import ForecastFetchFailed, GridPointFailed, NoForecastData, NoForecastUrl
from ..models import Coordinates, CurrentConditions

logger = logging.getLogger(__name__)


class WeatherGovService:
    """Wraps the National Weather Service (weather.gov) API."""

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ProviderConfig()
        self.session = session or requests.Session()

    def _get_json(self, url: str):
        resp = self.session.get(url, headers=self.config.headers, timeout=self.config.timeout)
        resp.raise_for_status()
        return resp.json()

    # ------------------------------------------------------------------
    # 1️⃣ Resolve a lat/lon to the grid point's hourly forecast URL
    # ------------------------------------------------------------------
    def _point_metadata(self, coordinates: Coordinates) -> dict:
        url = f"{self.config.grid_point_base_url}{coordinates.as_query()}"
        try:
            return self._get_json(url)
        except requests.RequestException as exc:
            logger.error("Error fetching NWS grid point %s: %s", url, exc)
            raise GridPointFailed(str(exc)) from exc

    @staticmethod
    def _forecast_hourly_url(point_meta) -> Optional[str]:
        if not isinstance(point_meta, dict):
            return None
        properties = point_meta.get("properties")
        if not isinstance(properties, dict):
            return None
        return properties.get("forecastHourly") or None

    def locate_forecast(self, coordinates: Coordinates) -> str:
        """Return the hourly forecast URL for *coordinates*."""
        forecast_url = self._forecast_hourly_url(self._point_metadata(coordinates))
        if forecast_url is None:
            logger.warning("No hourly forecast URL for %s", coordinates.as_query())
            raise NoForecastUrl(coordinates.as_query())
        return forecast_url

    # ------------------------------------------------------------------
    # 2️⃣ Pull the current hour out of the hourly forecast
    # ------------------------------------------------------------------
    @staticmethod
    def _periods(forecast) -> list:
        if not isinstance(forecast, dict):
            return []
        properties = forecast.get("properties")
        if not isinstance(properties, dict):
            return []
        periods = properties.get("periods")
        return periods if isinstance(periods, list) else []

    def fetch_conditions(self, forecast_url: str) -> CurrentConditions:
        """
        Returns the first forecast period as CurrentConditions.

        An empty or missing periods list is NoForecastData, transport and
        HTTP errors are ForecastFetchFailed.
        """
        try:
            forecast = self._get_json(forecast_url)
        except requests.RequestException as exc:
            logger.error("Error fetching NWS forecast %s: %s", forecast_url, exc)
            raise ForecastFetchFailed(str(exc)) from exc

        periods = self._periods(forecast)
        current = periods[0] if periods else None
        if not isinstance(current, dict) or current.get("temperature") is None:
            logger.warning("No forecast periods at %s", forecast_url)
            raise NoForecastData(forecast_url)

        return CurrentConditions(
            temperature=current["temperature"],
            temperature_unit=current.get("temperatureUnit", ""),
            short_description=current.get("shortForecast", ""),
        )
