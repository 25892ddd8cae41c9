import logging
from typing import Optional

import requests

from ..config import ProviderConfig
from ..errors import GeocodingFailed, InvalidPostalCode
from ..models import Coordinates

logger = logging.getLogger(__name__)


class ZipLookupService:
    """Resolve a US ZIP to lat/lon through Nominatim."""

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ProviderConfig()
        self.session = session or requests.Session()

    def resolve_location(self, postal_code: str) -> Coordinates:
        """
        Return the coordinates of the best US match for *postal_code*.

        Raises InvalidPostalCode when the geocoder knows no such place and
        GeocodingFailed when the request itself goes wrong.
        """
        params = {
            "q": postal_code,
            "format": "json",
            "limit": 1,
            "countrycodes": "us",
        }
        try:
            resp = self.session.get(
                self.config.geocode_base_url,
                params=params,
                headers=self.config.headers,
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
            results = resp.json()
        except requests.RequestException as exc:
            logger.error("Error geocoding zip code %s: %s", postal_code, exc)
            raise GeocodingFailed(str(exc)) from exc

        if not isinstance(results, list):
            logger.error("Unexpected geocoding payload for %s: %r", postal_code, results)
            raise GeocodingFailed("geocoder did not return a list")
        if not results:
            logger.error("Geocoding failed for zip: %s", postal_code)
            raise InvalidPostalCode(postal_code)

        first = results[0]
        try:
            return Coordinates(latitude=first["lat"], longitude=first["lon"])
        except (KeyError, TypeError) as exc:
            logger.error("Geocoding result for %s has no lat/lon: %r", postal_code, first)
            raise GeocodingFailed("geocoding result without coordinates") from exc
