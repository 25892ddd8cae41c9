"""
Runtime configuration – provider endpoints, client identity and colours.

Everything that used to be a module-level constant lives in
`ProviderConfig`, which is passed explicitly into the pipeline so tests
(or a staging deployment) can point it at other endpoints.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

GEOCODE_BASE_URL = "https://nominatim.openstreetmap.org/search"
GRID_POINT_BASE_URL = "https://api.weather.gov/points/"
# Both Nominatim and weather.gov reject anonymous clients
CLIENT_IDENTIFIER = "fmwidgets_rdi_weather_app (your_email@example.com)"

DEFAULT_PORT = 3001

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderConfig:
    """Where the three lookups go and how the client introduces itself."""

    geocode_base_url: str = GEOCODE_BASE_URL
    grid_point_base_url: str = GRID_POINT_BASE_URL
    client_identifier: str = CLIENT_IDENTIFIER
    # None means "whatever requests does" (wait forever)
    timeout: Optional[float] = None

    @property
    def headers(self) -> dict:
        return {"User-Agent": self.client_identifier}

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Build a config from LOCAL_INFO_* environment variables."""
        return cls(
            geocode_base_url=os.environ.get("LOCAL_INFO_GEOCODE_URL", GEOCODE_BASE_URL),
            grid_point_base_url=os.environ.get("LOCAL_INFO_POINTS_URL", GRID_POINT_BASE_URL),
            client_identifier=os.environ.get("LOCAL_INFO_USER_AGENT", CLIENT_IDENTIFIER),
            timeout=_timeout_from_env(os.environ.get("LOCAL_INFO_TIMEOUT")),
        )


def _timeout_from_env(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning("Ignoring LOCAL_INFO_TIMEOUT=%r: not a number", raw)
        return None
    if timeout <= 0:
        logger.warning("Ignoring LOCAL_INFO_TIMEOUT=%r: must be positive", raw)
        return None
    return timeout


class Colours:
    """ANSI escape codes used by the terminal view."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
