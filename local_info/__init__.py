"""
local_info package – local wall-clock time and current weather for a US
ZIP code.

Public entry points
-------------------
* `local_info.load_local_info` – build a live view (clock + weather)
* `local_info.main` – the command-line driver (`python -m local_info.main`)
* Service classes:
    - `ZipLookupService`
    - `WeatherGovService`
    - `WeatherPipeline`
* Utility helpers:
    - `format_time`
    - `parse_location_and_offset`

Having these symbols available at the package root keeps the import
experience ergonomic:

    >>> from local_info import load_local_info, format_time
"""

__all__ = [
    "VERSION",
    "ProviderConfig",
    "load_local_info",
    "start_clock",
    # Services
    "ZipLookupService",
    "WeatherGovService",
    "WeatherPipeline",
    # Utilities
    "format_time",
    "parse_location_and_offset",
]

VERSION = "0.1.0"


from .config import ProviderConfig  # noqa: F401
from .clock import start_clock  # noqa: F401
from .display import load_local_info  # noqa: F401

from .services import (  # noqa: F401
    ZipLookupService,
    WeatherGovService,
    WeatherPipeline,
)

from .utils import format_time, parse_location_and_offset  # noqa: F401
