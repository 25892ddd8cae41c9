"""
services package – wrappers around external APIs.

Export the service classes so callers can do:

    from local_info.services import (
        ZipLookupService,
        WeatherGovService,
        WeatherPipeline,
    )
"""

# Re-export the concrete service classes for a tidy public API
from .zip_lookup  import ZipLookupService   # noqa: F401
from .weather_gov import WeatherGovService  # noqa: F401
from .pipeline    import WeatherPipeline    # noqa: F401

__all__ = [
    "ZipLookupService",
    "WeatherGovService",
    "WeatherPipeline",
]
