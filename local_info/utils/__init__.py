"""
utils package – small, pure-function helpers.

We expose the time formatting and route parsing helpers that are used
throughout the app.
"""

# Re-export the helpers for a clean import path
from .clock_format import format_time, shifted_now   # noqa: F401
from .routes import parse_location_and_offset        # noqa: F401

__all__ = [
    "format_time",
    "shifted_now",
    "parse_location_and_offset",
]
