"""
The rendering surface and the public `load_local_info` entry point.

A Display is a bag of named text regions.  The clock only ever writes
`time`; the weather pipeline only ever writes `temperature`,
`description` and `icon`.  How the regions become HTML or terminal
output is up to whoever listens to `on_update`.
"""

import logging
from typing import Callable, Optional

from flask import has_request_context, request

from .clock import ClockTicker, start_clock
from .config import ProviderConfig
from .errors import RouteNotMatched
from .models import LocationQuery, PipelineOutcome
from .services.pipeline import WeatherPipeline
from .utils.routes import parse_location_and_offset

logger = logging.getLogger(__name__)

LABEL = "Current time and weather there"
LOADING = "Loading..."
ZIP_REQUIRED = "Error: Zip code is required for weather info"


class Display:
    """Addressable text regions for one rendered view."""

    def __init__(
        self,
        container_id: str = "content",
        on_update: Optional[Callable[["Display"], None]] = None,
    ):
        self.container_id = container_id
        self.on_update = on_update
        self.title = ""
        self.label = ""
        self.time = ""
        self.temperature = ""
        self.description = ""
        self.icon = ""

    def _changed(self) -> None:
        if self.on_update is not None:
            self.on_update(self)

    def show_loading(self) -> None:
        self.title = ""
        self.label = LABEL
        self.time = ""
        self.temperature = LOADING
        self.description = ""
        self.icon = ""
        self._changed()

    def show_error(self, title: str) -> None:
        """Replace the whole container with a single error title."""
        self.title = title
        self.label = ""
        self.time = ""
        self.temperature = ""
        self.description = ""
        self.icon = ""
        self._changed()

    def set_time(self, text: str) -> None:
        self.time = text
        self._changed()

    def set_weather(self, temperature: str, description: str, icon: str = "") -> None:
        self.temperature = temperature
        self.description = description
        self.icon = icon
        self._changed()

    def as_dict(self) -> dict:
        return {
            "container_id": self.container_id,
            "title": self.title,
            "label": self.label,
            "time": self.time,
            "temperature": self.temperature,
            "description": self.description,
            "icon": self.icon,
        }


def render_outcome(display: Display, outcome: PipelineOutcome) -> None:
    display.set_weather(outcome.temperature_text, outcome.description_text, outcome.icon)


class LocalInfoView:
    """
    One display session: the display, its running clock and the weather
    outcome.  Close it (or use it as a context manager) to stop the clock.
    """

    def __init__(
        self,
        display: Display,
        query: Optional[LocationQuery] = None,
        ticker: Optional[ClockTicker] = None,
        outcome: Optional[PipelineOutcome] = None,
    ):
        self.display = display
        self.query = query
        self.ticker = ticker
        self.outcome = outcome

    @property
    def state(self) -> str:
        if self.outcome is None:
            return "error" if self.display.title else "loading"
        return self.outcome.state.value

    def close(self) -> None:
        if self.ticker is not None:
            self.ticker.cancel()

    def __enter__(self) -> "LocalInfoView":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def _current_path() -> Optional[str]:
    if has_request_context():
        return request.path
    return None


def load_local_info(
    postal_code: Optional[str] = None,
    utc_offset_hours: Optional[int] = None,
    container_id: str = "content",
    *,
    path: Optional[str] = None,
    config: Optional[ProviderConfig] = None,
    pipeline: Optional[WeatherPipeline] = None,
    display: Optional[Display] = None,
    on_update: Optional[Callable[[Display], None]] = None,
) -> LocalInfoView:
    """
    Fetch and display local time and weather for a ZIP.

    When either the ZIP or the offset is missing both are taken from
    *path* (or the path of the Flask request being served).  The returned
    view owns a running clock; close it when the view goes away.
    """
    display = display or Display(container_id, on_update=on_update)

    if postal_code is None or utc_offset_hours is None:
        if path is None:
            path = _current_path()
        query = parse_location_and_offset(path)
        if query is None:
            exc = RouteNotMatched(str(path))
            logger.error("Could not determine zip or timezone offset from arguments or URL (%s).", path)
            display.show_error(exc.message)
            return LocalInfoView(display)
    else:
        query = LocationQuery(postal_code=postal_code, utc_offset_hours=int(utc_offset_hours))

    if not query.postal_code:
        display.show_error(ZIP_REQUIRED)
        return LocalInfoView(display, query)

    display.show_loading()
    ticker = start_clock(query.utc_offset_hours, display.set_time)
    view = LocalInfoView(display, query, ticker)

    owned = None
    if pipeline is None:
        pipeline = owned = WeatherPipeline(config or ProviderConfig())
    try:
        view.outcome = pipeline.run(query.postal_code)
    except BaseException:
        view.close()
        raise
    finally:
        if owned is not None:
            owned.close()
    render_outcome(display, view.outcome)
    return view
