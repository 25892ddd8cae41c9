"""
Clock ticker – redraws the remote wall-clock time once a second.

The ticker renders once synchronously on start, then keeps going on a
daemon thread until `cancel()` is called.  It owns nothing but its own
thread and the fixed UTC offset.
"""

import logging
import threading
from datetime import datetime
from typing import Callable, Optional

from .utils.clock_format import format_time, shifted_now

logger = logging.getLogger(__name__)

Render = Callable[[str], None]
Now = Callable[[], datetime]


class ClockTicker:
    """Recurring timer that renders `format_time(now + offset)`."""

    def __init__(
        self,
        utc_offset_hours: int,
        render: Render,
        interval: float = 1.0,
        now: Optional[Now] = None,
    ):
        self.utc_offset_hours = utc_offset_hours
        self.render = render
        self.interval = interval
        self._now = now
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def current_time(self) -> str:
        sample = self._now() if self._now is not None else None
        return format_time(shifted_now(self.utc_offset_hours, sample))

    def tick(self) -> None:
        """Sample the clock and hand the text to `render`."""
        try:
            self.render(self.current_time())
        except Exception:
            # A broken display must not stop the clock
            logger.exception("Clock render failed")

    def start(self) -> "ClockTicker":
        if self._thread is not None:
            return self
        self.tick()
        self._thread = threading.Thread(
            target=self._run, name="clock-ticker", daemon=True
        )
        self._thread.start()
        return self

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.tick()

    def cancel(self) -> None:
        self._stopped.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def __enter__(self) -> "ClockTicker":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.cancel()


def start_clock(
    utc_offset_hours: int,
    render: Render,
    interval: float = 1.0,
    now: Optional[Now] = None,
) -> ClockTicker:
    """Render the shifted time now and every `interval` seconds after."""
    return ClockTicker(utc_offset_hours, render, interval=interval, now=now).start()
