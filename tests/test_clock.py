"""
Tests for the ClockTicker lifecycle and tick semantics.
"""

import threading
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from local_info.clock import ClockTicker, start_clock


def sequence_clock(*instants):
    """A `now` callable that returns each instant in turn, then repeats the last."""
    remaining = list(instants)

    def now():
        return remaining.pop(0) if len(remaining) > 1 else remaining[0]

    return now


class TestClockTicker:
    """Test ClockTicker without relying on real time passing."""

    def test_start_renders_immediately(self):
        render = MagicMock()
        now = sequence_clock(datetime(2024, 3, 1, 17, 5, tzinfo=timezone.utc))
        with ClockTicker(-3, render, interval=60, now=now):
            render.assert_called_once_with("2:05pm")

    def test_each_tick_samples_fresh_time(self):
        render = MagicMock()
        base = datetime(2024, 3, 1, 12, 0, 30, tzinfo=timezone.utc)
        ticker = ClockTicker(0, render, now=sequence_clock(base, base + timedelta(minutes=1)))
        ticker.tick()
        ticker.tick()
        assert [c.args[0] for c in render.call_args_list] == ["12:00pm", "12:01pm"]

    def test_midnight_rollover(self):
        render = MagicMock()
        before = datetime(2024, 3, 1, 23, 59, 59, tzinfo=timezone.utc)
        ticker = ClockTicker(0, render, now=sequence_clock(before, before + timedelta(seconds=1)))
        ticker.tick()
        ticker.tick()
        assert [c.args[0] for c in render.call_args_list] == ["11:59pm", "12:00am"]

    def test_consecutive_ticks_never_go_backwards(self):
        start = datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)
        instants = [start + timedelta(seconds=s) for s in range(0, 86400 - 1, 37)]
        ticker = ClockTicker(0, MagicMock(), now=sequence_clock(*instants))
        previous = None
        for _ in instants:
            text = ticker.current_time()
            parsed = datetime.strptime(text, "%I:%M%p").time()
            if previous is not None:
                assert parsed >= previous
            previous = parsed

    def test_render_failure_does_not_stop_ticker(self):
        render = MagicMock(side_effect=[RuntimeError("display gone"), None])
        ticker = ClockTicker(0, render)
        ticker.tick()
        ticker.tick()
        assert render.call_count == 2

    def test_cancel_stops_thread(self):
        ticks = threading.Event()
        calls = []

        def render(text):
            calls.append(text)
            if len(calls) >= 3:
                ticks.set()

        ticker = start_clock(2, render, interval=0.01)
        assert ticks.wait(timeout=5)
        ticker.cancel()
        assert not ticker.running
        count = len(calls)
        threading.Event().wait(0.05)
        assert len(calls) == count

    def test_cancel_is_idempotent(self):
        ticker = start_clock(0, MagicMock(), interval=60)
        ticker.cancel()
        ticker.cancel()
        assert not ticker.running

    def test_context_manager_cancels(self):
        with ClockTicker(0, MagicMock(), interval=60) as ticker:
            assert ticker.running
        assert not ticker.running

    def test_out_of_range_offset_still_ticks(self):
        render = MagicMock()
        now = sequence_clock(datetime(2024, 3, 1, 10, 45, tzinfo=timezone.utc))
        with start_clock(99999999, render, interval=60, now=now) as ticker:
            render.assert_called_once_with("1:45am")
            assert ticker.running

    def test_sampling_failure_is_logged_not_raised(self):
        render = MagicMock()
        now = MagicMock(side_effect=[OverflowError("date value out of range"),
                                     datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)])
        ticker = ClockTicker(0, render, now=now)
        ticker.tick()
        ticker.tick()
        render.assert_called_once_with("12:00pm")
