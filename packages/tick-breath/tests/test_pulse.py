"""Tests for PulseScheduler."""
from __future__ import annotations

import pytest

from tick_breath import PulseScheduler, marker_radius
from tick_breath.machine import initial_state


class TestPulseTiming:
    """Interval and clear timing."""

    def test_no_pulse_before_interval(self):
        scheduler = PulseScheduler()
        state = scheduler.advance(initial_state(4), 999)
        assert state.pulse_visible is False
        assert scheduler.pending_clear is None

    def test_pulse_on_interval(self):
        scheduler = PulseScheduler()
        state = scheduler.advance(initial_state(4), 999)
        state = scheduler.advance(state, 1)
        assert state.pulse_visible is True
        assert scheduler.pending_clear is not None
        assert scheduler.pending_clear.remaining_ms == 500

    def test_pulse_clears_after_duration(self):
        scheduler = PulseScheduler()
        state = scheduler.advance(initial_state(4), 1000)
        state = scheduler.advance(state, 499)
        assert state.pulse_visible is True
        state = scheduler.advance(state, 1)
        assert state.pulse_visible is False
        assert scheduler.pending_clear is None

    def test_pulses_repeat_every_interval(self):
        scheduler = PulseScheduler()
        state = initial_state(4)
        starts = 0
        was_visible = False
        for _ in range(500):  # 10 seconds in 20 ms frames
            state = scheduler.advance(state, 20)
            if state.pulse_visible and not was_visible:
                starts += 1
            was_visible = state.pulse_visible
        assert starts == 10

    def test_independent_of_phase_state(self):
        scheduler = PulseScheduler()
        state = scheduler.advance(initial_state(3), 1000)
        assert state.current_phase == 0
        assert state.phase_progress == 0


class TestOverlap:
    """A new pulse while a clear is pending."""

    def test_new_pulse_rearms_instead_of_queueing(self):
        scheduler = PulseScheduler(interval_ms=300, duration_ms=500)
        state = scheduler.advance(initial_state(4), 300)
        first = scheduler.pending_clear
        state = scheduler.advance(state, 300)
        second = scheduler.pending_clear
        assert state.pulse_visible is True
        assert first is not None and first.cancelled is True
        assert second is not first
        assert second.remaining_ms == 500

        state = scheduler.advance(state, 250)
        assert state.pulse_visible is True

    def test_replaced_handle_stops_counting(self):
        scheduler = PulseScheduler(interval_ms=300, duration_ms=500)
        state = scheduler.advance(initial_state(4), 300)
        first = scheduler.pending_clear
        state = scheduler.advance(state, 300)
        state = scheduler.advance(state, 100)
        assert first.remaining_ms == 200
        assert scheduler.pending_clear.remaining_ms == 400


class TestCancel:
    """Cancelling the pending clear."""

    def test_cancel_invalidates_handle(self):
        scheduler = PulseScheduler()
        state = scheduler.advance(initial_state(4), 1000)
        handle = scheduler.pending_clear
        state = scheduler.cancel(state)
        assert handle is not None and handle.cancelled is True
        assert scheduler.pending_clear is None
        assert state.pulse_visible is False

    def test_cancel_restarts_interval(self):
        scheduler = PulseScheduler()
        state = scheduler.advance(initial_state(4), 900)
        state = scheduler.cancel(state)
        state = scheduler.advance(state, 900)
        assert state.pulse_visible is False


class TestValidation:
    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            PulseScheduler(interval_ms=0)

    def test_rejects_non_positive_duration(self):
        with pytest.raises(ValueError):
            PulseScheduler(duration_ms=-1)


def test_marker_radius():
    assert marker_radius(True) == 10
    assert marker_radius(False) == 6
