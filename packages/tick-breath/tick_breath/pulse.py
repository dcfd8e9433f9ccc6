"""Pulse scheduling: a recurring pulse with a cancellable one-shot clear."""
from __future__ import annotations

from dataclasses import dataclass

from tick_breath.constants import (
    CIRCLE_RADIUS_NORMAL,
    CIRCLE_RADIUS_PULSE,
    PULSE_DURATION_MS,
    PULSE_INTERVAL_MS,
)
from tick_breath.machine import AnimationState, end_pulse, trigger_pulse


@dataclass
class Periodic:
    """Recurring timer. Fires every ``interval_ms`` of elapsed time."""

    name: str
    interval_ms: float
    elapsed_ms: float = 0.0


@dataclass
class Timer:
    """One-shot countdown. Fires once when ``remaining_ms`` reaches 0.

    Doubles as the cancellation handle for the deferred action: once
    ``cancelled`` is set the timer never fires.
    """

    name: str
    remaining_ms: float
    cancelled: bool = False


class PulseScheduler:
    """Sets the pulse flag on a fixed interval and clears it after a duration.

    Independent of phase boundaries. A pulse that starts while a previous
    clear is still pending re-arms the flag and replaces the pending clear.
    """

    def __init__(
        self,
        interval_ms: float = PULSE_INTERVAL_MS,
        duration_ms: float = PULSE_DURATION_MS,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be > 0, got {interval_ms}")
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be > 0, got {duration_ms}")
        self._periodic = Periodic(name="pulse", interval_ms=interval_ms)
        self._duration_ms = duration_ms
        self._clear: Timer | None = None

    @property
    def interval_ms(self) -> float:
        return self._periodic.interval_ms

    @property
    def duration_ms(self) -> float:
        return self._duration_ms

    @property
    def pending_clear(self) -> Timer | None:
        """Handle of the scheduled clear, or None when nothing is pending."""
        return self._clear

    def advance(self, state: AnimationState, delta_ms: float) -> AnimationState:
        """Advance both timers by ``delta_ms`` and apply any toggles to ``state``."""
        clear = self._clear
        if clear is not None:
            clear.remaining_ms -= delta_ms
            if clear.remaining_ms <= 0:
                self._clear = None
                state = end_pulse(state)

        self._periodic.elapsed_ms += delta_ms
        if self._periodic.elapsed_ms >= self._periodic.interval_ms:
            self._periodic.elapsed_ms = 0.0
            if self._clear is not None:
                self._clear.cancelled = True
            self._clear = Timer(name="pulse_clear", remaining_ms=self._duration_ms)
            state = trigger_pulse(state)
        return state

    def cancel(self, state: AnimationState) -> AnimationState:
        """Drop the pending clear, restart the interval and hide the pulse."""
        if self._clear is not None:
            self._clear.cancelled = True
            self._clear = None
        self._periodic.elapsed_ms = 0.0
        return end_pulse(state)


def marker_radius(pulse_visible: bool) -> float:
    return CIRCLE_RADIUS_PULSE if pulse_visible else CIRCLE_RADIUS_NORMAL
