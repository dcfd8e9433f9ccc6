"""BreathingSession - owns one animation session and drives it from timestamps."""
from __future__ import annotations

import logging
from typing import Callable

from tick_breath import machine
from tick_breath.config import BreathingConfig
from tick_breath.curves import phase_label
from tick_breath.geometry import point_on_shape
from tick_breath.machine import AnimationState
from tick_breath.pulse import PulseScheduler, marker_radius
from tick_breath.trail import trail_descriptor
from tick_breath.types import Frame, SessionError

logger = logging.getLogger(__name__)

PhaseHook = Callable[["BreathingSession", int, int], None]


class BreathingSession:
    """Explicit session object replacing a global animation loop.

    The caller owns the session and feeds it timestamps (``advance``) or raw
    deltas (``step``) once per frame while it is active. Stopping is simply
    not ticking any more; ``stop`` also cancels the pending pulse clear so no
    deferred toggle lands on a finished session.
    """

    def __init__(
        self,
        config: BreathingConfig,
        pulse: PulseScheduler | None = None,
    ) -> None:
        self._config = config
        self._pulse = pulse if pulse is not None else PulseScheduler()
        self._state = machine.reset(config)
        self._active = False
        self._last_ms: float | None = None
        self._phase_hooks: list[PhaseHook] = []

    @property
    def config(self) -> BreathingConfig:
        return self._config

    @property
    def state(self) -> AnimationState:
        return self._state

    @property
    def active(self) -> bool:
        return self._active

    @property
    def pulse(self) -> PulseScheduler:
        return self._pulse

    def on_phase(self, hook: PhaseHook) -> None:
        """Register ``hook(session, old_phase, new_phase)``, called on phase advance."""
        self._phase_hooks.append(hook)

    # --- Lifecycle ---

    def start(self, now_ms: float) -> None:
        if self._active:
            return
        self._active = True
        self._last_ms = now_ms
        logger.debug("session started at %.1f ms (%s)", now_ms, self._config.shape.value)

    def stop(self) -> None:
        self._active = False
        self._last_ms = None
        self._state = self._pulse.cancel(self._state)
        logger.debug("session stopped")

    def reset(self) -> None:
        """Back to the initial state. The only way cumulative progress restarts."""
        self._state = self._pulse.cancel(machine.reset(self._config))
        if self._active:
            self._last_ms = None
        logger.debug("session reset")

    def restart(self, now_ms: float) -> None:
        self.stop()
        self.reset()
        self.start(now_ms)

    def reconfigure(self, config: BreathingConfig) -> None:
        """Swap configuration; only allowed while stopped. Implies reset."""
        if self._active:
            raise SessionError("stop the session before reconfiguring it")
        self._config = config
        self.reset()

    # --- Ticking ---

    def advance(self, now_ms: float) -> Frame:
        """Tick by the time elapsed since the previous timestamp.

        A clock regression counts as zero elapsed time. Inactive sessions are
        not ticked; the current frame is returned unchanged.
        """
        if not self._active:
            return self.frame()
        if self._last_ms is None:
            self._last_ms = now_ms
        delta = max(0.0, now_ms - self._last_ms)
        self._last_ms = max(self._last_ms, now_ms)
        return self.step(delta)

    def step(self, delta_ms: float) -> Frame:
        """Tick by an explicit delta. Negative deltas are clamped to zero."""
        if not self._active:
            return self.frame()
        delta = max(0.0, delta_ms)
        config = self._config
        old_phase = self._state.current_phase
        state = machine.tick(
            self._state,
            delta,
            config.phase_duration_ms,
            config.phase_count,
            config.degrees_per_ms,
        )
        self._state = self._pulse.advance(state, delta)

        new_phase = self._state.current_phase
        if new_phase != old_phase:
            logger.debug("phase %d -> %d", old_phase, new_phase)
            for hook in self._phase_hooks:
                hook(self, old_phase, new_phase)
        return self.frame()

    def frame(self) -> Frame:
        """Render descriptor for the current state."""
        state = self._state
        shape = self._config.shape
        return Frame(
            position=point_on_shape(shape, state.current_phase, state.phase_progress),
            rotation=state.rotation,
            scale=state.scale,
            glow_intensity=state.glow_intensity,
            trail=trail_descriptor(shape, state.cumulative_progress, state.phase_count),
            pulse_visible=state.pulse_visible,
            current_phase=state.current_phase,
            marker_radius=marker_radius(state.pulse_visible),
            phase_label=phase_label(shape, state.current_phase),
        )
