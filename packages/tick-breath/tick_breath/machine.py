"""Phase/cycle state machine.

``AnimationState`` is an immutable value; ``tick`` and the pulse toggles are
reducers returning a new state. Scale and glow are projections of the phase
state rather than stored fields, so they can never drift out of sync with it.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

from tick_breath.config import BreathingConfig
from tick_breath.curves import glow_of, scale_of


@dataclass(frozen=True, slots=True)
class AnimationState:
    phase_count: int
    current_phase: int = 0
    phase_progress: float = 0.0
    cumulative_progress: float = 0.0
    rotation: float = 0.0
    pulse_visible: bool = False

    @property
    def scale(self) -> float:
        return scale_of(self.current_phase, self.phase_progress, self.phase_count)

    @property
    def glow_intensity(self) -> float:
        return glow_of(self.current_phase, self.phase_progress, self.phase_count)


def initial_state(phase_count: int) -> AnimationState:
    return AnimationState(phase_count=phase_count)


def reset(config: BreathingConfig) -> AnimationState:
    """Fresh state for ``config``. Discards all progress, cumulative included."""
    return initial_state(config.phase_count)


def tick(
    state: AnimationState,
    delta_ms: float,
    phase_duration_ms: float,
    phase_count: int,
    degrees_per_ms: float,
) -> AnimationState:
    """Advance ``state`` by ``delta_ms`` of elapsed time.

    Rotation sweeps clockwise (decreasing) and is not wrapped. Completing a
    phase moves to the next one with progress 0; any overshoot past the phase
    end is dropped rather than carried, so one tick advances at most one
    phase. Cumulative progress keeps the full delta.
    """
    progress_delta = delta_ms / phase_duration_ms
    raw_progress = state.phase_progress + progress_delta
    if raw_progress >= 1:
        phase = (state.current_phase + 1) % phase_count
        progress = 0.0
    else:
        phase = state.current_phase
        progress = raw_progress
    return replace(
        state,
        phase_count=phase_count,
        current_phase=phase,
        phase_progress=progress,
        cumulative_progress=state.cumulative_progress + progress_delta,
        rotation=state.rotation - delta_ms * degrees_per_ms,
    )


def trigger_pulse(state: AnimationState) -> AnimationState:
    return replace(state, pulse_visible=True)


def end_pulse(state: AnimationState) -> AnimationState:
    return replace(state, pulse_visible=False)
