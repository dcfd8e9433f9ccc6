"""Tests for the phase/cycle state machine."""
from __future__ import annotations

import dataclasses

import pytest

from tick_breath import (
    AnimationState,
    BreathingConfig,
    ShapeKind,
    degrees_per_ms,
    end_pulse,
    reset,
    tick,
    trigger_pulse,
)
from tick_breath.machine import initial_state


def _run(state, config, deltas):
    for delta in deltas:
        state = tick(
            state, delta, config.phase_duration_ms, config.phase_count, config.degrees_per_ms,
        )
    return state


class TestInitialState:
    """Initial and reset state."""

    def test_initial_values(self):
        state = initial_state(3)
        assert state.current_phase == 0
        assert state.phase_progress == 0
        assert state.cumulative_progress == 0
        assert state.rotation == 0
        assert state.pulse_visible is False
        assert state.scale == 0.95
        assert state.glow_intensity == 0.0

    def test_reset_discards_progress(self):
        config = BreathingConfig.uniform(ShapeKind.SQUARE)
        advanced = _run(reset(config), config, [1500] * 10)
        assert advanced.cumulative_progress > 0
        fresh = reset(config)
        assert fresh == AnimationState(phase_count=4)

    def test_state_is_immutable(self):
        state = initial_state(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.current_phase = 2  # type: ignore[misc]

    def test_scale_is_not_settable(self):
        state = initial_state(3)
        with pytest.raises((AttributeError, TypeError)):
            state.scale = 2.0  # type: ignore[misc]


class TestTick:
    """Phase advance and progress accounting."""

    def test_triangle_scenario(self):
        """4000 ms phases ticked by 1000 ms."""
        config = BreathingConfig.uniform(ShapeKind.TRIANGLE, 4000)
        state = _run(reset(config), config, [1000])
        assert state.current_phase == 0
        assert state.phase_progress == 0.25
        assert state.scale == pytest.approx(0.9875)
        assert state.glow_intensity == pytest.approx(0.25)

        state = _run(state, config, [1000, 1000, 1000])
        assert state.current_phase == 1
        assert state.phase_progress == 0
        assert state.cumulative_progress == 1.0

    def test_phase_advances_by_exactly_one(self):
        config = BreathingConfig.uniform(ShapeKind.SQUARE, 4000)
        state = reset(config)
        phases = []
        for _ in range(400):
            previous = state.current_phase
            state = _run(state, config, [160])
            assert state.current_phase in (previous, (previous + 1) % 4)
            assert 0 <= state.phase_progress < 1
            phases.append(state.current_phase)
        assert set(phases) == {0, 1, 2, 3}

    def test_phase_wraps_modulo_count(self):
        config = BreathingConfig.uniform(ShapeKind.TRIANGLE, 4000)
        state = _run(reset(config), config, [4000] * 3)
        assert state.current_phase == 0
        assert state.cumulative_progress == 3.0

    def test_large_delta_discards_overshoot(self):
        """A delta spanning several phases still advances only one."""
        config = BreathingConfig.uniform(ShapeKind.SQUARE, 4000)
        state = _run(reset(config), config, [10000])
        assert state.current_phase == 1
        assert state.phase_progress == 0
        assert state.cumulative_progress == 2.5

    def test_zero_delta_changes_nothing(self):
        config = BreathingConfig.uniform(ShapeKind.SQUARE, 4000)
        state = _run(reset(config), config, [1000])
        assert _run(state, config, [0]) == state

    def test_scale_and_glow_follow_phase(self):
        config = BreathingConfig.uniform(ShapeKind.SQUARE, 4000)
        state = _run(reset(config), config, [4000])
        assert state.scale == 1.10
        assert state.glow_intensity == 1.0
        state = _run(state, config, [4000, 4000])
        assert state.scale == 0.95
        assert state.glow_intensity == 0.3

    def test_tick_keeps_pulse_flag(self):
        config = BreathingConfig.uniform(ShapeKind.SQUARE, 4000)
        state = _run(trigger_pulse(reset(config)), config, [100])
        assert state.pulse_visible is True


class TestRotation:
    """Rotation sweep."""

    def test_degrees_per_ms(self):
        assert degrees_per_ms(4000, 3) == 360 / 12000 == 0.03

    def test_rotation_is_clockwise_and_unwrapped(self):
        config = BreathingConfig.uniform(ShapeKind.TRIANGLE, 4000)
        state = _run(reset(config), config, [12000] * 3)
        assert state.rotation == pytest.approx(-1080)

    def test_full_cycle_is_360_degrees(self):
        config = BreathingConfig.uniform(ShapeKind.TRIANGLE, 4000)
        state = _run(reset(config), config, [1000] * 12)
        assert abs(state.rotation) == pytest.approx(360)
        assert state.current_phase == 0

    def test_rotation_is_linear_in_elapsed_time(self):
        config = BreathingConfig.uniform(ShapeKind.SQUARE, 4000)
        many = _run(reset(config), config, [16, 17, 33, 250, 1, 683])
        one = _run(reset(config), config, [1000])
        assert many.rotation == pytest.approx(one.rotation)


class TestPulseToggles:
    """Pulse flag reducers."""

    def test_trigger_and_end(self):
        state = initial_state(4)
        assert trigger_pulse(state).pulse_visible is True
        assert end_pulse(trigger_pulse(state)).pulse_visible is False

    def test_toggles_leave_phase_state_alone(self):
        state = dataclasses.replace(initial_state(4), current_phase=2, phase_progress=0.5)
        pulsed = trigger_pulse(state)
        assert pulsed.current_phase == 2
        assert pulsed.phase_progress == 0.5
