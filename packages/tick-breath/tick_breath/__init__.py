"""tick-breath - Phase-based breathing animation core."""
from __future__ import annotations

from tick_breath.config import BreathingConfig, degrees_per_ms
from tick_breath.curves import glow_of, phase_label, phase_role, scale_of
from tick_breath.geometry import (
    outline_path,
    path_length,
    point_at_distance,
    point_on_shape,
    svg_path_data,
    vertices,
)
from tick_breath.machine import AnimationState, end_pulse, reset, tick, trigger_pulse
from tick_breath.presets import DEFAULT_PRESETS, BreathingPattern, Phase, PhaseType, PresetStore
from tick_breath.pulse import PulseScheduler, marker_radius
from tick_breath.session import BreathingSession
from tick_breath.trail import (
    dash_array,
    distance_travelled,
    max_trail_length,
    trail_descriptor,
    trail_length,
    trail_points,
)
from tick_breath.types import (
    ConfigError,
    Frame,
    PhaseRole,
    Position,
    SessionError,
    ShapeKind,
    TrailDescriptor,
)

__all__ = [
    "AnimationState",
    "BreathingConfig",
    "BreathingPattern",
    "BreathingSession",
    "ConfigError",
    "DEFAULT_PRESETS",
    "Frame",
    "Phase",
    "PhaseRole",
    "PhaseType",
    "Position",
    "PresetStore",
    "PulseScheduler",
    "SessionError",
    "ShapeKind",
    "TrailDescriptor",
    "dash_array",
    "degrees_per_ms",
    "distance_travelled",
    "end_pulse",
    "glow_of",
    "marker_radius",
    "max_trail_length",
    "outline_path",
    "path_length",
    "phase_label",
    "phase_role",
    "point_at_distance",
    "point_on_shape",
    "reset",
    "scale_of",
    "svg_path_data",
    "tick",
    "trail_descriptor",
    "trail_length",
    "trail_points",
    "trigger_pulse",
    "vertices",
]
