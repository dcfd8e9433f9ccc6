"""Scale and glow curves for the inhale/hold/exhale/hold rhythm.

All functions take a phase index, an intra-phase progress in [0.0, 1.0] and
the phase count (3 or 4). Phase roles:

    0  inhale      scale MIN -> MAX, glow 0 -> 1
    1  hold full   scale MAX,        glow 1
    2  exhale      scale MAX -> MIN, glow 1 -> 0.3
    3  hold empty  scale MIN,        glow 0.3   (4 phases only)
"""
from __future__ import annotations

from tick_breath.constants import (
    DIM_GLOW,
    MAX_GLOW,
    MAX_SCALE,
    MIN_GLOW,
    MIN_SCALE,
    PHASE_LABELS,
)
from tick_breath.types import PhaseRole, ShapeKind


def _lerp(a: float, b: float, t: float) -> float:
    return a * (1 - t) + b * t


def phase_role(phase: int, phase_count: int) -> PhaseRole:
    """Role of ``phase``. Anything past hold-full is exhale for 3 phases."""
    if phase == 0:
        return PhaseRole.INHALE
    if phase == 1:
        return PhaseRole.HOLD_FULL
    if phase_count == 4 and phase == 3:
        return PhaseRole.HOLD_EMPTY
    return PhaseRole.EXHALE


def scale_of(phase: int, progress: float, phase_count: int) -> float:
    role = phase_role(phase, phase_count)
    if role is PhaseRole.INHALE:
        return _lerp(MIN_SCALE, MAX_SCALE, progress)
    if role is PhaseRole.HOLD_FULL:
        return MAX_SCALE
    if role is PhaseRole.EXHALE:
        return _lerp(MAX_SCALE, MIN_SCALE, progress)
    return MIN_SCALE


def glow_of(phase: int, progress: float, phase_count: int) -> float:
    role = phase_role(phase, phase_count)
    if role is PhaseRole.INHALE:
        return _lerp(MIN_GLOW, MAX_GLOW, progress)
    if role is PhaseRole.HOLD_FULL:
        return MAX_GLOW
    if role is PhaseRole.EXHALE:
        return _lerp(MAX_GLOW, DIM_GLOW, progress)
    return DIM_GLOW


def phase_label(shape: ShapeKind, phase: int) -> str:
    """Display label for a phase, e.g. ``"Breathe In"``."""
    labels = PHASE_LABELS[shape.value]
    return labels[phase % len(labels)]
