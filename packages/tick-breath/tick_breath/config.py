"""Breathing session configuration."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from tick_breath.constants import PHASE_DURATION_MS
from tick_breath.types import ConfigError, ShapeKind


def degrees_per_ms(phase_duration_ms: float, phase_count: int) -> float:
    """Rotation speed giving one full turn per breathing cycle."""
    return 360 / (phase_duration_ms * phase_count)


@dataclass(frozen=True)
class BreathingConfig:
    """Immutable configuration for one active session.

    Attributes:
        shape: Polygon the marker travels around. Strings are accepted and
            converted to ShapeKind.
        phase_durations_ms: One duration per phase, in shape traversal order.
    """

    shape: ShapeKind
    phase_durations_ms: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", ShapeKind.parse(self.shape))
        object.__setattr__(self, "phase_durations_ms", tuple(self.phase_durations_ms))
        expected = self.shape.phase_count
        if len(self.phase_durations_ms) != expected:
            raise ConfigError(
                f"{self.shape.value} needs {expected} phase durations, "
                f"got {len(self.phase_durations_ms)}"
            )
        for duration in self.phase_durations_ms:
            if duration <= 0:
                raise ConfigError(f"phase duration must be > 0, got {duration}")

    @classmethod
    def uniform(
        cls, shape: ShapeKind | str, phase_duration_ms: float = PHASE_DURATION_MS,
    ) -> BreathingConfig:
        """Every phase of ``shape`` lasts ``phase_duration_ms``."""
        shape = ShapeKind.parse(shape)
        return cls(shape, (phase_duration_ms,) * shape.phase_count)

    @classmethod
    def from_durations(
        cls, shape: ShapeKind | str, durations: Sequence[float],
    ) -> BreathingConfig:
        return cls(ShapeKind.parse(shape), tuple(durations))

    @property
    def phase_count(self) -> int:
        return self.shape.phase_count

    @property
    def cycle_duration_ms(self) -> float:
        return sum(self.phase_durations_ms)

    @property
    def phase_duration_ms(self) -> float:
        """Single per-phase duration used for phase advance and rotation.

        Mean of the phase durations, so one cycle still spans the configured
        total. Equal to every duration when the pattern is uniform.
        """
        return self.cycle_duration_ms / self.phase_count

    @property
    def degrees_per_ms(self) -> float:
        return degrees_per_ms(self.phase_duration_ms, self.phase_count)
