"""Shared value types and errors for the breathing core."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ConfigError(ValueError):
    """Raised when a breathing configuration is rejected at construction time."""


class SessionError(RuntimeError):
    """Raised on session misuse, e.g. reconfiguring while active."""


class ShapeKind(Enum):
    """Polygon the marker travels around."""

    TRIANGLE = "triangle"
    SQUARE = "square"

    @property
    def phase_count(self) -> int:
        return 3 if self is ShapeKind.TRIANGLE else 4

    @classmethod
    def parse(cls, value: ShapeKind | str) -> ShapeKind:
        """Accept a member or its string value. Raises ConfigError otherwise."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigError(f"Unknown shape kind: {value!r}") from None


class PhaseRole(Enum):
    """Role a phase plays in the inhale/hold/exhale/hold rhythm."""

    INHALE = "inhale"
    HOLD_FULL = "hold_full"
    EXHALE = "exhale"
    HOLD_EMPTY = "hold_empty"


@dataclass(frozen=True, slots=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class TrailDescriptor:
    """Dash encoding of the trailing segment along a closed path.

    Attributes:
        length: Visible dash length.
        gap: Hidden remainder of the path (path length minus ``length``).
        offset: Dash offset; unwrapped, the renderer wraps it modulo the
            path length.
    """

    length: float
    gap: float
    offset: float


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything a renderer needs to draw one animation frame."""

    position: Position
    rotation: float
    scale: float
    glow_intensity: float
    trail: TrailDescriptor
    pulse_visible: bool
    current_phase: int
    marker_radius: float
    phase_label: str
