"""Polygon geometry: vertices, marker placement and outlines.

All functions are pure. Coordinates live in the fixed 400x300 canvas space
defined in ``tick_breath.constants``.
"""
from __future__ import annotations

import math

from tick_breath.constants import (
    PATH_LENGTHS,
    SQUARE_POINTS,
    TRIANGLE_ANGLES,
    TRIANGLE_CENTER,
    TRIANGLE_RADIUS,
)
from tick_breath.types import Position, ShapeKind


def _lerp(a: Position, b: Position, t: float) -> Position:
    # Weighted form keeps t=0 and t=1 exact.
    return Position(a.x * (1 - t) + b.x * t, a.y * (1 - t) + b.y * t)


def vertices(shape: ShapeKind) -> tuple[Position, ...]:
    """Return the polygon's vertices in their canonical order."""
    if shape is ShapeKind.TRIANGLE:
        cx, cy = TRIANGLE_CENTER
        return tuple(
            Position(
                cx + TRIANGLE_RADIUS * math.cos(math.radians(angle)),
                cy + TRIANGLE_RADIUS * math.sin(math.radians(angle)),
            )
            for angle in TRIANGLE_ANGLES
        )
    return tuple(Position(x, y) for x, y in SQUARE_POINTS)


def edge(shape: ShapeKind, phase: int) -> tuple[Position, Position]:
    """Return the (start, end) vertices traversed during ``phase``."""
    points = vertices(shape)
    n = len(points)
    if shape is ShapeKind.TRIANGLE:
        return points[(phase + 2) % n], points[phase % n]
    return points[phase % n], points[(phase + 1) % n]


def point_on_shape(shape: ShapeKind, phase: int, progress: float) -> Position:
    """Marker position for a phase index and intra-phase progress."""
    start, end = edge(shape, phase)
    return _lerp(start, end, progress)


def outline_path(shape: ShapeKind) -> tuple[Position, ...]:
    """Closed polygon starting at the phase-0 start vertex, in traversal order."""
    return tuple(edge(shape, phase)[0] for phase in range(shape.phase_count))


def svg_path_data(shape: ShapeKind) -> str:
    """SVG ``d`` attribute for the outline, e.g. ``"M 100 75 L 300 75 ... Z"``."""
    points = outline_path(shape)
    head, *rest = points
    parts = [f"M {head.x:g} {head.y:g}"]
    parts.extend(f"L {p.x:g} {p.y:g}" for p in rest)
    parts.append("Z")
    return " ".join(parts)


def path_length(shape: ShapeKind) -> float:
    """Nominal closed-path length used for trail math."""
    return PATH_LENGTHS[shape.value]


def point_at_distance(shape: ShapeKind, distance: float) -> Position:
    """Point reached after travelling ``distance`` along the outline.

    Distance is in nominal path units and wraps modulo the path length. Every
    edge covers an equal share of the path.
    """
    length = path_length(shape)
    n = shape.phase_count
    edge_len = length / n
    d = distance % length
    index = min(int(d // edge_len), n - 1)
    t = (d - index * edge_len) / edge_len
    return point_on_shape(shape, index, t)
