"""Trail length and dash offset along the closed outline.

The trail is driven by cumulative progress, which never resets on phase or
cycle wrap, so it grows once from zero and then holds at its maximum length.
The offset is left unwrapped; path renderers wrap dash patterns modulo the
path length on their own, which keeps the loop seamless at L boundaries.
"""
from __future__ import annotations

import math

from tick_breath.constants import TRAIL_LENGTH_RATIO
from tick_breath.geometry import path_length, point_at_distance
from tick_breath.types import Position, ShapeKind, TrailDescriptor


def max_trail_length(shape: ShapeKind) -> float:
    return path_length(shape) * TRAIL_LENGTH_RATIO


def distance_travelled(
    shape: ShapeKind, cumulative_progress: float, phase_count: int | None = None,
) -> float:
    """Unbounded distance along the path since the session started."""
    if phase_count is None:
        phase_count = shape.phase_count
    return cumulative_progress / phase_count * path_length(shape)


def trail_length(
    shape: ShapeKind, cumulative_progress: float, phase_count: int | None = None,
) -> float:
    return min(
        distance_travelled(shape, cumulative_progress, phase_count),
        max_trail_length(shape),
    )


def trail_descriptor(
    shape: ShapeKind, cumulative_progress: float, phase_count: int | None = None,
) -> TrailDescriptor:
    """Dash length, gap and offset placing the trail's leading edge on the marker."""
    distance = distance_travelled(shape, cumulative_progress, phase_count)
    length = min(distance, max_trail_length(shape))
    return TrailDescriptor(
        length=length,
        gap=path_length(shape) - length,
        offset=-distance + length,
    )


def dash_array(trail: TrailDescriptor) -> str:
    """SVG ``stroke-dasharray`` value."""
    return f"{trail.length} {trail.gap}"


def trail_points(shape: ShapeKind, trail: TrailDescriptor) -> tuple[Position, ...]:
    """Polyline from the trailing edge to the leading edge of the trail.

    Emulates how a path renderer applies the dash pattern: the dash starts at
    ``-offset`` (modulo the path length) and runs for ``trail.length``. Polygon
    corners crossed by the trail are included. Empty when there is no trail.
    """
    if trail.length <= 0:
        return ()
    edge_len = path_length(shape) / shape.phase_count
    start = -trail.offset
    end = start + trail.length
    distances = [start]
    corner = (math.floor(start / edge_len) + 1) * edge_len
    while corner < end:
        distances.append(corner)
        corner += edge_len
    distances.append(end)
    return tuple(point_at_distance(shape, d) for d in distances)
