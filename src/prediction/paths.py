"""
Point and path primitives shared by path generation and DTW.
Points are plain (x, y) tuples in the keyboard-relative frame.
"""
import math
from typing import List, Sequence, Tuple

import numpy as np

from .errors import InvalidParameter

Point = Tuple[float, float]
Path = List[Point]


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def path_length(path: Sequence[Point]) -> float:
    """Total length of the polyline through `path`."""
    total = 0.0
    for i in range(1, len(path)):
        total += distance(path[i - 1], path[i])
    return total


def point_density(path: Sequence[Point]) -> float:
    """
    Average spacing between consecutive points.

    Returns 0.0 for paths with fewer than two points, which callers treat
    as "do not resample".
    """
    if len(path) < 2:
        return 0.0
    return path_length(path) / (len(path) - 1)


def resample(waypoints: Sequence[Point], spacing: float) -> Path:
    """
    Resample a polyline to points roughly `spacing` apart.

    Each segment is split on its own into `max(1, round(length / spacing))`
    equal steps, so every waypoint (the key centers where the path turns) is
    kept exactly and the resampled polyline has the same length as the input.

    Args:
        waypoints: Polyline vertices.
        spacing: Desired distance between output points.

    Returns:
        List of resampled points. Degenerate input (fewer than two points or
        non-positive spacing) is returned unchanged; a polyline of zero length
        collapses to its first point.
    """
    if len(waypoints) < 2 or spacing <= 0:
        return list(waypoints)

    pts = np.asarray(waypoints, dtype=float)
    deltas = np.diff(pts, axis=0)
    seg = np.hypot(deltas[:, 0], deltas[:, 1])
    if float(seg.sum()) <= 0.0:
        return [tuple(waypoints[0])]

    # Zero-length segments (repeated points) contribute no samples
    steps = np.where(seg > 0, np.maximum(1, np.rint(seg / spacing)), 0).astype(int)

    chunks = []
    for start, delta, count in zip(pts[:-1], deltas, steps):
        if count == 0:
            continue
        t = np.arange(count)[:, np.newaxis] / count
        chunks.append(start + t * delta)
    chunks.append(pts[-1:])

    return [tuple(p) for p in np.concatenate(chunks).tolist()]


def to_relative(
    points: Sequence[Point],
    width: float,
    height: float,
    y_scale: float = 1.0,
) -> Path:
    """
    Convert absolute widget coordinates into the keyboard-relative frame.

    Args:
        points: Absolute (x, y) positions inside the keyboard widget.
        width, height: Widget size in the same units as `points`.
        y_scale: Factor applied to the relative y coordinate so that vertical
            travel is not weighed more than horizontal travel. Must match the
            factor the key layout was built with.
    """
    if width <= 0 or height <= 0:
        raise InvalidParameter(f"Widget size must be positive, got {width}x{height}")
    return [(x / width, (y / height) * y_scale) for x, y in points]
