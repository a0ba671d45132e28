"""Geometry helpers for gaze calculations."""
from __future__ import annotations

import math
from typing import Sequence, Tuple

from .domain import AOI, GazePoint


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points in normalised coordinates."""
    dx = x2 - x1
    dy = y2 - y1
    return math.sqrt(dx * dx + dy * dy)


def dispersion(points: Sequence[GazePoint]) -> float:
    """Maximum pairwise distance over all points (0 for fewer than two).

    This is the exact diameter of the point set, not the bounding-box
    approximation; the detector's boundary decisions depend on it.
    """
    n = len(points)
    if n < 2:
        return 0.0

    max_dist = 0.0
    for i in range(n):
        pi = points[i]
        for j in range(i + 1, n):
            pj = points[j]
            d = distance(pi.x, pi.y, pj.x, pj.y)
            if d > max_dist:
                max_dist = d
    return max_dist


def centroid(points: Sequence[GazePoint]) -> Tuple[float, float]:
    """Arithmetic mean of x and y; ``(0.0, 0.0)`` for an empty set."""
    if not points:
        return 0.0, 0.0
    n = len(points)
    return sum(p.x for p in points) / n, sum(p.y for p in points) / n


def contains_point(aoi: AOI, x: float, y: float) -> bool:
    """True if (x, y) lies inside the AOI rectangle, edges included.

    Zero-area rectangles never contain any point, not even one lying exactly on
    their collapsed edge.
    """
    b = aoi.bounds
    if b.width == 0 or b.height == 0:
        return False
    return b.x <= x <= b.x + b.width and b.y <= y <= b.y + b.height
