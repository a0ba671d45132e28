"""Boundary checks applied before any computation."""
from __future__ import annotations

import logging
import math
from typing import Iterable, List, Sequence, Tuple

from .domain import AOI, GazePoint
from .errors import InvalidAOI, InvalidGazeData

logger = logging.getLogger(__name__)


def validate_aois(aois: Iterable[AOI]) -> List[AOI]:
    """Reject AOIs with non-finite bounds or negative width/height."""
    checked: List[AOI] = []
    for aoi in aois:
        b = aoi.bounds
        values = (b.x, b.y, b.width, b.height)
        if not all(math.isfinite(v) for v in values):
            raise InvalidAOI(f"AOI {aoi.id!r} ({aoi.name}) has non-finite bounds: {values}")
        if b.width < 0 or b.height < 0:
            raise InvalidAOI(
                f"AOI {aoi.id!r} ({aoi.name}) has negative size: width={b.width}, height={b.height}"
            )
        checked.append(aoi)
    return checked


def validate_gaze_points(points: Iterable[GazePoint]) -> List[GazePoint]:
    """Fail on the first point with a NaN/inf timestamp or coordinate."""
    checked: List[GazePoint] = []
    for idx, point in enumerate(points):
        if not point.is_finite():
            raise InvalidGazeData(
                f"Gaze point #{idx} is not finite: "
                f"timestamp={point.timestamp}, x={point.x}, y={point.y}"
            )
        checked.append(point)
    return checked


def drop_invalid_gaze_points(points: Sequence[GazePoint]) -> Tuple[List[GazePoint], int]:
    """Return the finite points and the number of points that were dropped."""
    kept = [p for p in points if p.is_finite()]
    dropped = len(points) - len(kept)
    if dropped:
        logger.warning("Dropped %d of %d gaze points with non-finite values", dropped, len(points))
    return kept, dropped
