"""I-DT (dispersion-threshold identification) fixation detector."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .config import DEFAULT_DISPERSION_THRESHOLD, DEFAULT_MIN_FIXATION_DURATION_MS, IDTConfig
from .domain import Fixation, GazePoint
from .geometry import centroid, dispersion
from .validation import validate_gaze_points

logger = logging.getLogger(__name__)


class FixationDetector:
    """Group time-ordered gaze points into fixations with a sliding window.

    A window is first grown until it spans ``min_duration_ms``. If its
    dispersion is within the threshold it is extended one point at a time
    until the next point would push dispersion over the threshold, and the
    result is emitted as a fixation. Otherwise the window start moves on by
    a single sample. Trailing samples that never span the minimum duration are
    discarded.
    """

    def __init__(self, config: Optional[IDTConfig] = None) -> None:
        self.config = config or IDTConfig()
        self.config.validate()

    def detect(self, points: Sequence[GazePoint]) -> List[Fixation]:
        cfg = self.config
        checked = validate_gaze_points(points)
        if len(checked) < 2:
            return []

        ordered = sorted(checked, key=lambda p: p.timestamp)
        n = len(ordered)

        fixations: List[Fixation] = []
        window_start = 0
        rejected_windows = 0

        while window_start < n:
            # grow until the window spans the minimum duration
            window_end = window_start
            t0 = ordered[window_start].timestamp
            while window_end < n and (ordered[window_end].timestamp - t0) * 1000.0 < cfg.min_duration_ms:
                window_end += 1

            if window_end >= n:
                break

            window = ordered[window_start : window_end + 1]
            if dispersion(window) > cfg.dispersion_threshold:
                rejected_windows += 1
                window_start += 1
                continue

            while window_end + 1 < n:
                candidate = ordered[window_start : window_end + 2]
                if dispersion(candidate) > cfg.dispersion_threshold:
                    break
                window_end += 1
                window = candidate

            start_time = window[0].timestamp
            end_time = window[-1].timestamp
            duration = (end_time - start_time) * 1000.0
            if duration >= cfg.min_duration_ms:
                cx, cy = centroid(window)
                fixations.append(
                    Fixation(
                        id=len(fixations) + 1,
                        start_time=start_time,
                        end_time=end_time,
                        duration=duration,
                        x=cx,
                        y=cy,
                        point_count=len(window),
                        points=tuple(window),
                    )
                )

            window_start = window_end + 1

        logger.debug(
            "I-DT: %d samples, %d rejected windows (threshold=%.4f, min_duration=%.1f ms)",
            n,
            rejected_windows,
            cfg.dispersion_threshold,
            cfg.min_duration_ms,
        )
        logger.info("Detected %d fixations from %d gaze points", len(fixations), n)
        return fixations


def detect_fixations_idt(
    points: Sequence[GazePoint],
    dispersion_threshold: float = DEFAULT_DISPERSION_THRESHOLD,
    min_duration_ms: float = DEFAULT_MIN_FIXATION_DURATION_MS,
) -> List[Fixation]:
    cfg = IDTConfig(dispersion_threshold=dispersion_threshold, min_duration_ms=min_duration_ms)
    return FixationDetector(cfg).detect(points)
