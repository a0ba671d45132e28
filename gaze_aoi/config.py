"""Configuration dataclasses for fixation detection and AOI analysis."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

from .errors import InvalidParameters

# 3% of the stimulus, roughly 1-2 degrees of visual angle at typical distances
DEFAULT_DISPERSION_THRESHOLD = 0.03
DEFAULT_MIN_FIXATION_DURATION_MS = 100.0


@dataclass(frozen=True)
class IDTConfig:
    """Configuration for the I-DT dispersion-threshold detector."""

    dispersion_threshold: float = DEFAULT_DISPERSION_THRESHOLD
    min_duration_ms: float = DEFAULT_MIN_FIXATION_DURATION_MS

    def validate(self) -> None:
        if not math.isfinite(self.dispersion_threshold) or self.dispersion_threshold < 0:
            raise InvalidParameters(
                f"dispersion_threshold must be a finite value >= 0, got {self.dispersion_threshold!r}"
            )
        if not math.isfinite(self.min_duration_ms) or self.min_duration_ms <= 0:
            raise InvalidParameters(
                f"min_duration_ms must be a finite value > 0, got {self.min_duration_ms!r}"
            )


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a full analysis run."""

    idt: IDTConfig = field(default_factory=IDTConfig)

    # Stimulus time (seconds) that time-to-first-fixation is measured from
    video_start_time: float = 0.0

    # False: any NaN/inf sample fails the call
    # True:  offending samples are dropped and logged
    drop_invalid_points: bool = False

    def validate(self) -> None:
        self.idt.validate()
        if not math.isfinite(self.video_start_time):
            raise InvalidParameters(
                f"video_start_time must be finite, got {self.video_start_time!r}"
            )


@dataclass(frozen=True)
class ScanpathDrawingConfig:
    """Circle radius range used for scanpath visualisation primitives."""

    min_radius: float = 5.0
    max_radius: float = 30.0

    def validate(self) -> None:
        if not (math.isfinite(self.min_radius) and math.isfinite(self.max_radius)):
            raise InvalidParameters(
                f"radii must be finite, got ({self.min_radius}, {self.max_radius})"
            )
        if self.min_radius < 0 or self.max_radius < self.min_radius:
            raise InvalidParameters(
                f"radius range must satisfy 0 <= min <= max, got ({self.min_radius}, {self.max_radius})"
            )
