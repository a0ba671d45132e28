"""Raw gaze samples and the fixations derived from them.

Coordinates are normalised to the stimulus (0-1 on both axes) but are not
clamped: samples outside that range represent gaze off the stimulus and are
carried through unchanged. Timestamps are stimulus time in seconds.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class GazePoint:
    """Single gaze observation on the stimulus."""

    timestamp: float
    x: float
    y: float
    frame_number: int = 0
    screen_x: float = 0.0
    screen_y: float = 0.0

    @classmethod
    def from_video_time(
        cls,
        timestamp: float,
        x: float,
        y: float,
        frame_rate: float,
        screen_x: float = 0.0,
        screen_y: float = 0.0,
    ) -> "GazePoint":
        """Build a point whose frame number is estimated from the video frame rate."""
        return cls(
            timestamp=timestamp,
            x=x,
            y=y,
            frame_number=int(math.floor(timestamp * frame_rate)),
            screen_x=screen_x,
            screen_y=screen_y,
        )

    def is_finite(self) -> bool:
        return math.isfinite(self.timestamp) and math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class Fixation:
    """Stable gaze period found by the dispersion-threshold detector."""

    id: int
    start_time: float
    end_time: float
    duration: float  # milliseconds
    x: float
    y: float
    point_count: int
    points: Tuple[GazePoint, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class GazeAnnotation:
    """A recorded viewing session as exported by the capture side."""

    video_name: str
    gaze_points: Tuple[GazePoint, ...]
    video_duration: Optional[float] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    frame_rate: Optional[float] = None
    recording_start_time: Optional[str] = None
    recording_end_time: Optional[str] = None
    has_audio: bool = False
