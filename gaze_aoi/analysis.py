"""Full analysis pipeline: gaze points + AOIs -> AnalysisResult."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import (
    DEFAULT_DISPERSION_THRESHOLD,
    DEFAULT_MIN_FIXATION_DURATION_MS,
    AnalysisConfig,
    IDTConfig,
)
from .detector import FixationDetector
from .domain import AOI, AnalysisResult, GazePoint
from .dwell import DwellTimeAggregator
from .first_fixation import FirstFixationAnalyzer
from .scanpath import ScanpathAnalyzer
from .validation import drop_invalid_gaze_points, validate_aois, validate_gaze_points

logger = logging.getLogger(__name__)


class GazeAnalyzer:
    """Run detection and every AOI metric over one set of inputs.

    Holds configuration only; all data is passed to :meth:`analyze`, so the
    same instance can be reused across sessions and repeated calls with the
    same inputs give identical results.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None) -> None:
        self.config = config or AnalysisConfig()
        self.config.validate()
        self.detector = FixationDetector(self.config.idt)
        self.dwell = DwellTimeAggregator()
        self.scanpath = ScanpathAnalyzer()
        self.first_fixation = FirstFixationAnalyzer(self.config.video_start_time)

    def analyze(self, gaze_points: Sequence[GazePoint], aois: Sequence[AOI]) -> AnalysisResult:
        cfg = self.config
        aois = validate_aois(aois)
        if cfg.drop_invalid_points:
            points, _ = drop_invalid_gaze_points(gaze_points)
        else:
            points = validate_gaze_points(gaze_points)

        fixations = self.detector.detect(points)
        dwell_stats = self.dwell.aggregate(fixations, aois)
        scanpath = self.scanpath.analyze(fixations, aois)
        first = self.first_fixation.analyze(fixations, aois)

        logger.info(
            "Analysed %d gaze points against %d AOIs: %d fixations, path length %.4f",
            len(points),
            len(aois),
            len(fixations),
            scanpath.total_length,
        )

        return AnalysisResult(
            fixations=fixations,
            dwell_time_stats=dwell_stats,
            scanpath_metrics=scanpath,
            first_fixation_metrics=first,
            parameters={
                "dispersion_threshold": cfg.idt.dispersion_threshold,
                "min_fixation_duration": cfg.idt.min_duration_ms,
                "video_start_time": cfg.video_start_time,
            },
        )


def analyze_gaze_data(
    gaze_points: Sequence[GazePoint],
    aois: Sequence[AOI],
    dispersion_threshold: float = DEFAULT_DISPERSION_THRESHOLD,
    min_fixation_duration: float = DEFAULT_MIN_FIXATION_DURATION_MS,
    video_start_time: float = 0.0,
    drop_invalid_points: bool = False,
) -> AnalysisResult:
    cfg = AnalysisConfig(
        idt=IDTConfig(dispersion_threshold=dispersion_threshold, min_duration_ms=min_fixation_duration),
        video_start_time=video_start_time,
        drop_invalid_points=drop_invalid_points,
    )
    return GazeAnalyzer(cfg).analyze(gaze_points, aois)
