"""Domain models for gaze samples, AOIs and derived metrics."""

from .gaze import GazePoint, Fixation, GazeAnnotation
from .aoi import AOI, AOIBounds, OUTSIDE_LABEL, OUTSIDE_AOI_ID, OUTSIDE_AOI_NAME
from .results import (
    DwellTimeStats,
    FirstFixationMetrics,
    ScanpathMetrics,
    AnalysisResult,
)

__all__ = [
    "GazePoint",
    "Fixation",
    "GazeAnnotation",
    "AOI",
    "AOIBounds",
    "OUTSIDE_LABEL",
    "OUTSIDE_AOI_ID",
    "OUTSIDE_AOI_NAME",
    "DwellTimeStats",
    "FirstFixationMetrics",
    "ScanpathMetrics",
    "AnalysisResult",
]
