"""Fixation detection (I-DT) and AOI metrics for gaze recordings."""

from .config import AnalysisConfig, IDTConfig, ScanpathDrawingConfig
from .domain import (
    AOI,
    AOIBounds,
    AnalysisResult,
    DwellTimeStats,
    FirstFixationMetrics,
    Fixation,
    GazeAnnotation,
    GazePoint,
    ScanpathMetrics,
)
from .errors import GazeAnalysisError, InvalidAOI, InvalidGazeData, InvalidParameters
from .geometry import centroid, contains_point, dispersion, distance
from .detector import FixationDetector, detect_fixations_idt
from .matcher import AOIMatcher, aoi_label, match_fixation
from .dwell import DwellTimeAggregator, calculate_dwell_time
from .scanpath import ScanpathAnalyzer, calculate_scanpath_metrics
from .first_fixation import FirstFixationAnalyzer, calculate_first_fixation
from .analysis import GazeAnalyzer, analyze_gaze_data
from .report import CSVReport, ReportFormatter, analysis_to_csv, scanpath_drawing_data, transition_matrix_frame

__all__ = [
    "AnalysisConfig",
    "IDTConfig",
    "ScanpathDrawingConfig",
    "AOI",
    "AOIBounds",
    "AnalysisResult",
    "DwellTimeStats",
    "FirstFixationMetrics",
    "Fixation",
    "GazeAnnotation",
    "GazePoint",
    "ScanpathMetrics",
    "GazeAnalysisError",
    "InvalidAOI",
    "InvalidGazeData",
    "InvalidParameters",
    "centroid",
    "contains_point",
    "dispersion",
    "distance",
    "FixationDetector",
    "detect_fixations_idt",
    "AOIMatcher",
    "aoi_label",
    "match_fixation",
    "DwellTimeAggregator",
    "calculate_dwell_time",
    "ScanpathAnalyzer",
    "calculate_scanpath_metrics",
    "FirstFixationAnalyzer",
    "calculate_first_fixation",
    "GazeAnalyzer",
    "analyze_gaze_data",
    "CSVReport",
    "ReportFormatter",
    "analysis_to_csv",
    "scanpath_drawing_data",
    "transition_matrix_frame",
]
