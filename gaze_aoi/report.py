"""Tabular exports and scanpath drawing primitives for an AnalysisResult."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import ScanpathDrawingConfig
from .domain import AOI, AnalysisResult, Fixation, ScanpathMetrics
from .matcher import AOIMatcher
from .scanpath import sort_by_start

NOT_AVAILABLE = "N/A"
SEQUENCE_SEPARATOR = " -> "

FIXATION_COLUMNS = ["id", "start_time_s", "end_time_s", "duration_ms", "x", "y", "point_count", "aoi"]
DWELL_COLUMNS = ["aoi_id", "aoi_name", "total_dwell_ms", "fixation_count", "mean_duration_ms", "percent_total"]
FIRST_FIXATION_COLUMNS = [
    "aoi_id",
    "aoi_name",
    "ttff_ms",
    "first_duration_ms",
    "first_x",
    "first_y",
    "entry_count",
]
SCANPATH_COLUMNS = ["metric", "value"]


def _fixed(value: Optional[float], digits: int) -> str:
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.{digits}f}"


@dataclass(frozen=True)
class CSVReport:
    """The four CSV text blocks of an analysis."""

    fixations: str
    dwell_time: str
    first_fixation: str
    scanpath: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "fixations": self.fixations,
            "dwell_time": self.dwell_time,
            "first_fixation": self.first_fixation,
            "scanpath": self.scanpath,
        }


@dataclass(frozen=True)
class ScanpathCircle:
    id: int
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class ScanpathLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class ScanpathDrawing:
    circles: List[ScanpathCircle]
    lines: List[ScanpathLine]


def scanpath_drawing_data(
    fixations: Sequence[Fixation], config: Optional[ScanpathDrawingConfig] = None
) -> ScanpathDrawing:
    """One circle per fixation and one line per consecutive pair.

    Circle radius is interpolated linearly between ``min_radius`` and
    ``max_radius`` by the fixation's duration relative to the shortest and
    longest fixation of the session. When all durations are equal every
    circle gets ``min_radius``.
    """
    cfg = config or ScanpathDrawingConfig()
    cfg.validate()

    ordered = sort_by_start(fixations)
    if not ordered:
        return ScanpathDrawing(circles=[], lines=[])

    durations = np.array([f.duration for f in ordered], dtype=float)
    d_min = durations.min()
    d_range = durations.max() - d_min
    if d_range == 0:
        d_range = 1.0
    radii = cfg.min_radius + ((durations - d_min) / d_range) * (cfg.max_radius - cfg.min_radius)

    circles = [
        ScanpathCircle(id=f.id, x=f.x, y=f.y, radius=float(r)) for f, r in zip(ordered, radii)
    ]
    lines = [
        ScanpathLine(x1=prev.x, y1=prev.y, x2=curr.x, y2=curr.y)
        for prev, curr in zip(ordered, ordered[1:])
    ]
    return ScanpathDrawing(circles=circles, lines=lines)


def transition_matrix_frame(metrics: ScanpathMetrics) -> pd.DataFrame:
    """Square transition-count table, rows = from, columns = to.

    Labels appear in order of first occurrence in the matrix.
    """
    labels: List[str] = []
    for source, row in metrics.aoi_transition_matrix.items():
        for label in (source, *row.keys()):
            if label not in labels:
                labels.append(label)

    frame = pd.DataFrame(0, index=labels, columns=labels, dtype=int)
    for source, row in metrics.aoi_transition_matrix.items():
        for target, count in row.items():
            frame.loc[source, target] = count
    frame.index.name = "from"
    frame.columns.name = "to"
    return frame


class ReportFormatter:
    """Render an AnalysisResult as DataFrames and CSV text."""

    def __init__(
        self,
        result: AnalysisResult,
        aois: Sequence[AOI],
        drawing_config: Optional[ScanpathDrawingConfig] = None,
    ) -> None:
        self.result = result
        self.aois = list(aois)
        self.drawing_config = drawing_config or ScanpathDrawingConfig()

    def fixations_frame(self) -> pd.DataFrame:
        matcher = AOIMatcher(self.aois)
        rows = [
            [
                f.id,
                _fixed(f.start_time, 3),
                _fixed(f.end_time, 3),
                _fixed(f.duration, 1),
                _fixed(f.x, 4),
                _fixed(f.y, 4),
                f.point_count,
                matcher.label(f),
            ]
            for f in self.result.fixations
        ]
        return pd.DataFrame(rows, columns=FIXATION_COLUMNS)

    def dwell_time_frame(self) -> pd.DataFrame:
        rows = [
            [
                d.aoi_id,
                d.aoi_name,
                _fixed(d.total_dwell_time, 1),
                d.fixation_count,
                _fixed(d.mean_fixation_duration, 1),
                _fixed(d.percent_of_total, 2),
            ]
            for d in self.result.dwell_time_stats
        ]
        return pd.DataFrame(rows, columns=DWELL_COLUMNS)

    def first_fixation_frame(self) -> pd.DataFrame:
        rows = [
            [
                m.aoi_id,
                m.aoi_name,
                _fixed(m.time_to_first_fixation, 1),
                _fixed(m.first_fixation_duration, 1),
                _fixed(m.first_fixation_x, 4),
                _fixed(m.first_fixation_y, 4),
                m.entry_count,
            ]
            for m in self.result.first_fixation_metrics
        ]
        return pd.DataFrame(rows, columns=FIRST_FIXATION_COLUMNS)

    def scanpath_frame(self) -> pd.DataFrame:
        sp = self.result.scanpath_metrics
        rows = [
            ["total_length", _fixed(sp.total_length, 4)],
            ["fixation_count", str(sp.fixation_count)],
            ["total_duration_ms", _fixed(sp.total_duration, 1)],
            ["mean_fixation_duration_ms", _fixed(sp.mean_fixation_duration, 1)],
            ["mean_saccade_amplitude", _fixed(sp.mean_saccade_amplitude, 4)],
            ["aoi_sequence", SEQUENCE_SEPARATOR.join(sp.aoi_sequence)],
        ]
        return pd.DataFrame(rows, columns=SCANPATH_COLUMNS)

    def to_dataframes(self) -> Dict[str, pd.DataFrame]:
        return {
            "fixations": self.fixations_frame(),
            "dwell_time": self.dwell_time_frame(),
            "first_fixation": self.first_fixation_frame(),
            "scanpath": self.scanpath_frame(),
        }

    def to_csv(self) -> CSVReport:
        frames = self.to_dataframes()
        text = {name: df.to_csv(index=False, lineterminator="\n") for name, df in frames.items()}
        return CSVReport(**text)

    def transition_matrix(self) -> pd.DataFrame:
        return transition_matrix_frame(self.result.scanpath_metrics)

    def drawing_data(self) -> ScanpathDrawing:
        return scanpath_drawing_data(self.result.fixations, self.drawing_config)

    def write(self, output_dir: str | Path, prefix: str = "") -> Dict[str, Path]:
        """Write the four CSV blocks as ``<prefix><name>.csv`` files."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        written: Dict[str, Path] = {}
        for name, text in self.to_csv().as_dict().items():
            path = output_dir / f"{prefix}{name}.csv"
            path.write_text(text, encoding="utf-8")
            written[name] = path
        return written


def analysis_to_csv(result: AnalysisResult, aois: Sequence[AOI]) -> CSVReport:
    return ReportFormatter(result, aois).to_csv()
