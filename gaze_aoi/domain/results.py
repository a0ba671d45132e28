"""Value objects produced once per analysis run."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .gaze import Fixation


@dataclass(frozen=True)
class DwellTimeStats:
    """Dwell-time aggregate for one AOI (or the outside bucket)."""

    aoi_id: str
    aoi_name: str
    total_dwell_time: float  # ms
    fixation_count: int
    mean_fixation_duration: float  # ms
    percent_of_total: float


@dataclass(frozen=True)
class FirstFixationMetrics:
    """Time-to-first-fixation and entry count for one AOI.

    The ``first_*`` fields are ``None`` when the AOI never received a fixation.
    """

    aoi_id: str
    aoi_name: str
    time_to_first_fixation: Optional[float]  # ms
    first_fixation_duration: Optional[float]  # ms
    first_fixation_x: Optional[float]
    first_fixation_y: Optional[float]
    entry_count: int


@dataclass(frozen=True)
class ScanpathMetrics:
    """Path geometry and AOI visit structure of a fixation sequence."""

    total_length: float = 0.0
    fixation_count: int = 0
    total_duration: float = 0.0  # ms
    mean_fixation_duration: float = 0.0  # ms
    mean_saccade_amplitude: float = 0.0
    saccade_amplitudes: Tuple[float, ...] = ()
    aoi_sequence: Tuple[str, ...] = ()
    # from-label -> to-label -> count, insertion ordered by first occurrence;
    # stored as read-only mappings
    aoi_transition_matrix: Mapping[str, Mapping[str, int]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        rows = {src: MappingProxyType(dict(row)) for src, row in self.aoi_transition_matrix.items()}
        object.__setattr__(self, "aoi_transition_matrix", MappingProxyType(rows))

    def transition_count(self, source: str, target: str) -> int:
        return self.aoi_transition_matrix.get(source, {}).get(target, 0)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything derived from one set of gaze points and AOIs."""

    fixations: List[Fixation]
    dwell_time_stats: List[DwellTimeStats]
    scanpath_metrics: ScanpathMetrics
    first_fixation_metrics: List[FirstFixationMetrics]
    parameters: Dict[str, float]
