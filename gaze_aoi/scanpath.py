"""Scanpath geometry and AOI visit structure."""
from __future__ import annotations

from typing import Dict, List, Sequence

from .domain import AOI, Fixation, ScanpathMetrics
from .geometry import distance
from .matcher import AOIMatcher


def sort_by_start(fixations: Sequence[Fixation]) -> List[Fixation]:
    return sorted(fixations, key=lambda f: f.start_time)


def collapse_repeats(labels: Sequence[str]) -> List[str]:
    """Drop consecutive duplicates: A, A, B, A -> A, B, A."""
    collapsed: List[str] = []
    for label in labels:
        if not collapsed or collapsed[-1] != label:
            collapsed.append(label)
    return collapsed


def count_transitions(labels: Sequence[str]) -> Dict[str, Dict[str, int]]:
    """Count every consecutive (from, to) pair, self-transitions included."""
    matrix: Dict[str, Dict[str, int]] = {}
    for prev, curr in zip(labels, labels[1:]):
        row = matrix.setdefault(prev, {})
        row[curr] = row.get(curr, 0) + 1
    return matrix


class ScanpathAnalyzer:
    """Compute path length, saccade amplitudes, AOI sequence and transitions."""

    def analyze(self, fixations: Sequence[Fixation], aois: Sequence[AOI]) -> ScanpathMetrics:
        if not fixations:
            return ScanpathMetrics()

        ordered = sort_by_start(fixations)

        amplitudes = [
            distance(prev.x, prev.y, curr.x, curr.y) for prev, curr in zip(ordered, ordered[1:])
        ]
        total_length = sum(amplitudes, 0.0)

        # transitions use the per-fixation labels, not the collapsed sequence
        labels = AOIMatcher(aois).labels(ordered)

        total_duration = sum(f.duration for f in ordered)
        return ScanpathMetrics(
            total_length=total_length,
            fixation_count=len(ordered),
            total_duration=total_duration,
            mean_fixation_duration=total_duration / len(ordered),
            mean_saccade_amplitude=total_length / len(amplitudes) if amplitudes else 0.0,
            saccade_amplitudes=tuple(amplitudes),
            aoi_sequence=tuple(collapse_repeats(labels)),
            aoi_transition_matrix=count_transitions(labels),
        )


def calculate_scanpath_metrics(fixations: Sequence[Fixation], aois: Sequence[AOI]) -> ScanpathMetrics:
    return ScanpathAnalyzer().analyze(fixations, aois)
