"""Time to first fixation and entry counts per AOI."""
from __future__ import annotations

from typing import List, Optional, Sequence

from .domain import AOI, FirstFixationMetrics, Fixation
from .geometry import contains_point
from .matcher import AOIMatcher
from .scanpath import sort_by_start


class FirstFixationAnalyzer:
    """Per-AOI first-fixation metrics.

    The first fixation of an AOI is the earliest fixation assigned to it by
    :class:`AOIMatcher`, so where AOIs overlap only the AOI listed first can
    claim it. ``entry_count`` counts transitions from "not in AOI" to "in AOI"
    across the time-ordered fixations using plain containment. The state
    before the first fixation is "not in AOI", so a session that starts inside
    an AOI counts that as an entry.
    """

    def __init__(self, video_start_time: float = 0.0) -> None:
        self.video_start_time = video_start_time

    def analyze(self, fixations: Sequence[Fixation], aois: Sequence[AOI]) -> List[FirstFixationMetrics]:
        ordered = sort_by_start(fixations)
        matcher = AOIMatcher(aois)
        assigned = [matcher.match_fixation(f) for f in ordered]
        return [self._metrics_for(aoi, ordered, assigned) for aoi in aois]

    def _metrics_for(
        self, aoi: AOI, ordered: Sequence[Fixation], assigned: Sequence[Optional[AOI]]
    ) -> FirstFixationMetrics:
        entry_count = 0
        was_inside = False
        for fixation in ordered:
            is_inside = contains_point(aoi, fixation.x, fixation.y)
            if is_inside and not was_inside:
                entry_count += 1
            was_inside = is_inside

        first = next((f for f, owner in zip(ordered, assigned) if owner is aoi), None)
        if first is None:
            return FirstFixationMetrics(
                aoi_id=aoi.id,
                aoi_name=aoi.name,
                time_to_first_fixation=None,
                first_fixation_duration=None,
                first_fixation_x=None,
                first_fixation_y=None,
                entry_count=entry_count,
            )

        return FirstFixationMetrics(
            aoi_id=aoi.id,
            aoi_name=aoi.name,
            time_to_first_fixation=(first.start_time - self.video_start_time) * 1000.0,
            first_fixation_duration=first.duration,
            first_fixation_x=first.x,
            first_fixation_y=first.y,
            entry_count=entry_count,
        )


def calculate_first_fixation(
    fixations: Sequence[Fixation], aois: Sequence[AOI], video_start_time: float = 0.0
) -> List[FirstFixationMetrics]:
    return FirstFixationAnalyzer(video_start_time).analyze(fixations, aois)
