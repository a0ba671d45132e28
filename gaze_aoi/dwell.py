"""Dwell-time statistics per AOI."""
from __future__ import annotations

from typing import List, Sequence

from .domain import AOI, OUTSIDE_AOI_ID, OUTSIDE_AOI_NAME, DwellTimeStats, Fixation
from .geometry import contains_point
from .matcher import AOIMatcher


def _stats(aoi_id: str, aoi_name: str, fixations: Sequence[Fixation], session_total: float) -> DwellTimeStats:
    total = sum((f.duration for f in fixations), 0.0)
    count = len(fixations)
    return DwellTimeStats(
        aoi_id=aoi_id,
        aoi_name=aoi_name,
        total_dwell_time=total,
        fixation_count=count,
        mean_fixation_duration=total / count if count > 0 else 0.0,
        percent_of_total=(total / session_total) * 100.0 if session_total > 0 else 0.0,
    )


class DwellTimeAggregator:
    """Sum fixation durations per AOI.

    Every AOI is credited independently with each fixation whose centroid it
    contains, so overlapping AOIs can both claim the same fixation. The
    trailing "Outside AOIs" record covers fixations no AOI contains. Percentages
    are relative to the summed duration of all fixations in the session; with
    overlapping AOIs the per-AOI percentages can therefore add up to more than
    100.
    """

    def aggregate(self, fixations: Sequence[Fixation], aois: Sequence[AOI]) -> List[DwellTimeStats]:
        session_total = sum((f.duration for f in fixations), 0.0)

        stats = [
            _stats(
                aoi.id,
                aoi.name,
                [f for f in fixations if contains_point(aoi, f.x, f.y)],
                session_total,
            )
            for aoi in aois
        ]

        matcher = AOIMatcher(aois)
        outside = [f for f in fixations if matcher.match_fixation(f) is None]
        stats.append(_stats(OUTSIDE_AOI_ID, OUTSIDE_AOI_NAME, outside, session_total))
        return stats


def calculate_dwell_time(fixations: Sequence[Fixation], aois: Sequence[AOI]) -> List[DwellTimeStats]:
    return DwellTimeAggregator().aggregate(fixations, aois)
