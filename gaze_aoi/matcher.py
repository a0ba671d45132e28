"""Assign fixations to the AOI containing their centroid."""
from __future__ import annotations

from typing import List, Optional, Sequence

from .domain import AOI, OUTSIDE_LABEL, Fixation
from .geometry import contains_point


class AOIMatcher:
    """First-match-wins assignment of fixations to AOIs.

    AOIs are checked in the order given, so overlapping AOIs resolve to the one
    listed first. Dwell-time aggregation deliberately does not use this rule;
    it credits every AOI that contains a fixation.
    """

    def __init__(self, aois: Sequence[AOI]) -> None:
        self.aois = list(aois)

    def match_fixation(self, fixation: Fixation) -> Optional[AOI]:
        for aoi in self.aois:
            if contains_point(aoi, fixation.x, fixation.y):
                return aoi
        return None

    def label(self, fixation: Fixation) -> str:
        """AOI name for the fixation, or the outside label."""
        aoi = self.match_fixation(fixation)
        return aoi.name if aoi is not None else OUTSIDE_LABEL

    def labels(self, fixations: Sequence[Fixation]) -> List[str]:
        return [self.label(f) for f in fixations]


def match_fixation(fixation: Fixation, aois: Sequence[AOI]) -> Optional[AOI]:
    return AOIMatcher(aois).match_fixation(fixation)


def aoi_label(fixation: Fixation, aois: Sequence[AOI]) -> str:
    return AOIMatcher(aois).label(fixation)
