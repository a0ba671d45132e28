"""Rectangular areas of interest in normalised stimulus coordinates."""
from __future__ import annotations

from dataclasses import dataclass

# Label used for fixations that land in no AOI (fixation table, AOI sequence,
# transition matrix).
OUTSIDE_LABEL = "outside"

# Synthetic dwell-time record covering fixations that land in no AOI.
OUTSIDE_AOI_ID = "__outside__"
OUTSIDE_AOI_NAME = "Outside AOIs"


@dataclass(frozen=True)
class AOIBounds:
    """Axis-aligned rectangle; (x, y) is the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class AOI:
    """User-defined area of interest."""

    id: str
    name: str
    bounds: AOIBounds
    color: str = ""

    @classmethod
    def from_rect(
        cls, id: str, name: str, x: float, y: float, width: float, height: float, color: str = ""
    ) -> "AOI":
        return cls(id=id, name=name, bounds=AOIBounds(x, y, width, height), color=color)
