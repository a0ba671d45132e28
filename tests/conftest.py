from typing import List, Sequence, Tuple

import pytest

from gaze_aoi.domain import AOI, Fixation, GazePoint


def make_points(samples: Sequence[Tuple[float, float, float]]) -> List[GazePoint]:
    """Build gaze points from (timestamp_s, x, y) triples."""
    return [GazePoint(timestamp=t, x=x, y=y) for t, x, y in samples]


def make_fixation(
    id: int, start_time: float, duration_ms: float, x: float, y: float, point_count: int = 5
) -> Fixation:
    return Fixation(
        id=id,
        start_time=start_time,
        end_time=start_time + duration_ms / 1000.0,
        duration=duration_ms,
        x=x,
        y=y,
        point_count=point_count,
    )


def make_aoi(id: str, name: str, x: float, y: float, width: float, height: float, color: str = "#ff0000") -> AOI:
    return AOI.from_rect(id, name, x, y, width, height, color=color)


@pytest.fixture
def scenario_points() -> List[GazePoint]:
    return make_points(
        [
            (0.0, 0.5, 0.5),
            (0.05, 0.51, 0.49),
            (0.12, 0.50, 0.50),
            (0.30, 0.9, 0.9),
        ]
    )


@pytest.fixture
def two_cluster_points() -> List[GazePoint]:
    """Ten samples at (0.2, 0.2), then ten at (0.8, 0.8), 20 ms apart."""
    samples = []
    for i in range(20):
        pos = 0.2 if i < 10 else 0.8
        samples.append((i * 0.02, pos, pos))
    return make_points(samples)


@pytest.fixture
def center_aoi() -> AOI:
    return make_aoi("a1", "Center", 0.4, 0.4, 0.2, 0.2)
