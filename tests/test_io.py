import json
import math

import pandas as pd
import pytest
from conftest import make_aoi

from gaze_aoi.analysis import analyze_gaze_data
from gaze_aoi.domain import GazePoint
from gaze_aoi.errors import InvalidAOI, InvalidGazeData
from gaze_aoi.io import (
    annotation_from_dict,
    load_gaze_annotation,
    load_gaze_points,
    read_aois_csv,
    read_gaze_csv,
    write_aois_csv,
)


def _annotation_payload():
    return {
        "videoName": "trailer.mp4",
        "videoDuration": 12.5,
        "videoWidth": 1920,
        "videoHeight": 1080,
        "frameRate": 30,
        "recordingStartTime": "2024-03-01T10:00:00.000Z",
        "recordingEndTime": "",
        "gazePoints": [
            {"timestamp": 0.0, "frameNumber": 0, "x": 0.5, "y": 0.5, "screenX": 960, "screenY": 540},
            {"timestamp": 0.05, "frameNumber": 1, "x": 0.51, "y": 0.49, "screenX": 979, "screenY": 529},
        ],
        "hasAudio": True,
    }


def test_load_gaze_annotation(tmp_path):
    path = tmp_path / "trailer_gaze_annotation.json"
    path.write_text(json.dumps(_annotation_payload()), encoding="utf-8")

    annotation = load_gaze_annotation(path)

    assert annotation.video_name == "trailer.mp4"
    assert annotation.frame_rate == 30
    assert annotation.recording_end_time is None
    assert annotation.has_audio is True
    assert annotation.gaze_points[1] == GazePoint(
        timestamp=0.05, x=0.51, y=0.49, frame_number=1, screen_x=979.0, screen_y=529.0
    )
    assert load_gaze_points(path) == list(annotation.gaze_points)


def test_annotation_without_points_is_rejected():
    with pytest.raises(InvalidGazeData):
        annotation_from_dict({"videoName": "x"})


def test_annotation_with_malformed_point_is_rejected():
    payload = _annotation_payload()
    payload["gazePoints"].append({"timestamp": 0.1, "x": 0.5})
    with pytest.raises(InvalidGazeData):
        annotation_from_dict(payload)


def test_read_gaze_csv_with_optional_columns_missing(tmp_path):
    path = tmp_path / "gaze.csv"
    pd.DataFrame({"timestamp": [0.0, 0.1], "x": [0.2, 0.3], "y": [0.4, "bad"]}).to_csv(path, index=False)

    points = read_gaze_csv(path)

    assert len(points) == 2
    assert points[0] == GazePoint(timestamp=0.0, x=0.2, y=0.4)
    assert math.isnan(points[1].y)


def test_read_gaze_tsv_by_extension(tmp_path):
    path = tmp_path / "gaze.tsv"
    pd.DataFrame(
        {"timestamp": [0.0], "x": [0.2], "y": [0.4], "frame_number": [3], "screen_x": [10], "screen_y": [20]}
    ).to_csv(path, sep="\t", index=False)

    (point,) = load_gaze_points(path)
    assert point.frame_number == 3
    assert point.screen_y == 20.0


def test_read_gaze_csv_requires_core_columns(tmp_path):
    path = tmp_path / "gaze.csv"
    pd.DataFrame({"timestamp": [0.0], "x": [0.1]}).to_csv(path, index=False)
    with pytest.raises(InvalidGazeData):
        read_gaze_csv(path)


def test_aoi_csv_round_trip_keeps_color_and_ids(tmp_path):
    aois = [
        make_aoi("007", "Logo", 0.1, 0.2, 0.3, 0.4, color="#00ff00"),
        make_aoi("b", "Face", 0.5, 0.5, 0.25, 0.25, color="rgba(255, 0, 0, 0.4)"),
    ]
    path = tmp_path / "aois.csv"

    write_aois_csv(aois, path)

    assert read_aois_csv(path) == aois


def test_aoi_csv_missing_columns(tmp_path):
    path = tmp_path / "aois.csv"
    pd.DataFrame({"id": ["a"], "name": ["A"], "x": [0.1]}).to_csv(path, index=False)
    with pytest.raises(InvalidAOI):
        read_aois_csv(path)


def test_aoi_csv_bad_number(tmp_path):
    path = tmp_path / "aois.csv"
    path.write_text("id,name,color,x,y,width,height\na,A,#fff,0.1,,0.2,0.2\n", encoding="utf-8")
    with pytest.raises(InvalidAOI):
        read_aois_csv(path)


def test_from_video_time_derives_frame_number():
    point = GazePoint.from_video_time(1.25, 0.5, 0.5, frame_rate=30)
    assert point.frame_number == 37


def test_null_samples_from_json_export_become_nan():
    payload = _annotation_payload()
    payload["gazePoints"].append(
        {"timestamp": 0.1, "frameNumber": None, "x": None, "y": 0.5, "screenX": None, "screenY": 540}
    )

    annotation = annotation_from_dict(payload)

    point = annotation.gaze_points[2]
    assert math.isnan(point.x)
    assert point.frame_number == 0
    assert not point.is_finite()


def test_null_samples_follow_the_invalid_point_policy():
    payload = _annotation_payload()
    payload["gazePoints"] += [
        {"timestamp": 0.08, "x": None, "y": 0.5},
        {"timestamp": 0.12, "x": 0.5, "y": 0.5},
    ]
    points = list(annotation_from_dict(payload).gaze_points)

    with pytest.raises(InvalidGazeData):
        analyze_gaze_data(points, [])

    result = analyze_gaze_data(points, [], drop_invalid_points=True)
    assert len(result.fixations) == 1
    assert result.fixations[0].point_count == 3
