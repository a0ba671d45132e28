import math

import pytest
from conftest import make_aoi, make_points

from gaze_aoi.analysis import GazeAnalyzer, analyze_gaze_data
from gaze_aoi.config import AnalysisConfig, IDTConfig
from gaze_aoi.domain import AOI, AOIBounds, OUTSIDE_AOI_NAME
from gaze_aoi.errors import GazeAnalysisError, InvalidAOI, InvalidGazeData, InvalidParameters


def test_full_analysis_of_scenario(scenario_points, center_aoi):
    result = analyze_gaze_data(scenario_points, [center_aoi])

    assert len(result.fixations) == 1
    assert result.dwell_time_stats[0].percent_of_total == pytest.approx(100.0)
    assert result.scanpath_metrics.aoi_sequence == ("Center",)
    assert result.first_fixation_metrics[0].time_to_first_fixation == 0.0
    assert result.first_fixation_metrics[0].entry_count == 1
    assert result.parameters == {
        "dispersion_threshold": 0.03,
        "min_fixation_duration": 100.0,
        "video_start_time": 0.0,
    }


def test_no_aois_reports_only_outside(two_cluster_points):
    result = analyze_gaze_data(two_cluster_points, [])

    assert [s.aoi_name for s in result.dwell_time_stats] == [OUTSIDE_AOI_NAME]
    assert result.dwell_time_stats[0].percent_of_total == pytest.approx(100.0)
    assert result.first_fixation_metrics == []
    assert result.scanpath_metrics.aoi_sequence == ("outside",)


def test_empty_input_is_not_an_error(center_aoi):
    result = analyze_gaze_data([], [center_aoi])

    assert result.fixations == []
    assert result.scanpath_metrics.fixation_count == 0
    assert result.first_fixation_metrics[0].time_to_first_fixation is None


def test_repeated_calls_are_identical(two_cluster_points, center_aoi):
    analyzer = GazeAnalyzer()
    assert analyzer.analyze(two_cluster_points, [center_aoi]) == analyzer.analyze(
        two_cluster_points, [center_aoi]
    )


def test_negative_aoi_size_is_rejected(scenario_points):
    bad = AOI(id="x", name="Bad", bounds=AOIBounds(0.1, 0.1, -0.2, 0.2))
    with pytest.raises(InvalidAOI):
        analyze_gaze_data(scenario_points, [bad])


def test_non_finite_aoi_bounds_are_rejected(scenario_points):
    bad = make_aoi("x", "Bad", 0.1, math.inf, 0.2, 0.2)
    with pytest.raises(InvalidAOI):
        analyze_gaze_data(scenario_points, [bad])


def test_zero_area_aoi_is_accepted(scenario_points):
    dot = make_aoi("d", "Dot", 0.5, 0.5, 0.0, 0.0)
    result = analyze_gaze_data(scenario_points, [dot])
    assert result.dwell_time_stats[0].fixation_count == 0


def test_nan_gaze_fails_by_default(scenario_points, center_aoi):
    points = scenario_points + make_points([(0.4, math.nan, 0.5)])
    with pytest.raises(InvalidGazeData):
        analyze_gaze_data(points, [center_aoi])


def test_nan_gaze_can_be_dropped(scenario_points, center_aoi, caplog):
    points = make_points([(0.02, math.nan, 0.5), (math.inf, 0.5, 0.5)]) + scenario_points
    with caplog.at_level("WARNING", logger="gaze_aoi.validation"):
        result = analyze_gaze_data(points, [center_aoi], drop_invalid_points=True)

    assert len(result.fixations) == 1
    assert result.fixations[0].point_count == 3
    assert "Dropped 2 of 6 gaze points" in caplog.text


def test_invalid_parameters(scenario_points):
    with pytest.raises(InvalidParameters):
        analyze_gaze_data(scenario_points, [], min_fixation_duration=0)
    with pytest.raises(InvalidParameters):
        analyze_gaze_data(scenario_points, [], dispersion_threshold=-1.0)
    with pytest.raises(InvalidParameters):
        GazeAnalyzer(AnalysisConfig(video_start_time=math.nan))


def test_error_taxonomy_shares_a_base():
    for exc in (InvalidAOI, InvalidGazeData, InvalidParameters):
        assert issubclass(exc, GazeAnalysisError)
        assert issubclass(exc, ValueError)


def test_custom_config_is_recorded(two_cluster_points):
    cfg = AnalysisConfig(idt=IDTConfig(dispersion_threshold=0.05, min_duration_ms=150.0), video_start_time=0.1)
    result = GazeAnalyzer(cfg).analyze(two_cluster_points, [])
    assert result.parameters["dispersion_threshold"] == 0.05
    assert result.parameters["min_fixation_duration"] == 150.0
    assert result.parameters["video_start_time"] == 0.1
    assert len(result.fixations) == 2
