#!/usr/bin/env python3
"""
Simple usage examples: synthetic gaze data, two AOIs, all metrics.

Runs without any input files; every session is generated in memory.
"""

from gaze_aoi import AOI, GazePoint, ReportFormatter, analyze_gaze_data, detect_fixations_idt


def synthetic_session():
    """Look at the logo, then the face, then back at the logo."""
    targets = [(0.2, 0.2, 0.0), (0.7, 0.6, 0.4), (0.22, 0.18, 0.9)]
    points = []
    for cx, cy, start in targets:
        for i in range(12):
            jitter = 0.004 if i % 2 else -0.004
            points.append(GazePoint.from_video_time(start + i * 0.025, cx + jitter, cy - jitter, frame_rate=30))
    return points


AOIS = [
    AOI.from_rect("logo", "Logo", 0.1, 0.1, 0.2, 0.2, color="#2196f3"),
    AOI.from_rect("face", "Face", 0.55, 0.45, 0.3, 0.3, color="#4caf50"),
]


def example_1_fixations():
    """Detect fixations only."""
    print("=" * 60)
    print("Example 1: Fixation detection")
    print("=" * 60)

    fixations = detect_fixations_idt(synthetic_session(), dispersion_threshold=0.03, min_duration_ms=100)
    for f in fixations:
        print(f"  #{f.id}: {f.start_time:.3f}s-{f.end_time:.3f}s  {f.duration:.0f} ms  ({f.x:.3f}, {f.y:.3f})")


def example_2_full_analysis():
    """Dwell time, first fixation and scanpath."""
    print("\n" + "=" * 60)
    print("Example 2: Full AOI analysis")
    print("=" * 60)

    result = analyze_gaze_data(synthetic_session(), AOIS)
    for stats in result.dwell_time_stats:
        print(f"  {stats.aoi_name:<14} {stats.total_dwell_time:7.1f} ms  {stats.percent_of_total:6.2f}%")
    print(f"  Sequence: {' -> '.join(result.scanpath_metrics.aoi_sequence)}")


def example_3_exports():
    """CSV text blocks and scanpath drawing data."""
    print("\n" + "=" * 60)
    print("Example 3: Exports")
    print("=" * 60)

    formatter = ReportFormatter(analyze_gaze_data(synthetic_session(), AOIS), AOIS)
    print(formatter.to_csv().first_fixation)
    print(formatter.transition_matrix())
    for circle in formatter.drawing_data().circles:
        print(f"  circle #{circle.id} at ({circle.x:.2f}, {circle.y:.2f}) r={circle.radius:.1f}")


if __name__ == "__main__":
    example_1_fixations()
    example_2_full_analysis()
    example_3_exports()
