"""Command line interface for gaze/AOI analysis."""
from __future__ import annotations

import argparse
import logging
import sys

from .analysis import GazeAnalyzer
from .config import DEFAULT_DISPERSION_THRESHOLD, DEFAULT_MIN_FIXATION_DURATION_MS, AnalysisConfig, IDTConfig
from .detector import FixationDetector
from .domain import AnalysisResult, ScanpathMetrics
from .io import load_gaze_points, read_aois_csv
from .report import ReportFormatter
from .validation import drop_invalid_gaze_points


def _add_idt_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_DISPERSION_THRESHOLD,
        help="Dispersion threshold in normalised stimulus units",
    )
    parser.add_argument(
        "--min-duration",
        type=float,
        default=DEFAULT_MIN_FIXATION_DURATION_MS,
        help="Minimum fixation duration in ms",
    )
    parser.add_argument(
        "--drop-invalid",
        action="store_true",
        help="Drop gaze samples with NaN/inf values instead of failing",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fixation detection and AOI metrics for gaze recordings")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    detect = sub.add_parser("detect", help="Detect fixations and print the fixation table")
    detect.add_argument("input", help="Gaze annotation JSON or gaze CSV/TSV")
    _add_idt_arguments(detect)

    analyze = sub.add_parser("analyze", help="Run the full AOI analysis and write CSV exports")
    analyze.add_argument("input", help="Gaze annotation JSON or gaze CSV/TSV")
    analyze.add_argument("output", help="Directory to write the CSV exports to")
    analyze.add_argument("--aois", help="AOI CSV (id,name,color,x,y,width,height)")
    analyze.add_argument("--video-start", type=float, default=0.0, help="Stimulus start time in seconds")
    analyze.add_argument("--prefix", default="", help="File name prefix for the exports")
    _add_idt_arguments(analyze)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    idt = IDTConfig(dispersion_threshold=args.threshold, min_duration_ms=args.min_duration)
    points = load_gaze_points(args.input)

    if args.command == "detect":
        if args.drop_invalid:
            points, _ = drop_invalid_gaze_points(points)
        fixations = FixationDetector(idt).detect(points)
        result = AnalysisResult(
            fixations=fixations,
            dwell_time_stats=[],
            scanpath_metrics=ScanpathMetrics(),
            first_fixation_metrics=[],
            parameters={},
        )
        sys.stdout.write(ReportFormatter(result, []).to_csv().fixations)
        return

    if args.command == "analyze":
        aois = read_aois_csv(args.aois) if args.aois else []
        cfg = AnalysisConfig(idt=idt, video_start_time=args.video_start, drop_invalid_points=args.drop_invalid)
        result = GazeAnalyzer(cfg).analyze(points, aois)
        written = ReportFormatter(result, aois).write(args.output, prefix=args.prefix)
        for path in written.values():
            print(path)
        return


if __name__ == "__main__":
    main()
