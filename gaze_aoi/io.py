"""Readers and writers for the collaborator data contracts.

- gaze annotation JSON exported by the capture side (``gazePoints`` array)
- gaze sample tables (``timestamp,x,y`` plus optional ``frame_number``,
  ``screen_x``, ``screen_y``)
- AOI tables (``id,name,color,x,y,width,height``)
"""
from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from .domain import AOI, AOIBounds, GazeAnnotation, GazePoint
from .errors import InvalidAOI, InvalidGazeData

GAZE_REQUIRED_COLUMNS = ["timestamp", "x", "y"]
AOI_COLUMNS = ["id", "name", "color", "x", "y", "width", "height"]


def _json_float(value: Any) -> float:
    # JSON.stringify writes NaN and Infinity as null
    return math.nan if value is None else float(value)


def _gaze_point_from_json(raw: Dict[str, Any], idx: int) -> GazePoint:
    try:
        return GazePoint(
            timestamp=_json_float(raw["timestamp"]),
            x=_json_float(raw["x"]),
            y=_json_float(raw["y"]),
            frame_number=int(raw.get("frameNumber") or 0),
            screen_x=_json_float(raw.get("screenX", 0.0)),
            screen_y=_json_float(raw.get("screenY", 0.0)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidGazeData(f"Malformed gaze point #{idx}: {raw!r}") from exc


def annotation_from_dict(data: Dict[str, Any]) -> GazeAnnotation:
    if "gazePoints" not in data:
        raise InvalidGazeData("Annotation has no 'gazePoints' array.")
    points = tuple(_gaze_point_from_json(p, i) for i, p in enumerate(data["gazePoints"]))
    return GazeAnnotation(
        video_name=str(data.get("videoName", "")),
        gaze_points=points,
        video_duration=data.get("videoDuration"),
        video_width=data.get("videoWidth"),
        video_height=data.get("videoHeight"),
        frame_rate=data.get("frameRate"),
        recording_start_time=data.get("recordingStartTime") or None,
        recording_end_time=data.get("recordingEndTime") or None,
        has_audio=bool(data.get("hasAudio", False)),
    )


def load_gaze_annotation(path: str | Path) -> GazeAnnotation:
    """Load a ``*_gaze_annotation.json`` session export."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    return annotation_from_dict(data)


def gaze_points_from_frame(df: pd.DataFrame) -> List[GazePoint]:
    missing = [c for c in GAZE_REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidGazeData(f"Missing required gaze columns: {', '.join(missing)}")

    df = df.copy()
    for col in ("timestamp", "x", "y", "screen_x", "screen_y"):
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    if "frame_number" not in df.columns:
        df["frame_number"] = 0
    df["frame_number"] = pd.to_numeric(df["frame_number"], errors="coerce").fillna(0).astype(int)
    for col in ("screen_x", "screen_y"):
        if col not in df.columns:
            df[col] = 0.0

    return [
        GazePoint(
            timestamp=float(row.timestamp),
            x=float(row.x),
            y=float(row.y),
            frame_number=int(row.frame_number),
            screen_x=float(row.screen_x),
            screen_y=float(row.screen_y),
        )
        for row in df.itertuples(index=False)
    ]


def read_gaze_csv(path: str | Path, sep: str = ",") -> List[GazePoint]:
    """Read gaze samples from a CSV/TSV table.

    Unparsable numbers become NaN and are left for the analysis boundary to
    reject or drop.
    """
    return gaze_points_from_frame(pd.read_csv(path, sep=sep))


def load_gaze_points(path: str | Path) -> List[GazePoint]:
    """Dispatch on extension: ``.json`` annotation, ``.tsv`` or ``.csv`` table."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return list(load_gaze_annotation(path).gaze_points)
    if suffix == ".tsv":
        return read_gaze_csv(path, sep="\t")
    return read_gaze_csv(path)


def aois_from_frame(df: pd.DataFrame) -> List[AOI]:
    missing = [c for c in AOI_COLUMNS if c not in df.columns and c != "color"]
    if missing:
        raise InvalidAOI(f"Missing required AOI columns: {', '.join(missing)}")

    aois: List[AOI] = []
    for row in df.to_dict(orient="records"):
        try:
            bounds = AOIBounds(
                x=float(row["x"]),
                y=float(row["y"]),
                width=float(row["width"]),
                height=float(row["height"]),
            )
        except (TypeError, ValueError) as exc:
            raise InvalidAOI(f"Malformed AOI bounds in row {row!r}") from exc
        color = row.get("color", "")
        aois.append(
            AOI(
                id=str(row["id"]),
                name=str(row["name"]),
                bounds=bounds,
                color="" if pd.isna(color) else str(color),
            )
        )
    return aois


def read_aois_csv(path: str | Path) -> List[AOI]:
    # read as text so ids and colours survive ("007", "#00ff00"); bounds are parsed per row
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    return aois_from_frame(df)


def aois_to_frame(aois: Sequence[AOI]) -> pd.DataFrame:
    rows = [
        [a.id, a.name, a.color, a.bounds.x, a.bounds.y, a.bounds.width, a.bounds.height]
        for a in aois
    ]
    return pd.DataFrame(rows, columns=AOI_COLUMNS)


def write_aois_csv(aois: Sequence[AOI], path: str | Path) -> None:
    aois_to_frame(aois).to_csv(path, index=False, lineterminator="\n")
