"""Exception taxonomy for contract violations at the analysis boundary."""
from __future__ import annotations


class GazeAnalysisError(ValueError):
    """Base class for all errors raised by the analysis core."""


class InvalidAOI(GazeAnalysisError):
    """AOI geometry that cannot be matched against (negative or non-finite bounds)."""


class InvalidGazeData(GazeAnalysisError):
    """Gaze samples carrying NaN or infinite timestamps or coordinates."""


class InvalidParameters(GazeAnalysisError):
    """Thresholds or offsets outside their valid range."""


__all__ = ["GazeAnalysisError", "InvalidAOI", "InvalidGazeData", "InvalidParameters"]
