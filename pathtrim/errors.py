from typing import Any, Dict


class PathTrimError(Exception):
    """Base exception for path trimming failures"""

    def __init__(self, message: str, error_type: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)


class PreconditionError(PathTrimError, ValueError):
    """Input that makes a length-based operation meaningless"""


class EmptyPolyCurveError(PreconditionError):
    def __init__(self, message: str = "PolyCurve has no curves", details: Dict[str, Any] = None):
        super().__init__(message, "empty_poly_curve", details)


class InvalidLengthSegmentError(PreconditionError):
    def __init__(self, segment: float, details: Dict[str, Any] = None):
        super().__init__(
            f"Length segment must be a number, got {segment!r}",
            "invalid_length_segment",
            {"segment": segment, **(details or {})},
        )


class InvalidCurveLengthError(PreconditionError):
    def __init__(self, length: float, index: int = None, details: Dict[str, Any] = None):
        where = f" (curve {index})" if index is not None else ""
        super().__init__(
            f"Curve length must be finite and non-negative{where}, got {length!r}",
            "invalid_curve_length",
            {"length": length, "index": index, **(details or {})},
        )
