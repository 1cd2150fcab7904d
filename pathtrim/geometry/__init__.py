"""
Arc-length indexing and splitting of composite Bezier paths.
"""

from .bezier import CubicBezier, Curve, Line, QuadraticBezier, split_between
from .bodymovin import BodymovinPathData, construct_poly_curve_from_data, load_shape_path
from .polycurve import PolyCurve
from .solver import CurveTimeResult, curve_time_at_length_segment, solve_curve_time
from .splitter import (
    CurveLocation,
    SplitResult,
    locate_curve_at_length_segment,
    split_at_length_segment,
    split_between_length_segments,
    split_poly_curve_at_length_segments,
)
from .svg_export import export_svg, segments_to_path_d
from .trim import TrimPath, path_closes, path_segments_to_draw, trim_poly_curve

__all__ = [
    "BodymovinPathData",
    "CubicBezier",
    "Curve",
    "CurveLocation",
    "CurveTimeResult",
    "Line",
    "PolyCurve",
    "QuadraticBezier",
    "SplitResult",
    "TrimPath",
    "construct_poly_curve_from_data",
    "curve_time_at_length_segment",
    "export_svg",
    "load_shape_path",
    "locate_curve_at_length_segment",
    "path_closes",
    "path_segments_to_draw",
    "segments_to_path_d",
    "solve_curve_time",
    "split_at_length_segment",
    "split_between",
    "split_between_length_segments",
    "split_poly_curve_at_length_segments",
    "trim_poly_curve",
]
