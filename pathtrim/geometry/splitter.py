#!/usr/bin/env python3
"""
Composite path splitting by arc length

Splits a PolyCurve at one or two global length segments (fractions of the
PolyCurve's total length):

1. locate the curve owning each segment from the cumulative curve lengths
2. solve the local curve time within that curve
3. split the owning curve(s) and reassemble left / middle / right PolyCurves

Curve ownership uses half-open [start, end) intervals, so a segment landing
exactly on a boundary belongs to the next curve; the final curve also owns
its end.
"""

from typing import List, NamedTuple, Optional, Sequence

from pathtrim.core import SolverCfg, get_logger
from pathtrim.errors import EmptyPolyCurveError

from .bezier import split_between
from .polycurve import PolyCurve
from .solver import check_curve_length, check_length_segment, solve_curve_time

log = get_logger("splitter")


class CurveLocation(NamedTuple):
    index: int
    length_segment: float


class SplitResult(NamedTuple):
    left: PolyCurve
    middle: PolyCurve
    right: PolyCurve
    # True when any curve time missed the solver precision
    approximate: bool = False


def locate_curve_at_length_segment(
    curve_lengths: Sequence[float], total_length: float, desired_segment: float
) -> CurveLocation:
    """
    Find which curve a global length segment falls on.

    Args:
        curve_lengths: Length of each curve in the sequence
        total_length: Sum of curve_lengths
        desired_segment: Global position along the total length (0..1)

    Returns:
        CurveLocation with the curve index and the segment local to that curve
    """
    if not curve_lengths:
        raise EmptyPolyCurveError("Cannot locate a length segment on an empty PolyCurve")
    desired_segment = check_length_segment(desired_segment)
    for index, length in enumerate(curve_lengths):
        check_curve_length(length, index)
    check_curve_length(total_length)

    last_index = len(curve_lengths) - 1
    if desired_segment <= 0:
        return CurveLocation(0, 0.0)
    if desired_segment >= 1:
        return CurveLocation(last_index, 1.0)
    if total_length == 0:
        return CurveLocation(0, 0.0)

    current_length = 0.0
    for index, curve_length in enumerate(curve_lengths):
        curve_start = current_length / total_length
        curve_end = curve_start + curve_length / total_length
        if curve_start <= desired_segment < curve_end:
            return CurveLocation(index, (desired_segment - curve_start) / (curve_end - curve_start))
        current_length += curve_length

    # Rounding left the segment past the last interval: it is the very end
    log.debug(f"No curve interval matched segment {desired_segment!r}, using end of path")
    return CurveLocation(last_index, 1.0)


def _locate(poly: PolyCurve, segment: float) -> CurveLocation:
    curve_lengths = poly.curve_lengths()
    return locate_curve_at_length_segment(curve_lengths, sum(curve_lengths), segment)


def split_at_length_segment(
    poly: PolyCurve, segment: float, settings: Optional[SolverCfg] = None
) -> SplitResult:
    """Split a PolyCurve once; the middle of the result is empty."""
    poly.require_curves()
    index, local_segment = _locate(poly, segment)
    curve = poly.curve(index)
    solved = solve_curve_time(curve, local_segment, settings)
    sub_left, sub_right = curve.split(solved.t)

    return SplitResult(
        left=PolyCurve(poly.curves[:index] + [sub_left], poly.is_closed),
        middle=PolyCurve([], poly.is_closed),
        right=PolyCurve([sub_right] + poly.curves[index + 1:], poly.is_closed),
        approximate=solved.approximate,
    )


def split_between_length_segments(
    poly: PolyCurve,
    segment_a: float,
    segment_b: float,
    settings: Optional[SolverCfg] = None,
) -> SplitResult:
    """
    Split a PolyCurve at two length segments (in either order).

    Returns:
        SplitResult with the path before the first cut (left), between the
        cuts (middle) and after the second cut (right)
    """
    poly.require_curves()
    start_segment = min(check_length_segment(segment_a), check_length_segment(segment_b))
    end_segment = max(check_length_segment(segment_a), check_length_segment(segment_b))

    curve_lengths = poly.curve_lengths()
    total_length = sum(curve_lengths)
    start_index, start_local = locate_curve_at_length_segment(curve_lengths, total_length, start_segment)
    end_index, end_local = locate_curve_at_length_segment(curve_lengths, total_length, end_segment)

    start_curve = poly.curve(start_index)
    start = solve_curve_time(start_curve, start_local, settings)
    sub_left, sub_right = start_curve.split(start.t)
    left = PolyCurve(poly.curves[:start_index] + [sub_left], poly.is_closed)

    end_curve = poly.curve(end_index)
    end = solve_curve_time(end_curve, end_local, settings)
    approximate = start.approximate or end.approximate

    if start_index == end_index:
        # Cut the original curve directly instead of re-solving against sub_right
        middle = PolyCurve([split_between(end_curve, start.t, end.t)], poly.is_closed)
        _, remainder = end_curve.split(end.t)
        right = PolyCurve([remainder] + poly.curves[start_index + 1:], poly.is_closed)
        return SplitResult(left, middle, right, approximate)

    end_left, end_right = end_curve.split(end.t)
    middle_curves: List = [sub_right] + poly.curves[start_index + 1:end_index] + [end_left]
    middle = PolyCurve(middle_curves, poly.is_closed)
    right = PolyCurve([end_right] + poly.curves[end_index + 1:], poly.is_closed)
    return SplitResult(left, middle, right, approximate)


def split_poly_curve_at_length_segments(
    poly: PolyCurve,
    segment1: float,
    segment2: Optional[float] = None,
    settings: Optional[SolverCfg] = None,
) -> SplitResult:
    """
    Split a PolyCurve at one or two global length segments (0..1).

    With one segment the middle is empty; with two, the order of the
    segments does not matter.
    """
    if segment2 is None:
        return split_at_length_segment(poly, segment1, settings)
    return split_between_length_segments(poly, segment1, segment2, settings)
