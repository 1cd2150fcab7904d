#!/usr/bin/env python3
"""
Curve time solver

Bezier curves are parameterised by a time t in [0, 1] that does not advance at
constant speed along the curve. This module converts a fractional arc-length
position ("length segment") into the curve time that reaches it, using a
bounded, damped secant-style refinement:

    t = length_segment
    repeat up to max_attempts:
        error = target_length - length(split(t).left)
        stop when |error| is within precision
        step = error / total_length, halved when it changes sign
        t += step

Running out of attempts is not an error: the last t is returned flagged as
approximate and a warning is logged.
"""

import math
from typing import NamedTuple, Optional

from pathtrim.core import SolverCfg, get_logger
from pathtrim.errors import InvalidCurveLengthError, InvalidLengthSegmentError

from .bezier import Curve

log = get_logger("solver")


class CurveTimeResult(NamedTuple):
    t: float
    approximate: bool = False
    attempts: int = 0
    # Signed (target - measured) arc length at the last measurement
    error: float = 0.0


def check_length_segment(segment: float) -> float:
    try:
        value = float(segment)
    except (TypeError, ValueError):
        raise InvalidLengthSegmentError(segment)
    if math.isnan(value):
        raise InvalidLengthSegmentError(segment)
    return value


def check_curve_length(length: float, index: Optional[int] = None) -> float:
    if not math.isfinite(length) or length < 0:
        raise InvalidCurveLengthError(length, index)
    return length


def solve_curve_time(
    curve: Curve, length_segment: float, settings: Optional[SolverCfg] = None
) -> CurveTimeResult:
    """
    Find the curve time at a fractional position along a curve's own length.

    Args:
        curve: Curve offering length() and split(t)
        length_segment: Position along the curve's length, 0..1. Values
            outside the interval are clamped to the nearest end.
        settings: Solver precision, attempt bound and tolerance mode

    Returns:
        CurveTimeResult; `approximate` is set when the precision bound was
        not met within the attempt budget

    Raises:
        InvalidLengthSegmentError: If length_segment is NaN or not a number
        InvalidCurveLengthError: If the curve length is NaN, infinite or negative
    """
    segment = check_length_segment(length_segment)
    if segment <= 0:
        return CurveTimeResult(0.0)
    if segment >= 1:
        return CurveTimeResult(1.0)

    settings = settings or SolverCfg()
    total_length = check_curve_length(curve.length())
    target_length = segment * total_length
    if settings.tolerance == "relative":
        precision = settings.precision * total_length
    else:
        precision = settings.precision

    t = segment
    previous_step = 0.0
    error = 0.0
    for attempt in range(settings.max_attempts):
        left, _ = curve.split(t)
        error = target_length - left.length()
        if abs(error) <= precision:
            return CurveTimeResult(t, False, attempt + 1, error)

        step = error / total_length
        # Overshot the root: damp to stop bouncing around it
        if previous_step and math.copysign(1.0, step) != math.copysign(1.0, previous_step):
            step /= 2.0
        t = min(max(t + step, 0.0), 1.0)
        previous_step = step

    log.warning(
        f"Curve time not within {precision:g} after {settings.max_attempts} attempts "
        f"(segment={segment:g}, t={t:g}, error={error:g})"
    )
    return CurveTimeResult(t, True, settings.max_attempts, error)


def curve_time_at_length_segment(
    curve: Curve, length_segment: float, settings: Optional[SolverCfg] = None
) -> float:
    """Curve time at a fractional arc-length position (0..1) of the curve."""
    return solve_curve_time(curve, length_segment, settings).t
