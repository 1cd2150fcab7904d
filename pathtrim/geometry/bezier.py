#!/usr/bin/env python3
"""
Single-curve Bezier primitives

Line, quadratic and cubic Bezier segments backed by numpy control point arrays.
These provide the two capabilities the splitting engine relies on:

- length(): arc length, integrated numerically with scipy (closed form for lines)
- split(t): de Casteljau subdivision into the [0, t] and [t, 1] pieces

Segments are value-like: their control points are read-only and every
operation returns new segments.
"""

from typing import Protocol, Sequence, Tuple, runtime_checkable

import numpy as np
from scipy.integrate import quad

# Absolute error bound passed to the length integrator
LENGTH_ERROR = 1e-9


@runtime_checkable
class Curve(Protocol):
    """Anything the splitting engine can measure and cut."""

    def length(self) -> float:
        ...

    def split(self, t: float) -> Tuple["Curve", "Curve"]:
        ...


def _clamp(t: float) -> float:
    return min(max(float(t), 0.0), 1.0)


def _casteljau(points: np.ndarray, t: float) -> Tuple[np.ndarray, np.ndarray]:
    """Subdivide a control polygon at t, returning (left, right) control polygons."""
    left = [points[0]]
    right = [points[-1]]
    level = points
    while len(level) > 1:
        level = level[:-1] * (1.0 - t) + level[1:] * t
        left.append(level[0])
        right.append(level[-1])
    return np.array(left), np.array(right[::-1])


class BezierSegment:
    """Bezier segment of a fixed order; subclasses set `order`."""

    order = 0

    def __init__(self, *points: Sequence[float]):
        pts = np.array(points, dtype=float)
        if pts.shape != (self.order + 1, 2):
            raise ValueError(
                f"{type(self).__name__} needs {self.order + 1} (x, y) points, got shape {pts.shape}"
            )
        pts.setflags(write=False)
        self._points = pts

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def start(self) -> np.ndarray:
        return self._points[0]

    @property
    def end(self) -> np.ndarray:
        return self._points[-1]

    def point(self, t: float) -> np.ndarray:
        """Position at parametric time t."""
        level = self._points
        while len(level) > 1:
            level = level[:-1] * (1.0 - t) + level[1:] * t
        return level[0]

    def derivative(self, t: float) -> np.ndarray:
        """First derivative with respect to t."""
        hodograph = self.order * np.diff(self._points, axis=0)
        level = hodograph
        while len(level) > 1:
            level = level[:-1] * (1.0 - t) + level[1:] * t
        return level[0]

    def length(self) -> float:
        """Arc length over [0, 1]."""
        value, _ = quad(
            lambda tau: float(np.hypot(*self.derivative(tau))),
            0.0,
            1.0,
            epsabs=LENGTH_ERROR,
            limit=200,
        )
        return value

    def split(self, t: float) -> Tuple["BezierSegment", "BezierSegment"]:
        """Split at t into the pieces covering [0, t] and [t, 1]."""
        left, right = _casteljau(self._points, _clamp(t))
        return type(self)(*left), type(self)(*right)

    def split_between(self, t0: float, t1: float) -> "BezierSegment":
        """Return the piece covering [t0, t1]; equal times give a zero-length segment."""
        t0, t1 = sorted((_clamp(t0), _clamp(t1)))
        _, right = self.split(t0)
        if t0 >= 1.0:
            return right
        # The right half is an affine reparameterisation of [t0, 1]
        middle, _ = right.split((t1 - t0) / (1.0 - t0))
        return middle

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self._points, other._points)

    def __hash__(self):
        return hash((type(self).__name__, self._points.tobytes()))

    def __repr__(self):
        pts = ", ".join(f"({x:g}, {y:g})" for x, y in self._points)
        return f"{type(self).__name__}({pts})"


class Line(BezierSegment):
    order = 1

    def length(self) -> float:
        return float(np.hypot(*(self.end - self.start)))


class QuadraticBezier(BezierSegment):
    order = 2


class CubicBezier(BezierSegment):
    order = 3


def split_between(curve: Curve, t0: float, t1: float) -> Curve:
    """
    Two-time split primitive for any Curve.

    Uses the curve's own split_between when it has one, otherwise cuts twice
    with split(t), which is exact for polynomial curves.
    """
    if hasattr(curve, "split_between"):
        return curve.split_between(t0, t1)
    t0, t1 = sorted((_clamp(t0), _clamp(t1)))
    _, right = curve.split(t0)
    if t0 >= 1.0:
        return right
    middle, _ = right.split((t1 - t0) / (1.0 - t0))
    return middle
