"""
Shared curve fixtures for the path trimming tests.
"""

import os
import sys

import pytest

# Ensure repo root is on sys.path
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from pathtrim.core import SolverCfg
from pathtrim.geometry import CubicBezier, Line, PolyCurve, construct_poly_curve_from_data


class SegmentOnly:
    """Curve exposing only length() and split(t), like a third-party primitive."""

    def __init__(self, curve):
        self.curve = curve

    def length(self):
        return self.curve.length()

    def split(self, t):
        left, right = self.curve.split(t)
        return SegmentOnly(left), SegmentOnly(right)


class FixedLengthCurve:
    """Curve reporting an arbitrary length, for precondition checks."""

    def __init__(self, length):
        self._length = length

    def length(self):
        return self._length

    def split(self, t):
        return FixedLengthCurve(self._length * t), FixedLengthCurve(self._length * (1 - t))


@pytest.fixture
def three_lines():
    """Three collinear lines of length 10 (total 30)."""
    return PolyCurve([
        Line((0, 0), (10, 0)),
        Line((10, 0), (20, 0)),
        Line((20, 0), (30, 0)),
    ])


@pytest.fixture
def eased_line():
    """Straight cubic of length 10 whose speed is zero at both ends: x(t) = 10(3t^2 - 2t^3)."""
    return CubicBezier((0, 0), (0, 0), (10, 0), (10, 0))


@pytest.fixture
def arch():
    return CubicBezier((0, 0), (0, 100), (100, 100), (100, 0))


@pytest.fixture
def wave():
    """Open path of three cubic curves with different lengths."""
    return PolyCurve([
        CubicBezier((0, 0), (20, 60), (40, 60), (60, 0)),
        CubicBezier((60, 0), (70, -20), (90, -20), (100, 0)),
        CubicBezier((100, 0), (130, 90), (170, -90), (200, 0)),
    ])


@pytest.fixture
def closed_square():
    """Closed 10x10 square built from bodymovin data (total length 40)."""
    return construct_poly_curve_from_data({
        "v": [[0, 0], [10, 0], [10, 10], [0, 10]],
        "i": [[0, 0]] * 4,
        "o": [[0, 0]] * 4,
        "c": True,
    })


@pytest.fixture
def one_attempt():
    return SolverCfg(max_attempts=1)
