# tests/test_bezier.py
import math

import numpy as np
import pytest

from pathtrim.geometry.bezier import CubicBezier, Curve, Line, QuadraticBezier, split_between

from conftest import SegmentOnly

KAPPA = 0.5522847498


def quarter_circle(r=100.0):
    return CubicBezier((r, 0), (r, r * KAPPA), (r * KAPPA, r), (0, r))


def test_line_length_is_euclidean():
    assert Line((0, 0), (3, 4)).length() == pytest.approx(5.0)


def test_straight_cubic_length():
    curve = CubicBezier((0, 0), (10 / 3, 0), (20 / 3, 0), (10, 0))
    assert curve.length() == pytest.approx(10.0, abs=1e-9)


def test_quarter_circle_length():
    assert quarter_circle().length() == pytest.approx(math.pi * 50, rel=1e-3)


def test_split_conserves_length_and_meets_at_cut(arch):
    left, right = arch.split(0.3)
    assert left.length() + right.length() == pytest.approx(arch.length(), abs=1e-6)
    assert np.allclose(left.end, right.start)
    assert np.allclose(left.end, arch.point(0.3))
    assert np.allclose(left.start, arch.start)
    assert np.allclose(right.end, arch.end)


def test_split_keeps_segment_type():
    quad = QuadraticBezier((0, 0), (5, 10), (10, 0))
    left, right = quad.split(0.5)
    assert isinstance(left, QuadraticBezier) and isinstance(right, QuadraticBezier)
    assert left.length() == pytest.approx(right.length(), abs=1e-9)


def test_split_clamps_time(arch):
    left, right = arch.split(1.5)
    assert left == arch
    assert right.length() == pytest.approx(0.0, abs=1e-12)


def test_split_between_matches_point_positions(arch):
    middle = arch.split_between(0.2, 0.7)
    assert np.allclose(middle.start, arch.point(0.2))
    assert np.allclose(middle.end, arch.point(0.7))
    assert np.allclose(middle.point(0.5), arch.point(0.45))


def test_split_between_is_order_independent(arch):
    a = arch.split_between(0.2, 0.7)
    b = arch.split_between(0.7, 0.2)
    assert np.allclose(a.points, b.points)


def test_split_between_equal_times_is_zero_length(arch):
    middle = arch.split_between(0.4, 0.4)
    assert middle.length() == pytest.approx(0.0, abs=1e-9)
    assert np.allclose(middle.start, arch.point(0.4))


def test_split_between_at_end(arch):
    middle = arch.split_between(1.0, 1.0)
    assert np.allclose(middle.start, arch.end)
    assert middle.length() == pytest.approx(0.0, abs=1e-9)


def test_split_between_for_protocol_only_curve(arch):
    wrapped = SegmentOnly(arch)
    middle = split_between(wrapped, 0.25, 0.75)
    assert isinstance(middle, SegmentOnly)
    assert middle.length() == pytest.approx(arch.split_between(0.25, 0.75).length(), abs=1e-6)


def test_points_are_read_only(arch):
    with pytest.raises(ValueError):
        arch.points[0, 0] = 42.0


def test_wrong_point_count_rejected():
    with pytest.raises(ValueError):
        CubicBezier((0, 0), (1, 1), (2, 2))


def test_equality_and_hash():
    a = Line((0, 0), (1, 1))
    b = Line((0, 0), (1, 1))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Line((0, 0), (2, 2))
    assert a != QuadraticBezier((0, 0), (0.5, 0.5), (1, 1))


def test_segments_satisfy_curve_protocol(arch):
    assert isinstance(arch, Curve)
    assert isinstance(Line((0, 0), (1, 0)), Curve)
    assert isinstance(SegmentOnly(arch), Curve)
