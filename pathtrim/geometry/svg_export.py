#!/usr/bin/env python3
"""
SVG output for trimmed paths

Serialises the PolyCurves left visible by a trim path as SVG path data and
writes them to an SVG document with svgwrite.
"""

from typing import Optional, Sequence, Tuple

import numpy as np
import svgwrite

from pathtrim.core import get_logger

from .polycurve import PolyCurve
from .trim import TrimPath, path_closes

log = get_logger("svg_export")

# Control point count -> SVG path command
_COMMANDS = {2: "L", 3: "Q", 4: "C"}


def _fmt(value: float, decimals: int) -> str:
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _pair(point, decimals: int) -> str:
    return f"{_fmt(point[0], decimals)} {_fmt(point[1], decimals)}"


def segments_to_path_d(
    segments: Sequence[PolyCurve], trim: Optional[TrimPath] = None, decimals: int = 3
) -> str:
    """
    Build SVG path data for the visible segments of a path.

    Segments are drawn in reverse order so a wrapped trim (left and right
    pieces) reads as one continuous stroke. A new subpath is only started
    when a segment does not begin where the previous one ended.
    """
    drawable = [poly for poly in reversed(segments) if not poly.is_empty]
    parts = []
    last_point = None
    for poly in drawable:
        first_point = poly.curve(0).points[0]
        if last_point is None or not np.allclose(first_point, last_point, atol=1e-9):
            parts.append(f"M {_pair(first_point, decimals)}")
        for curve in poly:
            points = curve.points
            command = _COMMANDS.get(len(points))
            if command is None:
                raise TypeError(f"Cannot serialise {type(curve).__name__} with {len(points)} points")
            parts.append(f"{command} " + " ".join(_pair(p, decimals) for p in points[1:]))
        last_point = poly.curve(len(poly) - 1).points[-1]

    if path_closes(drawable, trim):
        parts.append("Z")
    return " ".join(parts)


def export_svg(
    segments: Sequence[PolyCurve],
    filename: str,
    trim: Optional[TrimPath] = None,
    viewbox: Optional[Tuple[float, float, float, float]] = None,
    stroke: str = "black",
    stroke_width: float = 1.0,
    decimals: int = 3,
) -> bool:
    """Write the visible segments to an SVG file as a single stroked path."""
    path_data = segments_to_path_d(segments, trim, decimals)
    try:
        dwg = svgwrite.Drawing(filename, size=("100%", "100%"))
        if viewbox:
            dwg.attribs["viewBox"] = " ".join(map(str, viewbox))
        if path_data:
            dwg.add(dwg.path(d=path_data, fill="none", stroke=stroke, stroke_width=stroke_width))
        dwg.save()
    except OSError as e:
        log.error(f"SVG export failed: {e}")
        return False
    log.info(f"Exported SVG to {filename}")
    return True
