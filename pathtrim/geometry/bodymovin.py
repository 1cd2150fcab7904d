#!/usr/bin/env python3
"""
PolyCurve construction from bodymovin (Lottie) shape data

Bodymovin exports a path as vertices with in/out tangents relative to each
vertex:

    {
      "v": [[x, y], ...],   # vertices
      "i": [[x, y], ...],   # in tangents, relative to their vertex
      "o": [[x, y], ...],   # out tangents, relative to their vertex
      "c": false            # closed path
    }

Each consecutive vertex pair becomes one cubic Bezier; a closed path gets an
extra curve from the last vertex back to the first.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import BaseModel, Field, validator

from pathtrim.core import get_logger

from .bezier import CubicBezier
from .polycurve import PolyCurve

log = get_logger("bodymovin")

Point = Tuple[float, float]


class BodymovinPathData(BaseModel):
    """Static path value of a bodymovin shape."""

    v: List[Point] = Field(..., description="Vertices")
    i: List[Point] = Field(..., description="In tangents relative to each vertex")
    o: List[Point] = Field(..., description="Out tangents relative to each vertex")
    c: bool = Field(default=False, description="Closed path")

    @validator("i", "o")
    def validate_tangent_count(cls, v, values):
        if "v" in values and len(v) != len(values["v"]):
            raise ValueError(
                f"tangent count {len(v)} does not match vertex count {len(values['v'])}"
            )
        return v


def _offset(point: Point, tangent: Point) -> Point:
    return (point[0] + tangent[0], point[1] + tangent[1])


def construct_poly_curve_from_data(
    path_data: Union[BodymovinPathData, Dict[str, Any]]
) -> PolyCurve:
    """
    Build a PolyCurve from bodymovin path data.

    Args:
        path_data: BodymovinPathData or the equivalent dict

    Returns:
        PolyCurve of CubicBezier curves, closed when the data is closed
    """
    if not isinstance(path_data, BodymovinPathData):
        path_data = BodymovinPathData(**path_data)

    vertices = path_data.v
    poly = PolyCurve(is_closed=path_data.c)
    for index, vertex in enumerate(vertices):
        is_last = index == len(vertices) - 1
        # An open path has no curve leaving its last vertex
        if is_last and not path_data.c:
            break
        destination_index = 0 if is_last else index + 1
        destination = vertices[destination_index]
        poly.add_curve(
            CubicBezier(
                vertex,
                _offset(vertex, path_data.o[index]),
                _offset(destination, path_data.i[destination_index]),
                destination,
            )
        )
    return poly


def _extract_path_value(data: Dict[str, Any]) -> Dict[str, Any]:
    """Accept a raw path value, a shape item ({"ks": {"k": ...}}) or a keyframed shape."""
    if "v" in data:
        return data
    ks = data.get("ks")
    if not isinstance(ks, dict) or "k" not in ks:
        raise ValueError("Shape data has neither path vertices (v) nor a ks.k path property")
    value = ks["k"]
    if isinstance(value, dict):
        return value
    # Keyframed path: use the first keyframe's start value
    for keyframe in value:
        if isinstance(keyframe, dict) and keyframe.get("s"):
            log.info("Shape path is animated, using its first keyframe")
            return keyframe["s"][0]
    raise ValueError("Keyframed shape path has no start values")


def load_shape_path(path: Union[str, Path]) -> PolyCurve:
    """Load a bodymovin shape path from a JSON file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Shape file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Shape JSON at {path} must be an object")
    return construct_poly_curve_from_data(_extract_path_value(data))
