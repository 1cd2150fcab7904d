#!/usr/bin/env python3
"""
Trim paths (stroke reveal)

A trim path keeps the part of a path between `start` and `end` (fractions of
its length), shifted by `offset`. When the offset pushes the visible window
past the end of the path it wraps around to the beginning, and the visible
part is then the left and right pieces of the split instead of the middle:

    no wrap            wrapped
        S   E              E   S
    [   |===|   ]      [===|   |===]

Trims nest: the segments a shape keeps are trimmed again by each enclosing
group's trim path.
"""

from typing import Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field

from pathtrim.core import SolverCfg, get_logger

from .polycurve import PolyCurve
from .splitter import split_poly_curve_at_length_segments

log = get_logger("trim")


class TrimPath(BaseModel):
    """Trim window along a path's length."""

    start: float = Field(default=0.0, ge=0.0, le=1.0, description="Start of the visible window")
    end: float = Field(default=1.0, ge=0.0, le=1.0, description="End of the visible window")
    offset: float = Field(default=0.0, description="Shift of the window; only its fractional part matters")

    @property
    def is_identity(self) -> bool:
        return (self.start, self.end) in ((0.0, 1.0), (1.0, 0.0))

    @property
    def is_untrimmed(self) -> bool:
        return self.start == 0.0 and self.end == 1.0


def trim_poly_curve(
    poly: PolyCurve, trim: TrimPath, settings: Optional[SolverCfg] = None
) -> List[PolyCurve]:
    """Visible pieces of one PolyCurve under a trim path."""
    if trim.is_identity:
        return [poly]
    if trim.start == trim.end:
        return []

    shift = abs(trim.offset) % 1
    split_start = trim.start + shift
    split_end = trim.end + shift
    parts = split_poly_curve_at_length_segments(poly, split_start % 1, split_end % 1, settings)

    if (split_start % 1 < split_end % 1 and split_start < split_end) or (
        split_start % 1 > split_end % 1 and split_start > split_end
    ):
        return [parts.middle]
    return [parts.left, parts.right]


def path_segments_to_draw(
    poly_curves: Iterable[PolyCurve],
    trim: TrimPath,
    parent_trims: Sequence[TrimPath] = (),
    settings: Optional[SolverCfg] = None,
) -> List[PolyCurve]:
    """
    Apply a trim path, then each enclosing trim path, to a set of PolyCurves.

    Args:
        poly_curves: Paths of the shape
        trim: The shape's own trim path
        parent_trims: Trim paths of enclosing groups, innermost first
        settings: Solver settings forwarded to the splitter

    Returns:
        Flat list of PolyCurves that remain visible
    """
    segments: List[PolyCurve] = []
    for poly in poly_curves:
        segments.extend(trim_poly_curve(poly, trim, settings))

    for parent in parent_trims:
        trimmed: List[PolyCurve] = []
        for poly in segments:
            trimmed.extend(trim_poly_curve(poly, parent, settings))
        segments = trimmed

    log.debug(f"{len(segments)} path segment(s) visible after trimming")
    return segments


def path_closes(segments: Sequence[PolyCurve], trim: Optional[TrimPath] = None) -> bool:
    """A drawn path closes only as a single, closed and untrimmed PolyCurve."""
    untrimmed = trim is None or trim.is_untrimmed
    return len(segments) == 1 and segments[0].is_closed and untrimmed
