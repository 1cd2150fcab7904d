from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List

from pathtrim.errors import EmptyPolyCurveError

from .bezier import Curve


@dataclass
class PolyCurve:
    """Ordered sequence of curves forming one continuous path."""

    curves: List[Curve] = field(default_factory=list)
    is_closed: bool = False

    def __post_init__(self):
        # Own the list; callers may keep mutating theirs
        self.curves = list(self.curves)

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    @property
    def is_empty(self) -> bool:
        return not self.curves

    def curve(self, index: int) -> Curve:
        return self.curves[index]

    def add_curve(self, curve: Curve) -> None:
        self.curves.append(curve)

    def require_curves(self) -> None:
        if not self.curves:
            raise EmptyPolyCurveError()

    def curve_lengths(self) -> List[float]:
        """Length of each curve, in order."""
        self.require_curves()
        return [curve.length() for curve in self.curves]

    def total_length(self) -> float:
        return sum(self.curve_lengths())
