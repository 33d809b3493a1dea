"""ScaleFactor: per-axis virtual/actual ratio, plus scale-derivation strategies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..core.tolerance import approx_equal
from ..layout.geometry import Dimensions


@dataclass(frozen=True, eq=False)
class ScaleFactor:
    """Multiply an actual-space coordinate by this to get a virtual one.

    Equality is tolerance-based (see ``approx_equal``). Tolerance equality
    is not transitive, so instances are unhashable.
    """

    x: float
    y: float

    @classmethod
    def from_sizes(
        cls,
        actual_width: int,
        actual_height: int,
        virtual_width: int,
        virtual_height: int,
    ) -> ScaleFactor:
        """Ratio of virtual size to actual size, per axis."""
        return cls(virtual_width / actual_width, virtual_height / actual_height)

    @classmethod
    def from_dimensions(cls, actual: Dimensions, virtual: Dimensions) -> ScaleFactor:
        return cls.from_sizes(actual.width, actual.height, virtual.width, virtual.height)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScaleFactor):
            return NotImplemented
        return approx_equal(self.x, other.x) and approx_equal(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"({self.x}x, {self.y}x)"


# (actual, virtual) -> ScaleFactor
ScaleStrategy = Callable[[Dimensions, Dimensions], ScaleFactor]


def stretch_scale(actual: Dimensions, virtual: Dimensions) -> ScaleFactor:
    """Independent per-axis ratios; the virtual space fills the footprint."""
    return ScaleFactor.from_dimensions(actual, virtual)


def letterbox_scale(actual: Dimensions, virtual: Dimensions) -> ScaleFactor:
    """Aspect-preserving scale.

    Both axes use the larger of the two ratios, so the whole virtual space
    fits inside the footprint with bars on the shorter axis.
    """
    stretched = ScaleFactor.from_dimensions(actual, virtual)
    uniform = max(stretched.x, stretched.y)
    return ScaleFactor(uniform, uniform)
