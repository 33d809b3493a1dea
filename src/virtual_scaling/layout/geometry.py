"""Geometric primitives for coordinate conversion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point in some coordinate space (pixels or virtual units)."""

    x: float
    y: float

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    @property
    def int_x(self) -> int:
        return int(round(self.x))

    @property
    def int_y(self) -> int:
        return int(round(self.y))

    def to_int(self) -> tuple[int, int]:
        return self.int_x, self.int_y

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class Dimensions:
    """An integer width/height pair."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class RectF:
    """An axis-aligned rectangle with float components."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def far_corner(self) -> Point:
        """The corner opposite the origin."""
        return Point(self.right, self.bottom)

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def to_tuple(self) -> tuple[float, float, float, float]:
        return self.x, self.y, self.width, self.height


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in integer pixel space."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def far_corner(self) -> Point:
        """The corner opposite the origin."""
        return Point(self.right, self.bottom)

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)
