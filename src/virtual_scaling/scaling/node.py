"""TransformNode: a parent-linked chain of root <-> virtual coordinate transforms.

Each node owns a rectangle in its enclosing space (screen pixels for a
root, the parent's virtual space otherwise) and a virtual size defining
its own logical coordinate space. The scale between the two is derived,
never set, and is re-derived on every mutation.

Conversions walk the parent chain recursively:

- ``root_to_virtual`` converts through every ancestor first (outermost
  ancestor first), then applies this node's transform.
- ``virtual_to_root`` applies this node's transform first, then walks
  outwards through the ancestors. It is the exact inverse walk.
"""

from __future__ import annotations

import logging
import weakref
from typing import Iterator

import numpy as np

from ..core.errors import DetachedParentError
from ..core.tolerance import approx_equal
from ..core.validation import (
    validate_anchor_side,
    validate_coordinate,
    validate_dimension,
    validate_parent,
    validate_scale_factor,
    validate_scale_strategy,
    validate_virtual_pair,
)
from ..layout.geometry import Dimensions, Point, Rect, RectF
from .scale import ScaleFactor, ScaleStrategy, stretch_scale
from .side import AnchorSide

logger = logging.getLogger(__name__)

DEFAULT_SCALE = 1.0
ROUND_TRIP_TOLERANCE = 1e-6


def _as_point(point: Point | tuple[float, float] | float, y: float | None) -> Point:
    """Accept a Point, an (x, y) tuple, or separate x and y numbers.

    ``y`` is only valid alongside a bare x number.
    """
    if isinstance(point, bool) or isinstance(y, bool):
        raise TypeError("Coordinates must be numbers, got a bool.")
    if isinstance(point, (Point, tuple, list)):
        if y is not None:
            raise TypeError(
                f"y cannot be given with a {type(point).__name__}; "
                "pass flags such as already_in_parent_space by keyword."
            )
        if isinstance(point, Point):
            return point
        px, py = point
        return Point(float(px), float(py))
    if y is None:
        raise TypeError(f"Expected a Point, an (x, y) tuple, or x and y, got {point!r}.")
    return Point(float(point), float(y))


def _as_point_array(points) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected an array of shape (n, 2), got {arr.shape}.")
    return arr


def _is_default_scale(value: float) -> bool:
    return approx_equal(DEFAULT_SCALE, value)


class TransformNode:
    """Maps points between a node's enclosing space and its virtual space.

    Parameters
    ----------
    x, y : int
        Position of the node in its enclosing space.
    width, height : int
        Actual size of the node. When a parent is given without a virtual
        size, these are reinterpreted as the virtual size and the actual
        size is inherited from the parent's footprint.
    parent : TransformNode, optional
        Enclosing node. Held as a weak reference; the parent does not
        track its children.
    virtual_width, virtual_height : int, optional
        Explicit virtual size. Must be given together.
    scale_strategy : callable, optional
        ``(actual, virtual) -> ScaleFactor``. Defaults to ``stretch_scale``.
    """

    __slots__ = (
        "_bounds",
        "_virtual_size",
        "_parent_ref",
        "_scale",
        "_strategy",
        "__weakref__",
    )

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        parent: TransformNode | None = None,
        virtual_width: int | None = None,
        virtual_height: int | None = None,
        *,
        scale_strategy: ScaleStrategy | None = None,
    ) -> None:
        virtual = validate_virtual_pair(virtual_width, virtual_height)
        x = validate_coordinate(x, "x")
        y = validate_coordinate(y, "y")
        width = validate_dimension(width, "width")
        height = validate_dimension(height, "height")

        if virtual is None and parent is not None:
            # Same physical area as the parent, own logical resolution.
            bounds = Rect(x, y, parent.bounds.width, parent.bounds.height)
            virtual_size = Dimensions(width, height)
        else:
            bounds = Rect(x, y, width, height)
            virtual_size = Dimensions(*virtual) if virtual else Dimensions(width, height)

        self._strategy = validate_scale_strategy(scale_strategy or stretch_scale)
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self._bounds = bounds
        self._virtual_size = virtual_size
        self._scale = self._derive_scale(bounds.dimensions, virtual_size)
        logger.debug("Created node %r (scale %r)", self, self._scale)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_rect(
        cls,
        rect: Rect,
        parent: TransformNode | None = None,
        virtual: Dimensions | None = None,
        *,
        scale_strategy: ScaleStrategy | None = None,
    ) -> TransformNode:
        return cls(
            rect.x,
            rect.y,
            rect.width,
            rect.height,
            parent,
            virtual.width if virtual else None,
            virtual.height if virtual else None,
            scale_strategy=scale_strategy,
        )

    @classmethod
    def from_position(
        cls,
        position: Point,
        dimensions: Dimensions,
        parent: TransformNode | None = None,
        virtual: Dimensions | None = None,
        *,
        scale_strategy: ScaleStrategy | None = None,
    ) -> TransformNode:
        rect = Rect(position.int_x, position.int_y, dimensions.width, dimensions.height)
        return cls.from_rect(rect, parent, virtual, scale_strategy=scale_strategy)

    def create_child(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        virtual_width: int | None = None,
        virtual_height: int | None = None,
        scale_strategy: ScaleStrategy | None = None,
    ) -> TransformNode:
        """Create a node anchored to this one.

        Without a virtual size the child covers this node's footprint and
        ``width``/``height`` become its virtual size. The child uses this
        node's scale strategy unless one is given.
        """
        return TransformNode(
            x,
            y,
            width,
            height,
            self,
            virtual_width,
            virtual_height,
            scale_strategy=scale_strategy or self._strategy,
        )

    def create_child_from_rect(
        self,
        rect: Rect,
        virtual: Dimensions | None = None,
        scale_strategy: ScaleStrategy | None = None,
    ) -> TransformNode:
        return TransformNode.from_rect(
            rect, self, virtual, scale_strategy=scale_strategy or self._strategy
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def bounds(self) -> Rect:
        """Footprint in the enclosing space."""
        return self._bounds

    @bounds.setter
    def bounds(self, rect: Rect) -> None:
        x = validate_coordinate(rect.x, "x")
        y = validate_coordinate(rect.y, "y")
        width = validate_dimension(rect.width, "width")
        height = validate_dimension(rect.height, "height")
        self._apply(Rect(x, y, width, height), self._virtual_size)

    @property
    def position(self) -> Point:
        return self._bounds.position

    @position.setter
    def position(self, point: Point | tuple[int, int]) -> None:
        point = _as_point(point, None)
        x = validate_coordinate(point.x, "x")
        y = validate_coordinate(point.y, "y")
        self._apply(Rect(x, y, self._bounds.width, self._bounds.height), self._virtual_size)

    @property
    def size(self) -> Dimensions:
        """Actual size in the enclosing space."""
        return self._bounds.dimensions

    @size.setter
    def size(self, dimensions: Dimensions) -> None:
        width = validate_dimension(dimensions.width, "width")
        height = validate_dimension(dimensions.height, "height")
        self._apply(Rect(self._bounds.x, self._bounds.y, width, height), self._virtual_size)

    @property
    def virtual_size(self) -> Dimensions:
        return self._virtual_size

    @virtual_size.setter
    def virtual_size(self, dimensions: Dimensions) -> None:
        width = validate_dimension(dimensions.width, "virtual_width")
        height = validate_dimension(dimensions.height, "virtual_height")
        self._apply(self._bounds, Dimensions(width, height))

    @property
    def scale(self) -> ScaleFactor:
        """Derived virtual/actual ratio. Read-only."""
        return self._scale

    @property
    def scale_strategy(self) -> ScaleStrategy:
        return self._strategy

    @scale_strategy.setter
    def scale_strategy(self, strategy: ScaleStrategy) -> None:
        validate_scale_strategy(strategy)
        self._scale = self._derive_scale(self._bounds.dimensions, self._virtual_size, strategy)
        self._strategy = strategy
        logger.debug("Switched scale strategy for %r: %r", self, self._scale)

    @property
    def parent(self) -> TransformNode | None:
        if self._parent_ref is None:
            return None
        parent = self._parent_ref()
        if parent is None:
            raise DetachedParentError(
                "This node's parent no longer exists. Keep a reference to every "
                "node in the chain for as long as its children are in use."
            )
        return parent

    def reparent(self, parent: TransformNode | None) -> None:
        """Move this node under ``parent`` (or make it a root with None).

        Bounds and virtual size are kept as they are. Raises
        InvalidArgumentError if the new chain would contain a cycle.
        """
        validate_parent(self, parent)
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        logger.debug("Reparented %r", self)

    def ancestors(self) -> Iterator[TransformNode]:
        """Yield ancestors, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for a root)."""
        return sum(1 for _ in self.ancestors())

    @property
    def root(self) -> TransformNode:
        node = self
        for node in self.ancestors():
            pass
        return node

    @property
    def virtual_bounds(self) -> RectF:
        """This node's whole virtual space, anchored at the origin."""
        return RectF(0.0, 0.0, float(self._virtual_size.width), float(self._virtual_size.height))

    def _derive_scale(
        self,
        actual: Dimensions,
        virtual: Dimensions,
        strategy: ScaleStrategy | None = None,
    ) -> ScaleFactor:
        scale = (strategy or self._strategy)(actual, virtual)
        return validate_scale_factor(scale, ScaleFactor)

    def _apply(self, bounds: Rect, virtual_size: Dimensions) -> None:
        """Assign validated state and re-derive the scale."""
        scale = self._derive_scale(bounds.dimensions, virtual_size)
        self._bounds = bounds
        self._virtual_size = virtual_size
        self._scale = scale
        logger.debug("Recomputed scale for %r: %r", self, scale)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def root_to_virtual(
        self,
        point: Point | tuple[float, float] | float,
        y: float | None = None,
        *,
        already_in_parent_space: bool = False,
    ) -> Point:
        """Convert a root-space point into this node's virtual space.

        With ``already_in_parent_space`` the point is taken to be in the
        parent's virtual space already, so only this node's transform is
        applied.
        """
        point = _as_point(point, y)
        parent = self.parent
        if parent is not None and not already_in_parent_space:
            point = parent.root_to_virtual(point)

        sx, sy = self._scale.x, self._scale.y
        cx, cy = self._bounds.x, self._bounds.y
        out_x = point.x - cx if _is_default_scale(sx) else point.x * sx - cx * sx
        out_y = point.y - cy if _is_default_scale(sy) else point.y * sy - cy * sy
        return Point(out_x, out_y)

    def virtual_to_root(
        self,
        point: Point | tuple[float, float] | float,
        y: float | None = None,
    ) -> Point:
        """Convert a point in this node's virtual space to root space."""
        point = _as_point(point, y)
        sx, sy = self._scale.x, self._scale.y
        cx, cy = self._bounds.x, self._bounds.y
        out_x = point.x + cx if _is_default_scale(sx) else cx + point.x / sx
        out_y = point.y + cy if _is_default_scale(sy) else cy + point.y / sy
        out = Point(out_x, out_y)

        parent = self.parent
        return parent.virtual_to_root(out) if parent is not None else out

    def virtual_rect_to_root(self, rect: Rect | RectF) -> Rect | RectF:
        """Convert a virtual-space rectangle to root space.

        The origin and the far corner are converted separately and the
        size is their difference. A ``Rect`` comes back as a ``Rect`` with
        both corners rounded to whole pixels; a ``RectF`` stays float.
        """
        origin = self.virtual_to_root(rect.position)
        far = self.virtual_to_root(rect.far_corner)
        if isinstance(rect, Rect):
            ox, oy = origin.to_int()
            fx, fy = far.to_int()
            return Rect(ox, oy, fx - ox, fy - oy)
        size = far - origin
        return RectF(origin.x, origin.y, size.x, size.y)

    def root_bounds(self) -> RectF:
        """This node's whole virtual space, in root coordinates."""
        return self.virtual_rect_to_root(self.virtual_bounds)

    def root_to_virtual_array(
        self,
        points,
        *,
        already_in_parent_space: bool = False,
    ) -> np.ndarray:
        """Vectorized ``root_to_virtual`` over an ``(n, 2)`` array."""
        pts = _as_point_array(points)
        parent = self.parent
        if parent is not None and not already_in_parent_space:
            pts = parent.root_to_virtual_array(pts)

        out = np.empty_like(pts)
        axes = ((self._scale.x, self._bounds.x), (self._scale.y, self._bounds.y))
        for axis, (scale, coord) in enumerate(axes):
            if _is_default_scale(scale):
                out[:, axis] = pts[:, axis] - coord
            else:
                out[:, axis] = pts[:, axis] * scale - coord * scale
        return out

    def virtual_to_root_array(self, points) -> np.ndarray:
        """Vectorized ``virtual_to_root`` over an ``(n, 2)`` array."""
        pts = _as_point_array(points)
        out = np.empty_like(pts)
        axes = ((self._scale.x, self._bounds.x), (self._scale.y, self._bounds.y))
        for axis, (scale, coord) in enumerate(axes):
            if _is_default_scale(scale):
                out[:, axis] = pts[:, axis] + coord
            else:
                out[:, axis] = coord + pts[:, axis] / scale

        parent = self.parent
        return parent.virtual_to_root_array(out) if parent is not None else out

    def round_trips(self, point: Point | tuple[float, float]) -> bool:
        """True if root -> virtual -> root returns ``point`` within tolerance."""
        point = _as_point(point, None)
        back = self.virtual_to_root(self.root_to_virtual(point))
        return (
            abs(back.x - point.x) < ROUND_TRIP_TOLERANCE
            and abs(back.y - point.y) < ROUND_TRIP_TOLERANCE
        )

    # ------------------------------------------------------------------
    # Percentage anchoring
    # ------------------------------------------------------------------

    def virtual_point_from_percentage(
        self,
        horizontal_percentage: float = 0.0,
        horizontal_side: AnchorSide = AnchorSide.LEFT,
        vertical_percentage: float = 0.0,
        vertical_side: AnchorSide = AnchorSide.TOP,
    ) -> Point:
        """Resolve a point in virtual space as a fraction of the virtual size.

        Percentages are fractions (0.25 is a quarter). Right and bottom
        anchors measure from the far edge.
        """
        validate_anchor_side(horizontal_side, horizontal=True, name="horizontal_side")
        validate_anchor_side(vertical_side, horizontal=False, name="vertical_side")

        h = 1.0 - horizontal_percentage if horizontal_side.is_far_edge else horizontal_percentage
        v = 1.0 - vertical_percentage if vertical_side.is_far_edge else vertical_percentage
        return Point(h * self._virtual_size.width, v * self._virtual_size.height)

    def root_point_from_percentage(
        self,
        horizontal_percentage: float = 0.0,
        horizontal_side: AnchorSide = AnchorSide.LEFT,
        vertical_percentage: float = 0.0,
        vertical_side: AnchorSide = AnchorSide.TOP,
    ) -> Point:
        return self.virtual_to_root(
            self.virtual_point_from_percentage(
                horizontal_percentage, horizontal_side, vertical_percentage, vertical_side
            )
        )

    # ------------------------------------------------------------------

    def describe(self) -> str:
        b = self._bounds
        has_parent = self._parent_ref is not None
        return (
            f"x: {b.x}, y: {b.y}, w: {b.width}, h: {b.height}, "
            f"vd: {self._virtual_size}, has parent: {has_parent}"
        )

    def __repr__(self) -> str:
        return f"TransformNode({self.describe()})"
