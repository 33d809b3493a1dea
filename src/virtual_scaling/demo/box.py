"""ScaledBox: a colored region with its own virtual resolution.

A box draws its whole virtual space onto a surface and maps pointer
positions into its own coordinates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from ..layout.geometry import Dimensions, Point, Rect, RectF
from ..scaling.node import TransformNode

logger = logging.getLogger(__name__)

Color = tuple[int, int, int, int]

# Colors used by the demo chain
BLACK: Color = (0, 0, 0, 255)
RED: Color = (255, 0, 0, 255)
BLUE: Color = (0, 0, 255, 255)


class DrawingSurface(Protocol):
    """Anything that can fill rectangles and draw text in root pixels."""

    def fill_rect(self, rect: RectF, color: Color) -> None: ...

    def draw_text(self, text: str, x: float, y: float) -> None: ...


class PointerSource(Protocol):
    def position(self) -> Point: ...


@dataclass
class FixedPointer:
    """A pointer that always reports the same position."""

    point: Point

    def position(self) -> Point:
        return self.point


class ScaledBox:
    """A named, colored box backed by a TransformNode.

    The box always uses an explicit virtual size, so ``bounds`` is taken
    literally in the parent box's virtual space.
    """

    def __init__(
        self,
        name: str,
        bounds: Rect,
        virtual: Dimensions,
        color: Color,
        parent: ScaledBox | None = None,
    ) -> None:
        self._name = name
        self._color = color
        self._parent = parent
        self._node = TransformNode.from_rect(
            bounds, parent.node if parent is not None else None, virtual
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def parent(self) -> ScaledBox | None:
        return self._parent

    @property
    def node(self) -> TransformNode:
        return self._node

    def pointer_to_virtual(self, pointer: PointerSource) -> Point:
        """Pointer position in this box's virtual space."""
        return self._node.root_to_virtual(pointer.position())

    def pointer_round_trip(self, pointer: PointerSource) -> Point:
        """Pointer position mapped into the box and back out to root space."""
        return self._node.virtual_to_root(self.pointer_to_virtual(pointer))

    def is_pointer_inside(self, pointer: PointerSource) -> bool:
        """True if the pointer lies within this box's virtual space."""
        return self._node.virtual_bounds.contains(*self.pointer_to_virtual(pointer).to_tuple())

    def draw(self, surface: DrawingSurface) -> RectF:
        rect = self._node.root_bounds()
        surface.fill_rect(rect, self._color)
        return rect

    def status_line(self, pointer: PointerSource) -> str:
        rmc = self.pointer_to_virtual(pointer)
        amc = self.pointer_round_trip(pointer)
        return (
            f"Box {self._name} D: {self._node.describe()}, "
            f"RMC: ({rmc.x:.3f}, {rmc.y:.3f}), AMC: ({amc.x:.3f}, {amc.y:.3f}), "
            f"inside: {self.is_pointer_inside(pointer)}"
        )

    def __repr__(self) -> str:
        return f"ScaledBox({self._name!r}, {self._node.describe()})"


def build_demo_boxes() -> list[ScaledBox]:
    """Three nested boxes, each with a 1024x1024 virtual space."""
    virtual = Dimensions(1024, 1024)
    parent = ScaledBox("p", Rect(128, 128, 512, 512), virtual, BLACK)
    child = ScaledBox("c1", Rect(32, 32, 512, 512), virtual, RED, parent)
    grandchild = ScaledBox("c2", Rect(0, 0, 512, 512), virtual, BLUE, child)
    return [parent, child, grandchild]


def render_boxes(
    surface: DrawingSurface,
    boxes: list[ScaledBox],
    pointer: PointerSource,
    line_height: float = 14.0,
) -> list[str]:
    """Draw every box, then one status line per box. Returns the lines."""
    for box in boxes:
        box.draw(surface)

    pos = pointer.position()
    lines = [f"(Actual Mouse Coords: {pos.x:g}, {pos.y:g})"]
    lines.extend(box.status_line(pointer) for box in boxes)
    for i, line in enumerate(lines):
        surface.draw_text(line, 16.0, i * line_height)
    logger.debug("Rendered %d boxes", len(boxes))
    return lines
