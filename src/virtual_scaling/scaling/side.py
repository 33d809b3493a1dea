"""AnchorSide: the edge a percentage offset is measured from."""

from __future__ import annotations

from enum import Enum


class AnchorSide(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def is_horizontal(self) -> bool:
        """True for sides that anchor a horizontal (x) offset."""
        return self in (AnchorSide.LEFT, AnchorSide.RIGHT)

    @property
    def is_vertical(self) -> bool:
        return self in (AnchorSide.TOP, AnchorSide.BOTTOM)

    @property
    def is_far_edge(self) -> bool:
        """Right and bottom measure from the far edge, so percentages flip."""
        return self in (AnchorSide.RIGHT, AnchorSide.BOTTOM)
