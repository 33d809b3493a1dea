"""Demo harness: nested colored boxes drawn through their transform nodes."""

from .box import (
    DrawingSurface,
    FixedPointer,
    PointerSource,
    ScaledBox,
    build_demo_boxes,
    render_boxes,
)

__all__ = [
    "DrawingSurface",
    "FixedPointer",
    "PointerSource",
    "ScaledBox",
    "build_demo_boxes",
    "render_boxes",
]
