"""virtual-scaling: map coordinates between virtual layouts and physical pixels."""

from ._version import __version__
from .core.errors import (
    DetachedParentError,
    InvalidArgumentError,
    InvalidDimensionError,
    ScalingError,
)
from .core.tolerance import approx_equal
from .layout.geometry import Dimensions, Point, Rect, RectF
from .scaling import (
    AnchorSide,
    ScaleFactor,
    TransformNode,
    letterbox_scale,
    stretch_scale,
)

__all__ = [
    "__version__",
    "TransformNode",
    "ScaleFactor",
    "AnchorSide",
    "stretch_scale",
    "letterbox_scale",
    "approx_equal",
    "Point",
    "Dimensions",
    "Rect",
    "RectF",
    "ScalingError",
    "InvalidArgumentError",
    "InvalidDimensionError",
    "DetachedParentError",
]
