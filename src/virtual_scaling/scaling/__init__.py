"""Scale factors, anchor sides and the transform node chain."""

from .node import TransformNode
from .scale import ScaleFactor, ScaleStrategy, letterbox_scale, stretch_scale
from .side import AnchorSide

__all__ = [
    "TransformNode",
    "ScaleFactor",
    "ScaleStrategy",
    "stretch_scale",
    "letterbox_scale",
    "AnchorSide",
]
