"""Input validation with clear error messages for layout code."""

from __future__ import annotations

import logging
import math
from typing import Any

from .errors import InvalidArgumentError, InvalidDimensionError

logger = logging.getLogger(__name__)


def validate_dimension(value: Any, name: str) -> int:
    """Validate that a width/height is a positive integer.

    Returns the value as an ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}.")
    if not math.isfinite(value) or value <= 0:
        raise InvalidDimensionError(
            f"{name} must be greater than zero, got {value}. "
            "A zero or negative size makes the scale factor undefined."
        )
    if int(value) != value:
        raise InvalidDimensionError(f"{name} must be a whole number, got {value}.")
    return int(value)


def validate_virtual_pair(
    virtual_width: int | None,
    virtual_height: int | None,
) -> tuple[int, int] | None:
    """Validate an optional (virtual_width, virtual_height) pair.

    Both or neither must be given. Returns the validated pair, or None.
    """
    if (virtual_width is None) != (virtual_height is None):
        raise InvalidArgumentError(
            "virtual_width and virtual_height must both be given if one is given "
            f"(got virtual_width={virtual_width}, virtual_height={virtual_height})."
        )
    if virtual_width is None:
        return None
    return (
        validate_dimension(virtual_width, "virtual_width"),
        validate_dimension(virtual_height, "virtual_height"),
    )


def validate_anchor_side(side: Any, horizontal: bool, name: str) -> Any:
    """Validate that an anchor side belongs to the requested axis.

    ``side`` is an ``AnchorSide``; anything without the axis flags is a
    TypeError.
    """
    if not hasattr(side, "is_horizontal"):
        raise TypeError(f"{name} must be an AnchorSide, got {type(side).__name__}.")
    if horizontal and not side.is_horizontal:
        raise InvalidArgumentError(
            f"{name} must be AnchorSide.LEFT or AnchorSide.RIGHT, got {side}."
        )
    if not horizontal and not side.is_vertical:
        raise InvalidArgumentError(
            f"{name} must be AnchorSide.TOP or AnchorSide.BOTTOM, got {side}."
        )
    return side


def validate_parent(node: Any, parent: Any) -> None:
    """Reject a parent whose ancestor chain already contains ``node``."""
    current = parent
    while current is not None:
        if current is node:
            logger.debug("Rejected parent %r for %r: cycle", parent, node)
            raise InvalidArgumentError(
                "Parent assignment would create a cycle in the node chain."
            )
        current = current.parent


def validate_coordinate(value: Any, name: str) -> int:
    """Validate that a position component is a whole number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}.")
    if not math.isfinite(value) or int(value) != value:
        raise InvalidArgumentError(f"{name} must be a whole number, got {value}.")
    return int(value)


def validate_scale_strategy(strategy: Any) -> Any:
    """Validate that a scale strategy is callable."""
    if not callable(strategy):
        raise TypeError(f"scale_strategy must be callable, got {type(strategy).__name__}.")
    return strategy


def validate_scale_factor(scale: Any, factor_type: type) -> Any:
    """Validate a scale strategy's result.

    ``factor_type`` is the ScaleFactor class; both axes must be finite and
    greater than zero.
    """
    if not isinstance(scale, factor_type):
        raise TypeError(
            f"Scale strategy must return a {factor_type.__name__}, "
            f"got {type(scale).__name__}."
        )
    for axis in ("x", "y"):
        value = getattr(scale, axis)
        if not math.isfinite(value) or value <= 0:
            raise InvalidArgumentError(
                f"Scale strategy returned a non-positive or non-finite {axis} "
                f"factor: {value}."
            )
    return scale
