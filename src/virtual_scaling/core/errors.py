"""Exception types raised by scaling nodes."""

from __future__ import annotations


class ScalingError(Exception):
    """Base class for all virtual-scaling errors."""


class InvalidArgumentError(ScalingError, ValueError):
    """An argument combination is not allowed (unmatched pair, wrong axis, cycle)."""


class InvalidDimensionError(ScalingError, ValueError):
    """A width or height is zero or negative."""


class DetachedParentError(ScalingError, ReferenceError):
    """A node's parent was garbage-collected while the node is still in use."""
