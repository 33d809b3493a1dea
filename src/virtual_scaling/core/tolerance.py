"""Tolerance-based float comparison for scale and coordinate values."""

from __future__ import annotations

TOLERANCE = 1e-7


def approx_equal(a: float, b: float) -> bool:
    """True if ``a`` and ``b`` differ by strictly less than ``TOLERANCE``."""
    return abs(a - b) < TOLERANCE
