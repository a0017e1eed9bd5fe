"""Numeric helpers shared by the metric calculators."""

from __future__ import annotations

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp *value* into the closed interval [low, high]."""
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives.

    The built-in :func:`round` uses banker's rounding, which would turn
    ``(81 + 80) / 2`` into 80 instead of 81.
    """
    return math.floor(value + 0.5)


def ratio(part: float, whole: float) -> float:
    """Return ``part / whole``, or 0.0 when *whole* is zero."""
    if whole <= 0:
        return 0.0
    return part / whole
