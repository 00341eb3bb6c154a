"""Rounding and clamping helpers shared by the scorers."""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves away from zero for positives (``2.5 -> 3``)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def clamp_int(value: float, low: int, high: int) -> int:
    return int(clamp(round_half_up(value), low, high))


def clamp01(value: float) -> float:
    return clamp(value, 0.0, 1.0)
