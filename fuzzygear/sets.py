"""Fuzzy sets for the gear-shift controller and the math that works on them."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum


class _FuzzySet(Enum):
    """Linguistic level whose value is the triangle (a, b, c) of its membership function."""

    @property
    def peak(self) -> float:
        """Point at which membership in this level is full."""
        return float(self.value[1])

    def degree(self, x: float) -> float:
        """Membership degree of ``x`` in this level."""
        return triangular(x, *self.value)


class Velocity(_FuzzySet):
    """Vehicle velocity levels (0-200)."""

    VERY_LOW = (0, 0, 20)
    LOW = (0, 30, 50)
    MEDIUM = (20, 60, 100)
    HIGH = (60, 90, 140)
    VERY_HIGH = (100, 120, 200)


class EngineRpm(_FuzzySet):
    """Engine speed levels (0-8000 rpm)."""

    LOW = (0, 0, 2500)
    MEDIUM = (0, 3000, 5000)
    HIGH = (3000, 5000, 8000)


class ThrottleLevel(_FuzzySet):
    """Accelerator pedal levels (0-100)."""

    LOW = (0, 0, 40)
    MEDIUM = (0, 50, 80)
    HIGH = (50, 100, 100)


class Gear(_FuzzySet):
    """Output gear levels (1-7)."""

    START = (1, 1, 2)
    LOW = (1, 2, 4)
    MEDIUM = (2, 4, 6)
    HIGH = (4, 6, 7)


def triangular(x: float, a: float, b: float, c: float) -> float:
    """Membership of ``x`` in the triangular set with feet ``a``, ``c`` and peak ``b``."""
    if x < a or x > c:
        return 0.0
    if x == b:
        return 1.0
    if x < b:
        return (x - a) / (b - a)
    return (c - x) / (c - b)


def memberships(variable: type[_FuzzySet], value: float) -> dict:
    """Return the levels of ``variable`` that ``value`` belongs to, with non-zero degrees."""
    value = float(value)
    degrees = {level: level.degree(value) for level in variable}
    return {level: degree for level, degree in degrees.items() if degree > 0.0}


def defuzzify_weighted_average(weights: Mapping, ranges: Mapping) -> float:
    """Crisp value as the weighted average of the peaks of the weighted labels.

    Returns 0.0 when there is nothing to average.
    """
    numerator = 0.0
    denominator = 0.0
    for label, weight in weights.items():
        numerator += float(ranges[label][1]) * weight
        denominator += weight
    if denominator == 0.0:
        return 0.0
    return numerator / denominator