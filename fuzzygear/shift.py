"""Mamdani-style fuzzy inference of the gear to engage."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import ClassVar

from fuzzygear.rules import RULES
from fuzzygear.sets import (
    EngineRpm,
    Gear,
    ThrottleLevel,
    Velocity,
    defuzzify_weighted_average,
    memberships,
)

_GEAR_RANGES = {gear: gear.value for gear in Gear}


def infer_gear(velocity: float, engine_rpm: float, throttle: float) -> float:
    """Crisp gear for the given inputs; 0.0 when no rule fires."""
    weights: dict[Gear, float] = {}
    for (v, v_deg), (r, r_deg), (t, t_deg) in product(
        memberships(Velocity, velocity).items(),
        memberships(EngineRpm, engine_rpm).items(),
        memberships(ThrottleLevel, throttle).items(),
    ):
        gear = RULES.get((v, r, t))
        if gear is None:
            continue
        strength = min(v_deg, r_deg, t_deg)
        if strength > weights.get(gear, -1.0):
            weights[gear] = strength
    return defuzzify_weighted_average(weights, _GEAR_RANGES)


@dataclass
class GearShift:
    """Controller state: velocity (0-255), engine rpm (0-65535) and throttle (0-255)."""

    MAX_GEAR: ClassVar[int] = 7

    velocity: int = 0
    engine_rpm: int = 0
    throttle: int = 0

    def shift(self) -> float:
        """Infer the gear from the stored inputs, reduced to their unsigned widths."""
        return infer_gear(
            int(self.velocity) & 0xFF,
            int(self.engine_rpm) & 0xFFFF,
            int(self.throttle) & 0xFF,
        )