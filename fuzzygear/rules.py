"""Rule base mapping fuzzy input levels to a gear level."""

from __future__ import annotations

from itertools import product

from fuzzygear.sets import EngineRpm, Gear, ThrottleLevel, Velocity


def _gear_for(v: Velocity, r: EngineRpm, t: ThrottleLevel) -> Gear | None:
    """Consequent of the first matching rule, or None when no rule applies."""
    if v is Velocity.VERY_LOW:
        return Gear.START
    if v is Velocity.LOW:
        # Dynamic acceleration at low rpm keeps the start gear.
        if r in (EngineRpm.LOW, EngineRpm.MEDIUM) and t in (ThrottleLevel.HIGH, ThrottleLevel.MEDIUM):
            return Gear.START
        return Gear.LOW
    if v is Velocity.MEDIUM:
        if r is EngineRpm.LOW and t is ThrottleLevel.HIGH:
            return Gear.LOW
        if r in (EngineRpm.LOW, EngineRpm.MEDIUM):
            return Gear.MEDIUM
        return Gear.HIGH
    if v is Velocity.HIGH:
        if r is EngineRpm.LOW and t is ThrottleLevel.HIGH:
            return Gear.MEDIUM
        return Gear.HIGH
    return None


def build_rules() -> dict[tuple[Velocity, EngineRpm, ThrottleLevel], Gear]:
    """Return the rule table keyed by (velocity, rpm, throttle) levels."""
    rules = {}
    for v, r, t in product(Velocity, EngineRpm, ThrottleLevel):
        gear = _gear_for(v, r, t)
        if gear is not None:
            rules[(v, r, t)] = gear
    return rules


RULES = build_rules()