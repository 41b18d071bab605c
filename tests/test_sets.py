import pytest

from fuzzygear.sets import (
    EngineRpm,
    Gear,
    ThrottleLevel,
    Velocity,
    defuzzify_weighted_average,
    memberships,
    triangular,
)

GEAR_RANGES = {g: g.value for g in Gear}


def test_triangular_peak_is_full_membership():
    assert triangular(10, 0, 10, 20) == 1.0


@pytest.mark.parametrize("x", [-1, 21, 1000])
def test_triangular_outside_is_zero(x):
    assert triangular(x, 0, 10, 20) == 0.0


def test_triangular_feet_are_zero():
    assert triangular(0, 0, 10, 20) == 0.0
    assert triangular(20, 0, 10, 20) == 0.0


@pytest.mark.parametrize("x", [1, 3, 5, 7, 9])
def test_triangular_symmetric_triangle(x):
    assert triangular(x, 0, 10, 20) == pytest.approx(triangular(20 - x, 0, 10, 20))


def test_triangular_rises_then_falls():
    rising = [triangular(x, 0, 10, 20) for x in range(0, 11)]
    falling = [triangular(x, 0, 10, 20) for x in range(10, 21)]
    assert rising == sorted(rising)
    assert falling == sorted(falling, reverse=True)


def test_triangular_shoulder_sets():
    # left shoulder: a == b, right shoulder: b == c
    assert triangular(0, 0, 0, 20) == 1.0
    assert triangular(100, 50, 100, 100) == 1.0


def test_memberships_at_zero_velocity():
    assert memberships(Velocity, 0) == {Velocity.VERY_LOW: 1.0}


@pytest.mark.parametrize("variable", [Velocity, EngineRpm, ThrottleLevel, Gear])
def test_memberships_full_at_each_peak(variable):
    for level in variable:
        assert memberships(variable, level.peak)[level] == 1.0


@pytest.mark.parametrize("value", [0, 15, 35, 55, 75, 95, 115, 135, 199])
def test_memberships_degrees_in_unit_interval(value):
    result = memberships(Velocity, value)
    assert result
    assert all(0.0 < d <= 1.0 for d in result.values())
    assert set(result) <= set(Velocity)


def test_memberships_out_of_universe_is_empty():
    assert memberships(ThrottleLevel, 150) == {}


def test_defuzzify_empty_is_zero():
    assert defuzzify_weighted_average({}, GEAR_RANGES) == 0.0


@pytest.mark.parametrize("gear", list(Gear))
def test_defuzzify_single_label_is_its_peak(gear):
    assert defuzzify_weighted_average({gear: 0.3}, GEAR_RANGES) == pytest.approx(gear.peak)


def test_defuzzify_scale_invariant():
    weights = {Gear.START: 0.2, Gear.MEDIUM: 0.7, Gear.HIGH: 0.4}
    scaled = {k: v * 3 for k, v in weights.items()}
    assert defuzzify_weighted_average(weights, GEAR_RANGES) == pytest.approx(
        defuzzify_weighted_average(scaled, GEAR_RANGES)
    )


def test_defuzzify_between_peaks():
    result = defuzzify_weighted_average({Gear.START: 0.5, Gear.HIGH: 0.5}, GEAR_RANGES)
    assert Gear.START.peak < result < Gear.HIGH.peak


def test_defuzzify_unknown_label_raises():
    with pytest.raises(KeyError):
        defuzzify_weighted_average({"sixth": 1.0}, GEAR_RANGES)