# fuzzygear

Suggests a gear for a vehicle from three readings: velocity, engine RPM
and throttle position. It uses fuzzy logic. Each reading is graded against
triangular fuzzy sets. A fixed rule base maps each combination of input
sets to a gear set, and the rule's strength is the smallest of the three
grades. For each gear set the strongest firing rule is kept. The crisp
result is the weighted average of the peaks of the gear sets. These peaks
are 1, 2, 4 and 6, so a result always lies between 1 and 6. When no rule
fires, the result is `0.0`.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fuzzygear -v 50 -r 3000 -t 20
```

| Option | Meaning              | Intended range | Default |
|--------|----------------------|----------------|---------|
| `-v`   | velocity             | 0–200          | 0       |
| `-r`   | engine RPM           | 0–8000         | 0       |
| `-t`   | throttle position, % | 0–100          | 0       |

The options take integers. The command prints two values on one line, with
no trailing newline. The first is the gear value, in `%g` form. The second
is that value rounded to the nearest whole number, with halves rounded away
from zero. The exit status is 0.

## Library

```python
from fuzzygear.shift import GearShift, infer_gear

print(infer_gear(50, 3000, 20))

box = GearShift(velocity=90, engine_rpm=4000, throttle=60)
print(box.shift())
```

- `infer_gear(velocity, engine_rpm, throttle)` runs the inference on the
  values as given.
- `GearShift` is a dataclass. Its fields are `velocity`, `engine_rpm` and
  `throttle`, and each defaults to 0. Its `shift()` method first converts
  each input to an integer. It then wraps velocity and throttle to 0–255
  and engine RPM to 0–65535, and passes the results to `infer_gear`.
  `GearShift.MAX_GEAR` is 7.

The building blocks are in `fuzzygear.sets` and `fuzzygear.rules`:

- `Velocity`, `EngineRpm`, `ThrottleLevel` and `Gear` are enums. The value
  of each member is its triangle `(a, b, c)`. Each member also has a `peak`
  property and a `degree(x)` method.
- `triangular(x, a, b, c)` gives the membership of a point in a triangular
  set.
- `memberships(variable, value)` grades a value against one of the enums.
  It returns only the levels whose grade is above zero.
- `defuzzify_weighted_average(weights, ranges)` turns a mapping of gear
  grades into a crisp value. It uses the middle element of each range as
  the peak.
- `build_rules()` returns the rule table. It maps
  `(Velocity, EngineRpm, ThrottleLevel)` triples to a `Gear` level.
  `fuzzygear.rules.RULES` holds the prebuilt table.

## Limits

No rule uses `Velocity.VERY_HIGH`. A velocity of 140 or more therefore
fires no rule. So does an engine RPM of 8000 or more, or a throttle above
100. In each of these cases the result is `0.0`.

The package only computes a suggestion. It does not control a gearbox or
read any sensors.