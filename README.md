# bouncefmu

A small, self-contained model of a ball bouncing on a horizontal floor in one
dimension, the vocabulary of the FMI 2.0 interface it is exposed through, and
a closed-form reference trajectory to compare numerical results against.

## Modules

- `bouncefmu.bounce` — the physical model: `BounceEnviron` (gravity,
  restitution, floor height, floor event tolerance) and `BounceState` (mass,
  position, velocity, acceleration), with `default_environ`,
  `default_state`, `initialize_state`, `compute_derivatives` and
  `floor_error`.
- `bouncefmu.model` — `BounceModel`, the ball behind an FMU-style model
  interface: start values, derivative evaluation, a two-stage Runge-Kutta
  integration step, the floor-impact event indicator and event handling, and
  access to its real variables by value reference. Its `continuous_states`
  and `derivatives` properties give the two continuous states (position,
  velocity) and their time derivatives.
- `bouncefmu.analytic` — the exact trajectory, computed frame by frame with
  exact impact times (`next_root`, `parabolic`, `simulate`, `write_csv`,
  `Sample`).
- `bouncefmu.fmi2types` — `Status`, `FmuType`, `StatusKind`, `EventInfo` and
  `status_name`, which gives names such as `"fmi2OK"` (or `"Unknown"`).
- `bouncefmu.functions` — the FMI 2.0 interface function names by
  `FunctionGroup` (`functions_for`), and how exported symbols are formed with
  an optional prefix (`full_name`, `exported_names`).
- `bouncefmu.masks` — `ModelState` and the table of which interface calls are
  allowed in which state (`allowed_states`, `is_call_allowed`).

## Installation

```
pip install .
```

## The analytic reference solution

```
bouncefmu-analytic
```

drops the ball from 1 m (gravity 9.81 m/s², restitution 0.7, frames of
0.001 s), prints `Hit floor at t = ...` for each impact, and writes time,
position, velocity and acceleration as CSV to
`RUN_analytic/log_FMI2_Bounce.csv`, creating the directory if needed. The
initial point, every impact and every tenth frame are recorded.

Options:

- `--output PATH` — where to write the CSV log.
- `--stop-time SECONDS` — simulation end time (default 2.5).

From Python:

```python
import sys
from bouncefmu.analytic import simulate, write_csv

samples = simulate(0.0, 2.5, 0.001, 1.0, 0.0, -9.81, 0.7, 10)
write_csv(samples, sys.stdout)
```

`simulate` is a generator of `Sample` records; those at an impact have
`event=True`.

## Stepping the model

Value references of the real variables:

| ref | variable     |
|-----|--------------|
| 0   | position     |
| 1   | velocity     |
| 2   | acceleration |
| 3   | mass         |
| 4   | gravity      |
| 5   | restitution  |
| 6   | floor        |

```python
from bouncefmu.model import BounceModel

model = BounceModel("ball", False)
model.set_start_values()
model.set_real([0, 1], [1.0, 0.0])

for _ in range(250):
    model.integrate(0.01)
    if model.get_event_indicator(0) < 1.0e-8:
        model.activate_events(False)

position, velocity, acceleration = model.get_real([0, 1, 2])
print(model.describe_states())
```

`activate_events` returns an `EventInfo`; when the ball is at or below the
floor it reverses the velocity, scaled by the restitution, sets
`values_of_continuous_states_changed` and prints the impact time. Unknown
value references raise `ValueError`; non-integer ones raise `TypeError`.

## Checking call validity

```python
from bouncefmu.masks import ModelState, allowed_states, is_call_allowed

allowed_states("fmi2DoStep")
is_call_allowed("fmi2SetReal", ModelState.INSTANTIATED)
```

An unknown function name raises `ValueError`.

## What this package does not do

It does not load, unpack or run FMU archives or shared libraries, and it has
no Model Exchange or Co-Simulation driver program beyond the analytic
reference command. `BounceModel` does not enforce the call-validity table in
`bouncefmu.masks`; that table is provided for callers to check against.

## Tests

```
pip install .[test]
pytest
```