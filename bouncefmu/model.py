"""The bouncing-ball model as seen through the FMI 2.0 model interface."""

from __future__ import annotations

import sys
from typing import Sequence

from .bounce import (
    BounceEnviron,
    BounceState,
    compute_derivatives,
    default_environ,
    default_state,
    floor_error,
    initialize_state,
)
from .fmi2types import EventInfo, Status
from .masks import ModelState

TYPE_NAME = "trickBall"
GUID = "{Trick_Bounce_Model_Version_0.0.0}"

NUM_MODEL_EVENTS = 1
NUM_MODEL_STATES = 2

# Value references of the real variables: (owner, attribute).
_REAL_REFS: tuple[tuple[str, str], ...] = (
    ("bounce_state", "position"),
    ("bounce_state", "velocity"),
    ("bounce_state", "acceleration"),
    ("bounce_state", "mass"),
    ("bounce_env", "gravity"),
    ("bounce_env", "restitution"),
    ("bounce_env", "floor"),
)

_STATE_ATTRS = ("position", "velocity")
_DERIV_ATTRS = ("velocity", "acceleration")

_BOUNCE_THRESHOLD = 1.0e-8


class BounceModel:
    """A bouncing-ball model instance with real-valued variables, two
    continuous states and one floor-impact state event."""

    type_name = TYPE_NAME
    guid = GUID
    num_reals = len(_REAL_REFS)
    num_ints = 0
    num_bools = 0
    num_strs = 0
    num_events = NUM_MODEL_EVENTS
    num_states = NUM_MODEL_STATES

    def __init__(self, instance_name: str = "trickBounce", debug: bool = False) -> None:
        self.instance_name = instance_name
        self.debug = debug
        self.time = 0.0
        self.model_state = ModelState.INSTANTIATED
        self.update_values = False
        self.bounce_state_init = BounceState()
        self.bounce_state = BounceState()
        self.bounce_env = BounceEnviron(
            gravity=0.0, restitution=0.0, floor=0.0, floor_event_tolerance=0.0
        )
        self.event_errors: list[float] = [0.0] * self.num_events
        self.prev_events: list[float] = [0.0] * self.num_events
        self.event_flags: list[bool] = [False] * self.num_events

    @property
    def continuous_states(self) -> list[float]:
        """Current values of the continuous states: position and velocity."""
        return [getattr(self.bounce_state, attr) for attr in _STATE_ATTRS]

    @continuous_states.setter
    def continuous_states(self, values: Sequence[float]) -> None:
        if len(values) != self.num_states:
            raise ValueError(
                f"expected {self.num_states} state values, got {len(values)}"
            )
        for attr, value in zip(_STATE_ATTRS, values):
            setattr(self.bounce_state, attr, float(value))

    @property
    def derivatives(self) -> list[float]:
        """Time derivatives of the continuous states: velocity and acceleration."""
        return [getattr(self.bounce_state, attr) for attr in _DERIV_ATTRS]

    def set_start_values(self) -> None:
        """Load the default environment and initial state and compute derivatives."""
        self.bounce_env = default_environ()
        self.bounce_state_init = default_state(self.bounce_env)
        initialize_state(self.bounce_state_init, self.bounce_state)
        compute_derivatives(self.bounce_env, self.bounce_state)
        if self.debug:
            print(self.describe_states())
        self.update_values = True

    def calculate_derivatives(self) -> None:
        """Update the state derivatives from the current state."""
        compute_derivatives(self.bounce_env, self.bounce_state)

    def integrate(self, step: float) -> Status:
        """Advance the states and time by ``step`` with a two-stage Runge-Kutta."""
        half_step = step / 2.0

        self.calculate_derivatives()
        work_state = self.continuous_states
        work_deriv = self.derivatives

        self.continuous_states = [
            x + step * dx for x, dx in zip(work_state, work_deriv)
        ]

        self.time += step
        self.calculate_derivatives()

        self.continuous_states = [
            x + (dx0 + dx1) * half_step
            for x, dx0, dx1 in zip(work_state, work_deriv, self.derivatives)
        ]

        self.calculate_derivatives()
        return Status.OK

    def calculate_values(self) -> None:
        """Recompute dependent values; only acts during initialization mode."""
        if self.model_state == ModelState.INIT_MODE:
            self.calculate_derivatives()
            self.event_errors[0] = self.get_event_indicator(0)

    def get_event_indicator(self, event_id: int) -> float:
        """Return the indicator of a state event; zero for unknown events."""
        if event_id == 0:
            return floor_error(self.bounce_env, self.bounce_state)
        return 0.0

    def activate_events(self, time_event: bool = False) -> EventInfo:
        """Handle pending events and report what changed.

        The model has no time events; a floor impact reverses the velocity,
        scaled by the coefficient of restitution.
        """
        info = EventInfo()
        info.clear()

        env = self.bounce_env
        state = self.bounce_state
        if state.position - env.floor < _BOUNCE_THRESHOLD:
            state.velocity = -(state.velocity * env.restitution)
            info.values_of_continuous_states_changed = True
            print(f"Hit floor at t = {self.time:12.6f}.")
            sys.stdout.flush()
        return info

    def _resolve(self, ref: int) -> tuple[object, str]:
        if isinstance(ref, bool) or not isinstance(ref, int):
            raise TypeError(f"value reference must be an integer, got {ref!r}")
        if not 0 <= ref < self.num_reals:
            raise ValueError(f"unknown real value reference: {ref}")
        owner, attr = _REAL_REFS[ref]
        return getattr(self, owner), attr

    def get_real(self, refs: Sequence[int]) -> list[float]:
        """Return the values of the real variables with the given references."""
        return [getattr(obj, attr) for obj, attr in map(self._resolve, refs)]

    def set_real(self, refs: Sequence[int], values: Sequence[float]) -> None:
        """Set the real variables with the given references to ``values``."""
        if len(refs) != len(values):
            raise ValueError(
                f"{len(refs)} value references but {len(values)} values"
            )
        targets = [self._resolve(ref) for ref in refs]
        for (obj, attr), value in zip(targets, values):
            setattr(obj, attr, float(value))
        self.update_values = True

    def describe_states(self) -> str:
        """Return a readable summary of the time and the ball's state."""
        state = self.bounce_state
        return "\n".join(
            (
                f"time = {self.time:f}",
                f"   position = {state.position:12.6f}",
                f"   velocity = {state.velocity:12.6f}",
                f"   accel    = {state.acceleration:12.6f}",
                f"   mass     = {state.mass:12.6f}",
            )
        )