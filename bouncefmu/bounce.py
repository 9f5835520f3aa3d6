"""State, environment and equations of motion of a one-dimensional bouncing ball.

The vertical axis points up, gravity pulls down, and the floor is a
horizontal plane at a fixed height.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BounceEnviron:
    """Environment the ball moves in.

    ``gravity`` is the magnitude of the gravitational acceleration (m/s^2),
    ``restitution`` the ball's coefficient of restitution, ``floor`` the
    height of the floor (m), and ``floor_event_tolerance`` the error
    tolerance used when locating a floor impact.
    """

    gravity: float = 9.81
    restitution: float = 0.7
    floor: float = 0.0
    floor_event_tolerance: float = 1.0e-12


@dataclass
class BounceState:
    """Mass (kg), position (m), velocity (m/s) and acceleration (m/s^2)."""

    mass: float = 0.0
    position: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0


def default_environ() -> BounceEnviron:
    """Return the default environment: Earth gravity, restitution 0.7, floor at 0."""
    return BounceEnviron(
        gravity=9.81,
        restitution=0.7,
        floor=0.0,
        floor_event_tolerance=1.0e-12,
    )


def default_state(env: BounceEnviron) -> BounceState:
    """Return the default initial state: a 1 kg ball at rest 1 m up."""
    return BounceState(
        mass=1.0,
        position=1.0,
        velocity=0.0,
        acceleration=-env.gravity,
    )


def initialize_state(init: BounceState, state: BounceState) -> BounceState:
    """Copy the initial position and velocity into ``state`` and return it."""
    state.position = init.position
    state.velocity = init.velocity
    return state


def compute_derivatives(env: BounceEnviron, state: BounceState) -> BounceState:
    """Set the state's acceleration from gravity and return the state."""
    state.acceleration = -env.gravity
    return state


def floor_error(env: BounceEnviron, state: BounceState) -> float:
    """Return the height of the ball above the floor; zero at impact."""
    return state.position - env.floor