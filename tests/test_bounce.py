import pytest

from bouncefmu.bounce import (
    BounceEnviron,
    BounceState,
    compute_derivatives,
    default_environ,
    default_state,
    floor_error,
    initialize_state,
)


def test_default_environ_values():
    env = default_environ()
    assert env.gravity == 9.81
    assert env.restitution == 0.7
    assert env.floor == 0.0
    assert env.floor_event_tolerance == 1.0e-12


def test_default_environ_returns_fresh_instances():
    first = default_environ()
    second = default_environ()
    first.gravity = 1.62
    assert second.gravity == 9.81


def test_default_state_values():
    state = default_state(default_environ())
    assert state.mass == 1.0
    assert state.position == 1.0
    assert state.velocity == 0.0
    assert state.acceleration == -9.81


def test_default_state_follows_environment_gravity():
    env = BounceEnviron(gravity=3.5)
    assert default_state(env).acceleration == -3.5


def test_initialize_state_copies_position_and_velocity_only():
    init = BounceState(mass=2.0, position=4.0, velocity=-1.5, acceleration=7.0)
    state = BounceState(mass=5.0, position=0.0, velocity=0.0, acceleration=0.25)
    result = initialize_state(init, state)
    assert result is state
    assert state.position == 4.0
    assert state.velocity == -1.5
    assert state.mass == 5.0
    assert state.acceleration == 0.25


def test_initialize_state_leaves_init_untouched():
    init = BounceState(mass=2.0, position=4.0, velocity=-1.5, acceleration=7.0)
    initialize_state(init, BounceState())
    assert init == BounceState(mass=2.0, position=4.0, velocity=-1.5, acceleration=7.0)


def test_compute_derivatives_sets_acceleration_from_gravity():
    env = default_environ()
    state = BounceState(mass=1.0, position=0.5, velocity=2.0, acceleration=0.0)
    result = compute_derivatives(env, state)
    assert result is state
    assert state.acceleration == -env.gravity
    assert state.position == 0.5
    assert state.velocity == 2.0


@pytest.mark.parametrize("gravity", [0.0, 1.62, 9.81, 24.79])
def test_compute_derivatives_is_negated_gravity(gravity):
    state = compute_derivatives(BounceEnviron(gravity=gravity), BounceState())
    assert state.acceleration == -gravity


def test_floor_error_on_default_setup_is_initial_height():
    env = default_environ()
    state = default_state(env)
    assert floor_error(env, state) == 1.0


@pytest.mark.parametrize(
    "position, floor",
    [(1.0, 0.0), (0.0, 0.0), (-0.25, 0.0), (3.0, 3.0), (2.0, 5.0)],
)
def test_floor_error_sign_matches_height_above_floor(position, floor):
    env = BounceEnviron(floor=floor)
    state = BounceState(position=position)
    error = floor_error(env, state)
    assert error + floor == pytest.approx(position)
    assert (error > 0) == (position > floor)
    assert (error == 0) == (position == floor)


def test_floor_error_does_not_modify_state():
    env = default_environ()
    state = BounceState(mass=1.0, position=0.3, velocity=-2.0, acceleration=-9.81)
    floor_error(env, state)
    assert state == BounceState(mass=1.0, position=0.3, velocity=-2.0, acceleration=-9.81)