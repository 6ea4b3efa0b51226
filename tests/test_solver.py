import sys
from math import pi, sqrt
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1] / 'scripts'))

import pytest
from segments import SinusoidalSegment, ConstantVelocitySegment
from solver import InfeasibleProfileError, calculate, calculate_through


def test_rest_to_rest_parameters():
    s = calculate(0.0, 1.0, 0.0, 1.0)
    assert isinstance(s, SinusoidalSegment)
    assert s.A == pytest.approx(-0.5)
    assert s.f == pytest.approx(sqrt(2))
    assert s.phi == pytest.approx(0.0)
    assert s.m == pytest.approx(-0.5)
    assert s.dt == pytest.approx(pi / sqrt(2))
    assert s.t0 == 0.0


def test_rest_to_rest_endpoints():
    s = calculate(0.0, 1.0, 0.0, 1.0)
    assert s.velocity(0.0) == pytest.approx(0.0, abs=1e-12)
    assert s.position(0.0) == pytest.approx(0.0, abs=1e-12)
    assert s.velocity(s.dt) == pytest.approx(0.0, abs=1e-12)
    assert s.position(s.dt) == pytest.approx(1.0)
    assert s.velocity(s.dt / 2) == pytest.approx(1 / sqrt(2))


def test_negative_direction():
    s = calculate(0.0, -1.0, 0.0, 1.0)
    assert s.A > 0
    assert s.velocity(s.dt / 2) == pytest.approx(-1 / sqrt(2))
    assert s.position(s.dt) == pytest.approx(-1.0)


def test_start_velocity_is_matched():
    s = calculate(0.0, 3.0, 0.5, 1.0)
    assert s.velocity(0.0) == pytest.approx(0.5)
    assert s.position(s.dt) == pytest.approx(3.0)
    assert s.velocity(s.dt) == pytest.approx(0.0, abs=1e-12)
    # Peak acceleration equals the bound
    assert abs(s.A) * s.f**2 == pytest.approx(1.0)


def test_short_move_uses_obtuse_phase():
    # a*|dx| < v0**2: the move only decelerates
    s = calculate(0.0, 0.2, 0.5, 1.0)
    assert s.phi > pi / 2
    assert s.velocity(0.0) == pytest.approx(0.5)
    assert s.velocity(s.dt / 2) < 0.5
    assert s.position(s.dt) == pytest.approx(0.2)
    assert s.max_speed == pytest.approx(0.5)


def test_zero_displacement_is_a_no_op():
    s = calculate(2.0, 2.0, 0.0, 1.0)
    assert isinstance(s, ConstantVelocitySegment)
    assert s.dt == 0.0
    assert s.x0 == s.xf == 2.0


def test_zero_displacement_with_velocity_is_infeasible():
    with pytest.raises(InfeasibleProfileError):
        calculate(2.0, 2.0, 1.0, 1.0)


@pytest.mark.parametrize("x0, xf, v0, a", [
    (0.0, 0.1, 2.0, 1.0),   # arcsine domain error
    (0.0, 0.5, 1.0, 1.0),   # zero denominator
    (0.0, -0.1, -2.0, 1.0),
])
def test_infeasible_start_velocity(x0, xf, v0, a):
    with pytest.raises(InfeasibleProfileError, match="end-point"):
        calculate(x0, xf, v0, a)


def test_infeasible_is_a_value_error():
    assert issubclass(InfeasibleProfileError, ValueError)


@pytest.mark.parametrize("a", [0.0, -1.0, None])
def test_acceleration_must_be_positive(a):
    with pytest.raises(ValueError):
        calculate(0.0, 1.0, 0.0, a)


def test_calculate_through_enters_and_leaves_at_speed():
    s = calculate_through(0.0, 1.0, 0.2, 1.0)
    assert s.velocity(0.0) == pytest.approx(0.2)
    assert s.velocity(s.dt) == pytest.approx(0.2)
    assert s.position(0.0) == pytest.approx(0.0, abs=1e-12)
    assert s.position(s.dt) == pytest.approx(1.0)
    assert abs(s.A) * s.f**2 == pytest.approx(1.0)
    assert s.peak_velocity > 0.2


def test_calculate_through_negative_direction():
    s = calculate_through(1.0, -1.0, 0.3, 2.0)
    assert s.velocity(0.0) == pytest.approx(-0.3)
    assert s.velocity(s.dt) == pytest.approx(-0.3)
    assert s.position(s.dt) == pytest.approx(-1.0)


def test_calculate_through_at_zero_speed_is_rest_to_rest():
    s = calculate_through(0.0, 1.0, 0.0, 1.0)
    ref = calculate(0.0, 1.0, 0.0, 1.0)
    assert s.A == pytest.approx(ref.A)
    assert s.dt == pytest.approx(ref.dt)
