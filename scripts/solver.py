"""Closed-form solutions for single sinusoidal move segments."""
import logging
from math import pi, sqrt, asin, cos, isnan

from segments import SinusoidalSegment, ConstantVelocitySegment

logger = logging.getLogger(__name__)


class InfeasibleProfileError(ValueError):
    """No real-valued profile exists for the requested move."""


def _check_acceleration(a: float):
    if a is None or not a > 0:
        raise ValueError(f"acceleration must be positive, got {a!r}")


def calculate(x0: float, xf: float, v0: float, a: float):
    """
    Calculate a sinusoidal movement from x0 (moving at v0) to rest at xf.

    A zero-length request with v0 == 0 yields a zero-duration constant
    velocity segment. Raises InfeasibleProfileError when v0 is too large
    for the acceleration bound and distance.
    """
    _check_acceleration(a)

    # Delta X
    dx = xf - x0
    if dx == 0:
        if v0 != 0:
            raise InfeasibleProfileError(
                f"cannot come to rest at x={x0} while starting at v0={v0}"
            )
        return ConstantVelocitySegment(x0=x0, xf=xf, v0=0.0)

    try:
        # Amplitude
        A = -a * dx**2 / (a * 2 * abs(dx) - v0**2)
        if dx < 0:
            A *= -1

        f = sqrt(abs(a / A))        # Frequency
        phi = asin(-v0 / (A * f))   # Phase angle
    except (ZeroDivisionError, ValueError) as exc:
        raise InfeasibleProfileError("failed to calculate end-point") from exc

    # Too short to shed v0 on the principal branch; the phase lies past +-pi/2
    if a * abs(dx) < v0**2:
        phi = (pi - phi) if phi >= 0 else (-pi - phi)

    m = A * cos(phi)                # Offset
    dt = (pi - phi) / f             # Duration

    # End point must land on the requested target
    x_end = A * cos((f * dt) + phi) - m + x0
    tolerance = 1e-9 * max(1.0, abs(A), abs(dx))
    if isnan(x_end) or abs(x_end - xf) > tolerance:
        raise InfeasibleProfileError("failed to calculate end-point")

    logger.debug(
        "calculate x0=%g xf=%g v0=%g a=%g -> A=%g f=%g phi=%g dt=%g",
        x0, xf, v0, a, A, f, phi, dt,
    )
    return SinusoidalSegment(
        x0=x0, xf=xf, v0=v0, a=a, A=A, f=f, phi=phi, m=m, t0=0.0, dt=dt
    )


def calculate_through(x0: float, xf: float, v: float, a: float):
    """
    Calculate a sinusoidal segment that enters and leaves at speed v.

    The segment travels from x0 to xf, speeding up from v to its peak and
    back down to v, so it can sit between two constant velocity phases.
    """
    _check_acceleration(a)
    if v < 0:
        raise ValueError(f"speed must be non-negative, got {v!r}")

    dx = xf - x0
    if dx == 0:
        return ConstantVelocitySegment(x0=x0, xf=xf, v0=0.0)

    # |A| solves B^2 - (v^2/a)*B - dx^2/4 = 0
    k = v**2 / a
    B = (k + sqrt(k**2 + dx**2)) / 2
    A = -B if dx > 0 else B

    f = sqrt(a / B)
    phi = asin(min(1.0, v / (B * f)))
    m = A * cos(phi)
    dt = (pi - 2 * phi) / f
    v0 = v if dx > 0 else -v

    logger.debug(
        "calculate_through x0=%g xf=%g v=%g a=%g -> A=%g f=%g phi=%g dt=%g",
        x0, xf, v, a, A, f, phi, dt,
    )
    return SinusoidalSegment(
        x0=x0, xf=xf, v0=v0, a=a, A=A, f=f, phi=phi, m=m, t0=0.0, dt=dt
    )
