"""Position and velocity clamping for segment sequences."""
import logging
from math import pi, asin, cos

from segments import SinusoidalSegment, ConstantVelocitySegment
from solver import InfeasibleProfileError, calculate, calculate_through

logger = logging.getLogger(__name__)


def _direction(segment) -> float:
    return 1.0 if segment.xf - segment.x0 >= 0 else -1.0


def retime(segments, t_start: float = 0.0):
    """Return segments laid end to end in time, starting at t_start."""
    result = []
    t = t_start
    for s in segments:
        s = s.replace(t0=t)
        result.append(s)
        t = s.end_time
    return result


def _limit_sequence(segments, limit_one, *bounds):
    sequence = []
    for s in segments:
        sequence.extend(limit_one(s, *bounds))
    return retime(sequence)


# ==============
# POSITION LIMITS
# ==============

def limit_segment_position(segment, x_min=None, x_max=None):
    """
    Keep a segment that backs up before advancing inside [x_min, x_max].

    Returns the segment unchanged, or a stop at the violated limit followed
    by a rest-to-rest move to the original end point.
    """
    if not isinstance(segment, SinusoidalSegment) or segment.phi >= 0:
        return [segment]

    # Turning point, reached when the phase angle crosses zero
    x_turn = segment.A - segment.m + segment.x0

    if x_max is not None and x_turn > x_max:
        limit = x_max
    elif x_min is not None and x_turn < x_min:
        limit = x_min
    else:
        return [segment]

    logger.debug("turning point %g beyond limit %g, stopping at limit", x_turn, limit)
    s1 = calculate(segment.x0, limit, segment.v0, segment.a).replace(t0=segment.t0)
    s2 = calculate(limit, segment.xf, 0.0, segment.a).replace(t0=s1.end_time)
    return [s1, s2]


def limit_position(segments, x_min=None, x_max=None):
    return _limit_sequence(segments, limit_segment_position, x_min, x_max)


# ===================
# MAXIMUM VELOCITY
# ===================

def limit_segment_max_velocity(segment, v_max: float):
    """
    Split a segment into ramp, plateau and ramp so |v| never exceeds v_max.

    Constant velocity segments and segments already within the bound are
    returned unchanged.
    """
    if not isinstance(segment, SinusoidalSegment):
        return [segment]

    if segment.max_speed <= v_max:
        return [segment]

    A, f, phi = segment.A, segment.f, segment.phi
    v_peak = segment.peak_velocity
    theta = asin(v_max / v_peak)

    # Phase outside [-theta, theta] means |v0| is already above the bound
    if abs(phi) > theta:
        raise InfeasibleProfileError(
            f"start velocity {segment.v0} already exceeds v_max={v_max}"
        )
    direction = _direction(segment)

    # ------ Accelerating ramp: stop where v reaches v_max ------
    t1 = (theta - phi) / f
    s1 = segment.replace(xf=segment.position(t1), dt=t1)

    # ------ Decelerating ramp: mirror phase through to original end ------
    phi2 = pi - theta
    m2 = A * cos(phi2)
    t2 = (segment.end_phase - phi2) / f
    dx_decel = A * cos(segment.end_phase) - m2

    # ------ Plateau absorbs what the ramps leave ------
    dx_plateau = (segment.xf - segment.x0) - (s1.xf - s1.x0) - dx_decel
    if dx_plateau * direction < 0:
        dx_plateau = 0.0
    v_plateau = direction * v_max
    plateau = ConstantVelocitySegment(
        x0=s1.xf,
        xf=s1.xf + dx_plateau,
        v0=v_plateau,
        t0=s1.end_time,
        dt=abs(dx_plateau) / v_max,
    )

    s2 = segment.replace(
        x0=plateau.xf,
        xf=segment.xf,
        v0=v_plateau,
        phi=phi2,
        m=m2,
        t0=plateau.end_time,
        dt=t2,
    )
    logger.debug(
        "v_peak %g > v_max %g: ramp %gs, plateau %gs, ramp %gs",
        v_peak, v_max, s1.dt, plateau.dt, s2.dt,
    )
    return [s1, plateau, s2]


def limit_max_velocity(segments, v_max: float):
    return _limit_sequence(segments, limit_segment_max_velocity, v_max)


# ===================
# MINIMUM VELOCITY
# ===================

def limit_segment_min_velocity(segment, v_min: float):
    """
    Replace the slow lead-in and tail of a segment with travel at v_min.

    A segment that never reaches v_min becomes one constant velocity
    segment at v_min. Otherwise the result is delay, sinusoidal middle
    entering and leaving at v_min, and a matching delay; the move ends at
    v_min rather than at rest.
    """
    if not isinstance(segment, SinusoidalSegment) or v_min <= 0:
        return [segment]

    x0, xf = segment.x0, segment.xf
    direction = _direction(segment)
    v_floor = direction * v_min

    if segment.max_speed <= v_min:
        logger.debug("max speed %g <= v_min %g, using constant velocity",
                     segment.max_speed, v_min)
        return [ConstantVelocitySegment(
            x0=x0, xf=xf, v0=v_floor, t0=segment.t0, dt=abs(xf - x0) / v_min
        )]

    # First time the velocity rises through v_min
    v_peak = segment.peak_velocity
    t_min = (asin(v_min / v_peak) - segment.phi) / segment.f
    if t_min <= 0 or t_min > segment.dt:
        return [segment]

    dx = segment.position(t_min) - x0
    if dx * direction <= 0:
        # Backing up until t_min; size the delays from the tail instead
        t_tail = (pi - asin(v_min / v_peak) - segment.phi) / segment.f
        dx = xf - segment.position(t_tail)

    dx_middle = (xf - x0) - 2 * dx
    if dx_middle * direction <= 0:
        return [ConstantVelocitySegment(
            x0=x0, xf=xf, v0=v_floor, t0=segment.t0, dt=abs(xf - x0) / v_min
        )]

    delay1 = ConstantVelocitySegment(
        x0=x0, xf=x0 + dx, v0=v_floor, t0=segment.t0, dt=abs(dx) / v_min
    )
    middle = calculate_through(delay1.xf, xf - dx, v_min, segment.a)
    middle = middle.replace(t0=delay1.end_time)
    delay2 = ConstantVelocitySegment(
        x0=middle.xf, xf=xf, v0=v_floor, t0=middle.end_time, dt=abs(dx) / v_min
    )
    logger.debug(
        "v_min %g: delay %gs, middle %gs, delay %gs",
        v_min, delay1.dt, middle.dt, delay2.dt,
    )
    return [delay1, middle, delay2]


def limit_min_velocity(segments, v_min: float):
    return _limit_sequence(segments, limit_segment_min_velocity, v_min)
