"""Smooth sinusoidal moves between two points."""
import logging
from typing import List, NamedTuple, Optional

import numpy as np

from segments import SinusoidalSegment, end_velocity
from solver import calculate
from limits import limit_position, limit_min_velocity, limit_max_velocity

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    t: float  # s
    v: float  # velocity
    x: float  # position


class Smove:
    """
    Velocity and acceleration bounded move from x0 to xf.

    The segment sequence is built once in the constructor (base segment,
    then position limits, then the v_min floor, then the v_max ceiling)
    and is read-only afterwards.

    Args:
        xf: end position.
        a: acceleration bound (magnitude).
        x0: start position.
        v0: start velocity.
        v_min: optional velocity floor, v_min >= 0.
        v_max: optional velocity ceiling, v_max > 0.
        x_min, x_max: optional position limits.
    """

    def __init__(
        self,
        xf: float,
        a: float,
        x0: float = 0.0,
        v0: float = 0.0,
        v_min: Optional[float] = None,
        v_max: Optional[float] = None,
        x_min: Optional[float] = None,
        x_max: Optional[float] = None,
    ):
        if xf is None:
            raise ValueError("end position xf is required")
        if a is None:
            raise ValueError("acceleration a is required")
        if not a > 0:
            raise ValueError(f"acceleration must be positive, got {a}")
        if v_min is not None and v_min < 0:
            raise ValueError(f"v_min must be >= 0, got {v_min}")
        if v_max is not None and v_max <= 0:
            raise ValueError(f"v_max must be > 0, got {v_max}")
        if v_min is not None and v_max is not None and v_min > v_max:
            raise ValueError(f"v_min ({v_min}) must not exceed v_max ({v_max})")
        if x_min is not None and x_max is not None and x_min > x_max:
            raise ValueError(f"x_min ({x_min}) must not exceed x_max ({x_max})")
        for name, x in (("x0", x0), ("xf", xf)):
            if (x_min is not None and x < x_min) or (x_max is not None and x > x_max):
                raise ValueError(f"{name}={x} lies outside the position limits")

        self._x0 = x0
        self._xf = xf
        self._v0 = v0
        self.a = a
        self.v_min = v_min
        self.v_max = v_max
        self.x_min = x_min
        self.x_max = x_max

        s = [calculate(x0, xf, v0, a)]

        if x_min is not None or x_max is not None:
            s = limit_position(s, x_min, x_max)

        if v_min is not None:
            s = limit_min_velocity(s, v_min)

        if v_max is not None:
            s = limit_max_velocity(s, v_max)

        self._segments = tuple(s)
        logger.debug("smove %g -> %g: %d segment(s), %.4f s",
                     x0, xf, len(self._segments), self.dt)

    @classmethod
    def from_profile(cls, profile):
        """Build a move from a MotionProfile."""
        return cls(
            xf=profile.xf,
            a=profile.max_acceleration,
            x0=profile.x0,
            v0=profile.v0,
            v_min=profile.min_velocity,
            v_max=profile.max_velocity,
            x_min=profile.x_min,
            x_max=profile.x_max,
        )

    @property
    def segments(self):
        return self._segments

    @property
    def x0(self) -> float:
        return self._x0

    @property
    def xf(self) -> float:
        return self._xf

    @property
    def v0(self) -> float:
        return self._v0

    @property
    def vf(self) -> float:
        """Velocity at the end of the move."""
        return end_velocity(self._segments[-1])

    @property
    def dt(self) -> float:
        """Total duration (s)."""
        return self._segments[-1].end_time

    @property
    def fs(self) -> float:
        """Default sampling frequency, twice the highest segment frequency."""
        freqs = [s.f for s in self._segments if isinstance(s, SinusoidalSegment)]
        return 2 * max(freqs) if freqs else 0.0

    def _segment_at(self, t: float):
        if t < 0:
            raise ValueError(f"time must be >= 0, got {t}")
        for s in self._segments:
            if s.end_time >= t:
                return s
        return None

    def get_velocity(self, t: float) -> float:
        """Velocity at time t from the start of the move."""
        s = self._segment_at(t)
        if s is None:
            return 0.0
        return s.velocity(t - s.t0)

    def get_position(self, t: float) -> float:
        """Position at time t from the start of the move."""
        s = self._segment_at(t)
        if s is None:
            return self._xf
        return s.position(t - s.t0)

    def _sample_times(self, frequency: Optional[float]) -> np.ndarray:
        if frequency is None:
            frequency = self.fs
        if not frequency > 0:
            raise ValueError(f"sampling frequency must be positive, got {frequency}")
        n = int(np.floor(self.dt * frequency + 1e-9)) + 1
        return np.minimum(np.arange(n) / frequency, self.dt)

    def sample(self, frequency: Optional[float] = None) -> List[Sample]:
        """
        Sample the move at t = 0, 1/frequency, 2/frequency, ... while t <= dt.

        Defaults to fs. Each call evaluates afresh and returns a new list.
        """
        return [
            Sample(float(t), self.get_velocity(t), self.get_position(t))
            for t in self._sample_times(frequency)
        ]

    def sample_arrays(self, frequency: Optional[float] = None):
        """Returns: time, velocity, position arrays."""
        data = self.sample(frequency)
        if not data:
            return np.array([]), np.array([]), np.array([])
        t, v, x = (np.array(col) for col in zip(*data))
        return t, v, x

    def breakdown(self):
        """Per-segment timing and boundary values."""
        return [
            {
                "kind": s.kind,
                "t0": s.t0,
                "dt": s.dt,
                "x0": s.x0,
                "xf": s.xf,
                "v_start": s.velocity(0.0),
                "v_end": s.velocity(s.dt),
            }
            for s in self._segments
        ]

    def __repr__(self):
        return (
            f"Smove(x0={self._x0}, xf={self._xf}, v0={self._v0}, a={self.a}, "
            f"v_min={self.v_min}, v_max={self.v_max}, dt={self.dt:.4f})"
        )
