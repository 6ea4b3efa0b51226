"""Segment types that make up a smooth move."""
from dataclasses import dataclass, replace
from math import pi, cos, sin


@dataclass(frozen=True)
class SinusoidalSegment:
    """
    Sinusoidal move-and-settle phase.

    Velocity at local time tau is -A*f*sin(f*tau + phi) and position is
    A*cos(f*tau + phi) - m + x0, with m = A*cos(phi).
    """
    x0: float
    xf: float
    v0: float
    a: float
    A: float
    f: float
    phi: float
    m: float
    t0: float = 0.0
    dt: float = 0.0

    kind = "sinusoidal"

    @property
    def end_time(self) -> float:
        return self.t0 + self.dt

    @property
    def end_phase(self) -> float:
        """Phase angle reached at the end of the segment."""
        return self.f * self.dt + self.phi

    @property
    def peak_velocity(self) -> float:
        """Amplitude of the velocity sinusoid."""
        return abs(self.A * self.f)

    @property
    def max_speed(self) -> float:
        """Largest forward speed actually reached within the segment."""
        if self.phi <= pi / 2 <= self.end_phase:
            return self.peak_velocity
        return max(abs(self.velocity(0.0)), abs(self.velocity(self.dt)))

    def velocity(self, tau: float) -> float:
        return -self.A * self.f * sin(self.f * tau + self.phi)

    def position(self, tau: float) -> float:
        return self.A * cos(self.f * tau + self.phi) - self.m + self.x0

    def replace(self, **changes):
        return replace(self, **changes)


@dataclass(frozen=True)
class ConstantVelocitySegment:
    """Delay or plateau phase travelling at a fixed velocity."""
    x0: float
    xf: float
    v0: float
    t0: float = 0.0
    dt: float = 0.0

    kind = "constant"

    @property
    def end_time(self) -> float:
        return self.t0 + self.dt

    @property
    def peak_velocity(self) -> float:
        return abs(self.v0)

    def velocity(self, tau: float) -> float:
        return self.v0

    def position(self, tau: float) -> float:
        return self.v0 * tau + self.x0

    def replace(self, **changes):
        return replace(self, **changes)


def end_velocity(segment) -> float:
    """Velocity at the very end of a segment."""
    return segment.velocity(segment.dt)
