"""Move definitions used by the CLI, sweeps and tests."""
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class MotionProfile:
    name: str
    xf: float  # m
    max_acceleration: float  # m/s^2
    x0: float = 0.0  # m
    v0: float = 0.0  # m/s
    min_velocity: Optional[float] = None  # m/s
    max_velocity: Optional[float] = None  # m/s
    x_min: Optional[float] = None  # m
    x_max: Optional[float] = None  # m
    color: str = "blue"

    @classmethod
    def from_dict(cls, d: dict):
        """Build from a config entry, accepting the short option names too."""
        aliases = {"a": "max_acceleration", "v_min": "min_velocity", "v_max": "max_velocity"}
        kwargs = {aliases.get(k, k): v for k, v in d.items()}
        kwargs.setdefault("name", "Move")
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return asdict(self)


# Example moves used in quick tests and the default config
simple_move = MotionProfile(
    name="Simple Move",
    xf=1.0,
    max_acceleration=1.0,
    color="blue",
)

velocity_limited_move = MotionProfile(
    name="Velocity Limited",
    xf=2.0,
    max_acceleration=1.2,
    min_velocity=0.2,
    max_velocity=1.0,
    color="orange",
)

tight_limits_move = MotionProfile(
    name="Tight Limits",
    xf=1.0,
    max_acceleration=1.0,
    min_velocity=0.2,
    max_velocity=0.68,
    color="green",
)
