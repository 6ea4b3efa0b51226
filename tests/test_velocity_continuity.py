import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1] / 'scripts'))

import numpy as np
import pytest
from motion_profile import MotionProfile, tight_limits_move, velocity_limited_move
from smove import Smove


@pytest.mark.parametrize("profile", [
    tight_limits_move,
    velocity_limited_move,
    MotionProfile(name="Rolling Start", xf=3.0, max_acceleration=1.0, v0=0.5, max_velocity=1.0),
    MotionProfile(name="Reverse", x0=1.0, xf=-2.0, max_acceleration=2.0, min_velocity=0.1, max_velocity=0.9),
])
def test_velocity_and_position_continuity_at_boundaries(profile):
    s = Smove.from_profile(profile)
    for seg, nxt in zip(s.segments, s.segments[1:]):
        assert nxt.t0 == pytest.approx(seg.t0 + seg.dt)
        assert abs(nxt.velocity(0.0) - seg.velocity(seg.dt)) < 1e-6
        assert abs(nxt.position(0.0) - seg.position(seg.dt)) < 1e-6


def test_sampled_velocity_has_no_jumps():
    s = Smove.from_profile(tight_limits_move)
    frequency = 1000
    _, v, _ = s.sample_arrays(frequency)
    # |dv| per step is bounded by a / frequency
    assert np.max(np.abs(np.diff(v))) <= tight_limits_move.max_acceleration / frequency + 1e-9
