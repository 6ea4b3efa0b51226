import sys
from math import pi, sqrt
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1] / 'scripts'))

import numpy as np
import pandas as pd
import pytest
from motion_profile import MotionProfile, simple_move, velocity_limited_move
from smove import Smove
from analysis import (
    sweep_max_velocity, sweep_accel, sweep_velocity_accel,
    samples_to_dataframe, analyze_moves_from_csv,
)


def test_sweep_max_velocity_durations_fall_with_v_max():
    v, t = sweep_max_velocity(simple_move, [0.3, 0.5, 0.7, 1.0])
    assert list(v) == [0.3, 0.5, 0.7, 1.0]
    assert np.all(np.diff(t) < 0)
    # Above the unclamped peak the move is the plain sinusoid
    assert t[-1] == pytest.approx(pi / sqrt(2))


def test_sweep_max_velocity_keeps_v_min_below_v_max():
    v, t = sweep_max_velocity(velocity_limited_move, [0.1, 0.5, 1.0])
    assert not np.any(np.isnan(t))


def test_sweep_accel_durations_fall_with_accel():
    a, t = sweep_accel(simple_move, [0.5, 1.0, 2.0, 4.0])
    assert np.all(np.diff(t) < 0)
    assert t[1] == pytest.approx(pi / sqrt(2))


def test_sweep_marks_infeasible_points_nan():
    rolling = MotionProfile(name="Rolling", xf=0.1, max_acceleration=1.0, v0=2.0)
    _, t = sweep_accel(rolling, [1.0, 100.0])
    assert np.isnan(t[0])
    assert not np.isnan(t[1])


def test_sweep_velocity_accel_grid():
    V, A, Z = sweep_velocity_accel(simple_move, [0.4, 0.8], [1.0, 2.0, 3.0])
    assert V.shape == A.shape == Z.shape == (3, 2)
    assert Z[0, 0] > Z[-1, -1]


def test_samples_to_dataframe():
    s = Smove.from_profile(simple_move)
    df = samples_to_dataframe(s, 10)
    assert list(df.columns) == ["t", "v", "x"]
    assert len(df) == len(s.sample(10))
    assert df["x"].iloc[0] == pytest.approx(0.0, abs=1e-12)


def test_analyze_moves_from_csv(tmp_path):
    csv_path = tmp_path / "moves.csv"
    csv_path.write_text(
        "name,xf,a,x0,v0,v_min,v_max\n"
        "Simple,1.0,1.0,0.0,0.0,,\n"
        "Limited,2.0,1.2,0.0,0.0,0.2,1.0\n"
        "Too Fast,0.1,1.0,0.0,2.0,,\n"
    )
    df = analyze_moves_from_csv(csv_path)
    assert list(df["name"]) == ["Simple", "Limited", "Too Fast"]
    assert df.loc[0, "duration"] == pytest.approx(pi / sqrt(2))
    assert df.loc[0, "segments"] == 1
    assert df.loc[1, "end_velocity"] == pytest.approx(0.2)
    assert df.loc[1, "segments"] == 5
    assert pd.isna(df.loc[2, "duration"])
