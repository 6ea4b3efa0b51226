import logging
from dataclasses import replace

import numpy as np
import pandas as pd
from motion_profile import MotionProfile
from smove import Smove
from solver import InfeasibleProfileError

logger = logging.getLogger(__name__)


def _duration(profile: MotionProfile) -> float:
    try:
        return Smove.from_profile(profile).dt
    except InfeasibleProfileError as exc:
        logger.warning(f"{profile.name}: {exc}")
        return np.nan


def sweep_max_velocity(profile, velocity_range):
    """
    Sweep max_velocity, return velocity_list and total_time_list for this move.
    """
    results = []
    for vmax in velocity_range:
        vmin = profile.min_velocity
        if vmin is not None and vmin > vmax:
            vmin = vmax
        p = replace(profile, max_velocity=float(vmax), min_velocity=vmin)
        results.append((vmax, _duration(p)))
    velocities, total_times = zip(*results)
    return np.array(velocities), np.array(total_times)


def sweep_accel(profile, accel_range):
    """
    Sweep max_acceleration, return accel_list and total_time_list for this move.
    """
    results = []
    for accel in accel_range:
        p = replace(profile, max_acceleration=float(accel))
        results.append((accel, _duration(p)))
    accels, total_times = zip(*results)
    return np.array(accels), np.array(total_times)


def sweep_velocity_accel(profile, velocity_range, accel_range):
    """
    2D sweep: For each (v, a) pair, compute total move time. Returns meshgrid and Z.
    """
    Z = np.zeros((len(accel_range), len(velocity_range)))
    for i, accel in enumerate(accel_range):
        for j, vmax in enumerate(velocity_range):
            vmin = profile.min_velocity
            if vmin is not None and vmin > vmax:
                vmin = vmax
            p = replace(
                profile,
                max_acceleration=float(accel),
                max_velocity=float(vmax),
                min_velocity=vmin,
            )
            Z[i, j] = _duration(p)
    V, A = np.meshgrid(velocity_range, accel_range)
    return V, A, Z


def samples_to_dataframe(smove: Smove, frequency=None) -> pd.DataFrame:
    """Sampled t, v, x of a move as a DataFrame."""
    return pd.DataFrame(smove.sample(frequency), columns=["t", "v", "x"])


def analyze_moves_from_csv(csv_path):
    """
    Reads CSV with columns:
        name, xf, a, and optionally x0, v0, v_min, v_max
    Builds each move and returns a DataFrame with its duration, end
    velocity and segment count. Infeasible moves get NaN entries.
    """
    try:
        df = pd.read_csv(csv_path, encoding="utf-8-sig")
    except UnicodeDecodeError:
        df = pd.read_csv(csv_path, encoding="cp1252")

    def optional(row, key):
        value = row.get(key)
        return None if value is None or pd.isna(value) else float(value)

    rows = []
    for _, row in df.iterrows():
        profile = MotionProfile(
            name=str(row.get("name", "Move")),
            xf=float(row["xf"]),
            max_acceleration=float(row["a"]),
            x0=optional(row, "x0") or 0.0,
            v0=optional(row, "v0") or 0.0,
            min_velocity=optional(row, "v_min"),
            max_velocity=optional(row, "v_max"),
        )
        try:
            smove = Smove.from_profile(profile)
            duration, vf, n = smove.dt, smove.vf, len(smove.segments)
        except InfeasibleProfileError as exc:
            logger.warning(f"{profile.name}: {exc}")
            duration, vf, n = np.nan, np.nan, 0
        rows.append({
            "name": profile.name,
            "duration": duration,
            "end_velocity": vf,
            "segments": n,
        })
    return pd.DataFrame(rows)
