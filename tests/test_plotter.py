import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1] / 'scripts'))

import matplotlib
matplotlib.use("Agg")

import numpy as np
from motion_profile import simple_move, tight_limits_move
from smove import Smove
from analysis import sweep_max_velocity
from plotter import (
    plot_velocity_and_position_vs_time,
    plot_velocity_vs_position,
    plot_segment_timeline,
    plot_max_velocity_vs_total_time,
)


def test_move_plots_are_written(tmp_path):
    profiles = [simple_move, tight_limits_move]
    smoves = [Smove.from_profile(p) for p in profiles]
    plot_velocity_and_position_vs_time(profiles, smoves, tmp_path, 50, show=False)
    plot_velocity_vs_position(profiles, smoves, tmp_path, 50, show=False)
    plot_segment_timeline(profiles, smoves, tmp_path, show=False)
    assert (tmp_path / "velocity_position_vs_time.png").exists()
    assert (tmp_path / "velocity_vs_position.png").exists()
    assert (tmp_path / "segment_timeline.png").exists()


def test_sweep_plot_is_written(tmp_path):
    v, t = sweep_max_velocity(simple_move, np.linspace(0.2, 1.0, 5))
    plot_max_velocity_vs_total_time([v], [t], ["Simple"], ["blue"], tmp_path, show=False)
    assert (tmp_path / "max_velocity_vs_time.png").exists()
