"""
Smooth Move Main Script
=======================

CLI-driven main script for generating and inspecting smooth sinusoidal moves.

Use-cases (selectable via CLI or run all):
    1. Single move debugging (segment breakdown, velocity/position plots)
    2. Parametric sweeps (max velocity, acceleration, 2D)
    3. Sample export (CSV of t, v, x per move)
    4. Batch table analysis (moves listed in data/moves.csv)

To add new use-cases, define a new function and add to the USE_CASES dict.
CLI Usage Examples:

# Run the default single_move case with config/default.json
python scripts/main.py

# Run parametric sweeps with a specific config file, without opening windows
python scripts/main.py --usecase parametric --config velocity_limits.json --no-show

# Run all use-cases
python scripts/main.py --usecase all

# Change logging verbosity
python scripts/main.py --loglevel DEBUG

NOTE:
- All config files should be placed in the config/ directory at the project base.
- Batch move tables should be in data/moves.csv.
- Plots and CSV exports are stored in the results/ directory.
"""

import argparse
import logging
import json
from pathlib import Path
import sys

import numpy as np

from motion_profile import MotionProfile
from smove import Smove
from solver import InfeasibleProfileError
from analysis import (
    sweep_max_velocity, sweep_accel, sweep_velocity_accel,
    samples_to_dataframe, analyze_moves_from_csv,
)
from plotter import (
    plot_velocity_and_position_vs_time,
    plot_velocity_vs_position,
    plot_segment_timeline,
    plot_max_velocity_vs_total_time,
    plot_accel_vs_total_time,
    plot_velocity_accel_surface,
)
# =============================
# DEFAULT RUN SETTINGS
# =============================
DEFAULT_SETTINGS = {
    "base_dir": Path(__file__).resolve().parents[1],
    "config": "default.json",
    "usecase": ["single_move"],
    "loglevel": "INFO",
}


# =======================
# 1. CONFIGURATION UTILS
# =======================

def load_config(config_path: Path) -> dict:
    """Load and validate a JSON configuration file."""
    try:
        with open(config_path, "r") as f:
            config = json.load(f)
    except FileNotFoundError:
        logging.error(f"Config file not found: {config_path}")
        sys.exit(1)
    except json.JSONDecodeError:
        logging.error(f"Config file is not valid JSON: {config_path}")
        sys.exit(1)
    if not config.get("moves"):
        logging.error(f"Config file defines no moves: {config_path}")
        sys.exit(1)
    return config

def setup_dirs(base_dir: Path) -> dict:
    """Create and return all working subdirectories."""
    dirs = {
        "config": base_dir / "config",
        "results": base_dir / "results",
        "parametric": base_dir / "results" / "parametric",
        "single_move": base_dir / "results" / "single_move",
        "samples": base_dir / "results" / "samples",
        "data": base_dir / "data",
    }
    for d in dirs.values():
        d.mkdir(parents=True, exist_ok=True)
    return dirs

def build_moves(config: dict):
    """Create profiles and moves from the config, exiting on bad input."""
    profiles = [MotionProfile.from_dict(m) for m in config["moves"]]
    smoves = []
    for p in profiles:
        try:
            smoves.append(Smove.from_profile(p))
        except InfeasibleProfileError as exc:
            logging.error(f"{p.name}: infeasible move ({exc})")
            sys.exit(1)
        except (TypeError, ValueError) as exc:
            logging.error(f"{p.name}: invalid move parameters ({exc})")
            sys.exit(1)
    return profiles, smoves

# ==========================
# 2. USE-CASE IMPLEMENTATION
# ==========================

def usecase_single_move_debug(config, dirs, params):
    """Print segment breakdown and plot each configured move."""
    logging.info("Running use-case: Single Move Debugging")
    profiles, smoves = build_moves(config)

    for p, s in zip(profiles, smoves):
        print(f"\n[{p.name} MOVE PARAMETERS]")
        print(f"  Start Position   : {p.x0:.4f} m")
        print(f"  End Position     : {p.xf:.4f} m")
        print(f"  Start Velocity   : {p.v0:.4f} m/s")
        print(f"  Max Acceleration : {p.max_acceleration:.4f} m/s²")
        print(f"  Min Velocity     : {p.min_velocity}")
        print(f"  Max Velocity     : {p.max_velocity}")

        print(f"\n[{p.name} Segment Breakdown]")
        for i, seg in enumerate(s.breakdown()):
            print(
                f"  {i}: {seg['kind']:10s} t0={seg['t0']:8.4f}  dt={seg['dt']:8.4f}  "
                f"x {seg['x0']:8.4f} -> {seg['xf']:8.4f}  "
                f"v {seg['v_start']:8.4f} -> {seg['v_end']:8.4f}"
            )
        print(f"  [Total Time]: {s.dt:.4f} sec  (fs = {s.fs:.4f} Hz)\n")

    frequency = params["sample_frequency"]
    show = params["show"]
    plot_velocity_and_position_vs_time(profiles, smoves, dirs["single_move"], frequency, show)
    plot_velocity_vs_position(profiles, smoves, dirs["single_move"], frequency, show)
    plot_segment_timeline(profiles, smoves, dirs["single_move"], show)

def usecase_parametric_sweep(config, dirs, params):
    """
    Run sweeps of total move time over max velocity, acceleration and both.
    """
    logging.info("Running use-case: Parametric Sweep Analysis")
    profiles, _ = build_moves(config)
    show = params["show"]

    vel_range = np.linspace(*config["v_max_sweep"])
    accel_range = np.linspace(*config["accel_sweep"])

    v_results = [sweep_max_velocity(p, vel_range) for p in profiles]
    plot_max_velocity_vs_total_time(
        [v for v, _ in v_results], [t for _, t in v_results],
        [p.name for p in profiles],
        [p.color for p in profiles],
        dirs["parametric"],
        show,
    )

    a_results = [sweep_accel(p, accel_range) for p in profiles]
    plot_accel_vs_total_time(
        [a for a, _ in a_results], [t for _, t in a_results],
        [p.name for p in profiles],
        [p.color for p in profiles],
        dirs["parametric"],
        show,
    )

    # 2D surface, first move only
    if "velocity_2d_sweep" in config and "acceleration_2d_sweep" in config:
        v_2d = np.linspace(*config["velocity_2d_sweep"])
        a_2d = np.linspace(*config["acceleration_2d_sweep"])
        V, A, Z = sweep_velocity_accel(profiles[0], v_2d, a_2d)
        plot_velocity_accel_surface(
            V, A, Z, profiles[0].name, dirs["parametric"], "velocity_accel_surface.png", show
        )

def usecase_export_samples(config, dirs, params):
    """Write sampled t, v, x of every move to CSV."""
    logging.info("Running use-case: Sample Export")
    profiles, smoves = build_moves(config)
    for p, s in zip(profiles, smoves):
        df = samples_to_dataframe(s, params["sample_frequency"])
        out_path = dirs["samples"] / f"{p.name.lower().replace(' ', '_')}.csv"
        df.to_csv(out_path, index=False)
        logging.info(f"{p.name}: {len(df)} samples written to {out_path}")

def usecase_batch_table(config, dirs, params):
    """
    Analyze the move table in data/moves.csv.
    """
    logging.info("Running use-case: Batch Move Table Analysis")
    csv_path = dirs["data"] / "moves.csv"
    if not csv_path.exists():
        logging.error(f"Move table not found: {csv_path}")
        sys.exit(1)
    summary = analyze_moves_from_csv(csv_path)
    print(summary.to_string(index=False))
    summary.to_csv(dirs["results"] / "move_table_summary.csv", index=False)

# Register use-cases
USE_CASES = {
    "single_move": usecase_single_move_debug,
    "parametric": usecase_parametric_sweep,
    "export": usecase_export_samples,
    "batch_table": usecase_batch_table,
}

# ================
# 3. MAIN ENTRYPOINT
# ================

def main():
    parser = argparse.ArgumentParser(
        description="Smooth move generator: multi-use-case main script"
    )
    parser.add_argument(
        "--base-dir",
        type=str,
        default=str(DEFAULT_SETTINGS['base_dir']),
        help="Project base directory holding config/, data/ and results/"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=DEFAULT_SETTINGS["config"],
        help="Name of config file to load from the config/ directory"
    )
    parser.add_argument(
        "--usecase",
        type=str,
        nargs="*",
        choices=list(USE_CASES.keys()) + ["all"],
        default=DEFAULT_SETTINGS["usecase"],
        help="Which use-case(s) to run (default: single_move)"
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Save plots without opening plot windows"
    )
    parser.add_argument(
        "--loglevel",
        type=str,
        default=DEFAULT_SETTINGS["loglevel"],
        help="Set logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.loglevel.upper()), format="%(levelname)s: %(message)s")
    base_dir = Path(args.base_dir)
    dirs = setup_dirs(base_dir)
    config_path = dirs["config"] / args.config
    config = load_config(config_path)

    params = dict(
        sample_frequency=config.get("sample_frequency"),
        show=not args.no_show,
    )

    if "all" in args.usecase:
        run_cases = USE_CASES.values()
    else:
        run_cases = [USE_CASES[uc] for uc in args.usecase]
    for fn in run_cases:
        fn(config, dirs, params)

if __name__ == "__main__":
    main()
