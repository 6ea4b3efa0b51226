import matplotlib.pyplot as plt
import numpy as np


def _finish(out_dir, fname, show):
    plt.tight_layout()
    plt.savefig(out_dir / fname)
    if show:
        plt.show()
    plt.close()


def plot_velocity_and_position_vs_time(profiles, smoves, out_dir, frequency=None, show=True):
    fig, (ax_v, ax_x) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    for p, s in zip(profiles, smoves):
        t, v, x = s.sample_arrays(frequency)
        ax_v.plot(t, v, label=p.name, color=p.color, lw=2)
        ax_x.plot(t, x, label=p.name, color=p.color, lw=2)
        # Mark segment boundaries
        for seg in s.segments[:-1]:
            ax_v.axvline(seg.end_time, color=p.color, ls=':', lw=1, alpha=0.7)
        if p.max_velocity is not None:
            ax_v.axhline(p.max_velocity, color=p.color, ls='--', lw=1, alpha=0.5)
        if p.min_velocity is not None:
            ax_v.axhline(p.min_velocity, color=p.color, ls='--', lw=1, alpha=0.5)
    ax_v.set_ylabel("Velocity (m/s)")
    ax_v.set_title("Smooth Move Velocity and Position vs. Time")
    ax_v.legend()
    ax_v.grid(True)
    ax_x.set_xlabel("Time (s)")
    ax_x.set_ylabel("Position (m)")
    ax_x.grid(True)
    _finish(out_dir, "velocity_position_vs_time.png", show)


def plot_velocity_vs_position(profiles, smoves, out_dir, frequency=None, show=True):
    plt.figure(figsize=(10, 6))
    for p, s in zip(profiles, smoves):
        t, v, x = s.sample_arrays(frequency)
        plt.plot(x, v, label=p.name, color=p.color, lw=2)
        plt.scatter([s.x0, s.xf], [s.v0, s.vf], color='black', zorder=5)
    plt.xlabel("Position (m)")
    plt.ylabel("Velocity (m/s)")
    plt.title("Velocity vs. Position")
    plt.legend()
    _finish(out_dir, "velocity_vs_position.png", show)


def plot_segment_timeline(profiles, smoves, out_dir, show=True):
    """Plot timeline-style breakdown of the segments of each move."""
    kind_colors = {"sinusoidal": "#1976D2", "constant": "#388E3C"}

    fig, ax = plt.subplots(figsize=(10, 2 + len(profiles)))
    max_total = max(s.dt for s in smoves)

    for row, (p, s) in enumerate(zip(profiles, smoves)):
        for seg in s.breakdown():
            ax.barh(row, seg["dt"], left=seg["t0"], height=0.5,
                    color=kind_colors[seg["kind"]], edgecolor="black")
            ax.annotate(
                f"{seg['dt']:.2f}s",
                xy=(seg["t0"] + seg["dt"] / 2, row),
                xytext=(seg["t0"] + seg["dt"] / 2, row + 0.4),
                ha="center",
                va="bottom",
                fontsize=8,
            )
        ax.text(s.dt + max_total * 0.02, row, f"{s.dt:.2f}s", va="center", ha="left", fontweight="bold")

    handles = [plt.Rectangle((0, 0), 1, 1, color=c) for c in kind_colors.values()]
    ax.legend(handles, list(kind_colors), title="Segment", bbox_to_anchor=(1.01, 1), loc="upper left")
    ax.set_xlabel("Time (s)")
    ax.set_xlim(0, max_total * 1.2)
    ax.set_yticks(np.arange(len(profiles)))
    ax.set_yticklabels([p.name for p in profiles])
    ax.set_title("Segment Timeline")
    _finish(out_dir, "segment_timeline.png", show)


def plot_max_velocity_vs_total_time(velocities_list, times_list, labels, colors, out_dir, show=True):
    plt.figure(figsize=(10, 6))
    for v, t, label, color in zip(velocities_list, times_list, labels, colors):
        plt.plot(v, t, label=label, color=color, marker='o')
    plt.xlabel("Max Velocity (m/s)")
    plt.ylabel("Total Move Time (s)")
    plt.title("Max Velocity vs. Total Move Time")
    plt.legend()
    plt.grid(True, which='both')
    _finish(out_dir, "max_velocity_vs_time.png", show)


def plot_accel_vs_total_time(accels_list, times_list, labels, colors, out_dir, show=True):
    plt.figure(figsize=(10, 6))
    for a, t, label, color in zip(accels_list, times_list, labels, colors):
        plt.plot(a, t, label=label, color=color, marker='o')
    plt.xlabel("Max Acceleration (m/s²)")
    plt.ylabel("Total Move Time (s)")
    plt.title("Acceleration vs. Total Move Time")
    plt.legend()
    plt.grid(True, which='both')
    _finish(out_dir, "acceleration_vs_time.png", show)


def plot_velocity_accel_surface(V, A, Z, label, out_dir, fname, show=True):
    fig = plt.figure(figsize=(10, 8))
    ax = fig.add_subplot(111, projection='3d')
    surf = ax.plot_surface(V, A, Z, cmap='viridis', edgecolor='none', alpha=0.9)
    ax.set_xlabel('Max Velocity (m/s)')
    ax.set_ylabel('Max Acceleration (m/s²)')
    ax.set_zlabel('Total Time (s)')
    ax.set_title(f'Total Time vs Velocity and Acceleration ({label})')
    fig.colorbar(surf, shrink=0.5, aspect=5)
    _finish(out_dir, fname, show)
