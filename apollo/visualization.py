"""
Visualization Engine
====================
Plots for trajectory and search analysis:
  1. Trajectory (side view and top view of a recorded path)
  2. Wind effect comparison
  3. Euler step-size convergence
  4. Optimizer search history
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Sequence, Tuple
import os

from .optimizer import OptimizerStep
from .simulator import SimulationResult
from .vector import Vector3


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
}


def _apply_dark_style(fig, axes):
    """Apply consistent dark theme to figure and axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    axes = np.atleast_1d(axes).flatten()

    for ax in axes:
        ax.set_facecolor(STYLE['bg_color'])
        ax.tick_params(colors=STYLE['text_color'])
        ax.xaxis.label.set_color(STYLE['text_color'])
        ax.yaxis.label.set_color(STYLE['text_color'])
        ax.title.set_color(STYLE['text_color'])
        ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
        for spine in ax.spines.values():
            spine.set_color(STYLE['grid_color'])


def _legend(ax, **kwargs):
    ax.legend(facecolor='#1a1a1a', edgecolor='#444',
              labelcolor=STYLE['text_color'], **kwargs)


def _finish(fig, save_path):
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])
    return fig


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


# ══════════════════════════════════════════════════════════════════════════
#  1. Single Trajectory Plot
# ══════════════════════════════════════════════════════════════════════════

def plot_trajectory(result: SimulationResult, title: str = 'Projectile Trajectory',
                    target: Optional[Vector3] = None,
                    save_path: str = None) -> plt.Figure:
    """Side view (altitude vs downrange) and top view of a recorded path."""
    fig, (ax_side, ax_top) = plt.subplots(1, 2, figsize=(16, 6))
    _apply_dark_style(fig, [ax_side, ax_top])

    downrange = np.hypot(result.x, result.z)
    ax_side.plot(downrange, result.y, color=STYLE['accent_colors'][0], linewidth=2.5)
    idx_max = int(np.argmax(result.y))
    ax_side.plot(downrange[idx_max], result.y[idx_max], '^', color='#ffeb3b',
                 markersize=10, label='Apex', zorder=5)
    ax_side.plot(downrange[-1], result.y[-1], 'x', color='#ff5252',
                 markersize=12, markeredgewidth=3, label='Impact', zorder=5)
    ax_side.set_xlabel('Downrange (m)')
    ax_side.set_ylabel('Altitude (m)')
    ax_side.set_title('Side View', fontweight='bold')
    ax_side.set_ylim(bottom=0)
    _legend(ax_side, loc='upper right')

    ax_top.plot(result.z, result.x, color=STYLE['accent_colors'][4], linewidth=2)
    ax_top.plot(result.z[-1], result.x[-1], 'x', color='#ff5252',
                markersize=12, markeredgewidth=3, label='Impact')
    if target is not None:
        ax_top.plot(target.z, target.x, 'o', color='#00e676', markersize=10,
                    label='Target')
    ax_top.set_xlabel('Forward z (m)')
    ax_top.set_ylabel('Lateral x (m)')
    ax_top.set_title('Top View', fontweight='bold')
    _legend(ax_top)

    fig.suptitle(f'{title} (dt={result.dt}s, {result.iterations} steps)',
                 fontsize=14, fontweight='bold', color=STYLE['text_color'], y=1.02)
    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  2. Wind Effects
# ══════════════════════════════════════════════════════════════════════════

def plot_wind_effects(results: Dict[str, SimulationResult],
                      save_path: str = None) -> plt.Figure:
    """Side-view trajectories for several wind cases."""
    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    for (label, res), color in zip(results.items(), STYLE['accent_colors']):
        ax.plot(res.z, res.y, color=color, linewidth=2,
                label=f'{label} ({res.range_total:.1f} m)')

    ax.set_xlabel('Forward z (m)')
    ax.set_ylabel('Altitude (m)')
    ax.set_title('Effect of Wind on Trajectory', fontweight='bold')
    ax.set_ylim(bottom=0)
    _legend(ax)
    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  3. Step-size Convergence
# ══════════════════════════════════════════════════════════════════════════

def plot_dt_convergence(errors: Sequence[Tuple[float, float]],
                        save_path: str = None) -> plt.Figure:
    """Log-log error vs dt, with a first-order reference slope."""
    dts = np.array([e[0] for e in errors])
    errs = np.array([e[1] for e in errors])

    fig, ax = plt.subplots(figsize=(9, 6))
    _apply_dark_style(fig, ax)

    ax.loglog(dts, errs, 'o-', color=STYLE['accent_colors'][0], linewidth=2,
              markersize=8, label='Euler position error')
    ax.loglog(dts, errs[0] * dts / dts[0], '--', color='#888',
              label='O(dt) reference')
    ax.set_xlabel('Timestep dt (s)')
    ax.set_ylabel('Position error (m)')
    ax.set_title('Euler Convergence vs Closed Form', fontweight='bold')
    _legend(ax)
    return _finish(fig, save_path)


# ══════════════════════════════════════════════════════════════════════════
#  4. Optimizer Search History
# ══════════════════════════════════════════════════════════════════════════

def plot_optimizer_search(history: List[OptimizerStep], threshold: float = None,
                          save_path: str = None) -> plt.Figure:
    """Best error, pitch and yaw per search iteration."""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    _apply_dark_style(fig, axes)

    iters = [s.iteration for s in history]

    ax = axes[0]
    ax.semilogy(iters, [s.error for s in history], 'o-',
                color=STYLE['accent_colors'][1], linewidth=2)
    if threshold is not None:
        ax.axhline(y=threshold, color='#ff5252', linestyle='--', alpha=0.6,
                   label='Threshold')
        _legend(ax)
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Landing error (m)')
    ax.set_title('Error', fontweight='bold')

    ax = axes[1]
    ax.plot(iters, [np.degrees(s.pitch) for s in history], 'o-',
            color=STYLE['accent_colors'][0], linewidth=2)
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Pitch (°)')
    ax.set_title('Pitch', fontweight='bold')

    ax = axes[2]
    ax.plot(iters, [np.degrees(s.yaw) for s in history], 'o-',
            color=STYLE['accent_colors'][2], linewidth=2)
    ax.set_xlabel('Iteration')
    ax.set_ylabel('Yaw (°)')
    ax.set_title('Yaw', fontweight='bold')

    fig.suptitle('Launch Angle Search', fontsize=14, fontweight='bold',
                 color=STYLE['text_color'], y=1.02)
    return _finish(fig, save_path)
