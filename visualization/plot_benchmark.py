"""
Benchmark Figure

This figure contains:
(a) Relative error vs scipy over N, per precision
(b) Forward transform time over N, per precision, with scipy for reference
"""

import argparse
import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).parent))

# Handle both module and direct execution imports
try:
    from .config import setup_style, save_figure, get_dtype_color, get_dtype_name, DTYPE_COLORS
    from .data_loader import load_benchmark_results, group_by_dtype
except ImportError:
    from config import setup_style, save_figure, get_dtype_color, get_dtype_name, DTYPE_COLORS
    from data_loader import load_benchmark_results, group_by_dtype


def create_figure(results_dir=None):
    """Create the benchmark figure."""

    setup_style()

    try:
        rows = load_benchmark_results(results_dir)
    except FileNotFoundError as e:
        print(f"Warning: {e}")
        return None

    groups = group_by_dtype(rows)

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    fig.suptitle('Unitary FFT Benchmark', fontsize=14, fontweight='bold')

    # =========================================================================
    # (a) Accuracy
    # =========================================================================
    ax1 = axes[0]
    for dtype, group in groups.items():
        n = np.array([r['n'] for r in group])
        # log axes cannot show exact zeros
        err = np.maximum([r['relative_error'] for r in group], 1e-18)
        ax1.loglog(n, err, 'o-', color=get_dtype_color(dtype), label=get_dtype_name(dtype), base=2)

    ax1.set_xlabel('Transform length N')
    ax1.set_ylabel('Relative error vs scipy')
    ax1.set_title('(a) Accuracy', fontweight='bold')
    ax1.legend(loc='upper left')

    # =========================================================================
    # (b) Timing
    # =========================================================================
    ax2 = axes[1]
    scipy_plotted = False
    for dtype, group in groups.items():
        n = np.array([r['n'] for r in group])
        t = np.array([r['time_ms'] for r in group])
        t_std = np.array([r['time_std_ms'] for r in group])
        color = get_dtype_color(dtype)

        ax2.plot(n, t, 'o-', color=color, label=get_dtype_name(dtype))
        ax2.fill_between(n, np.maximum(t - t_std, 1e-6), t + t_std, color=color, alpha=0.2)

        if not scipy_plotted:
            ax2.plot(n, [r['scipy_time_ms'] for r in group], 's--',
                     color=DTYPE_COLORS['scipy'], label='scipy.fft')
            scipy_plotted = True

    ax2.set_xscale('log', base=2)
    ax2.set_yscale('log')
    ax2.set_xlabel('Transform length N')
    ax2.set_ylabel('Time per forward call (ms)')
    ax2.set_title('(b) Timing', fontweight='bold')
    ax2.legend(loc='upper left')

    plt.tight_layout(rect=[0, 0, 1, 0.95])

    return fig


def main():
    """Generate and save the figure."""
    parser = argparse.ArgumentParser(description="Plot FFT benchmark results")
    parser.add_argument('--input', type=str, default=None,
                        help='Results directory (defaults to the latest run)')
    args = parser.parse_args()

    print("Generating benchmark figure...")
    fig = create_figure(Path(args.input) if args.input else None)
    if fig is not None:
        save_figure(fig, 'fft_benchmark')
        plt.close(fig)
    print("Done!")


if __name__ == '__main__':
    main()
