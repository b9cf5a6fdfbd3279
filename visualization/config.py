"""
Configuration and style settings for visualization.
"""

import matplotlib.pyplot as plt
import matplotlib as mpl
from pathlib import Path

# =============================================================================
# Paths
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent
RESULTS_DIR = PROJECT_ROOT / "experiments" / "results"
OUTPUT_DIR = Path(__file__).parent / "outputs"

# =============================================================================
# Color Schemes
# =============================================================================

DTYPE_COLORS = {
    'float32': '#4C72B0',    # Blue
    'float64': '#C44E52',    # Red
    'scipy': '#7f7f7f',      # Gray
}

DTYPE_NAMES = {
    'float32': 'Single (float32)',
    'float64': 'Double (float64)',
}

# =============================================================================
# Typography / Figure Settings
# =============================================================================

FONT_SIZES = {
    'title': 14,
    'axis_label': 11,
    'tick_label': 10,
    'legend': 9,
}

FIGURE_SETTINGS = {
    'dpi': 300,
    'format': ['pdf', 'png'],
    'bbox_inches': 'tight',
    'pad_inches': 0.1,
    'facecolor': 'white',
}


def setup_style():
    """Configure matplotlib style for clean, print-ready figures."""
    plt.style.use('seaborn-v0_8-whitegrid')

    params = {
        'font.size': FONT_SIZES['tick_label'],
        'axes.titlesize': FONT_SIZES['title'],
        'axes.titleweight': 'bold',
        'axes.labelsize': FONT_SIZES['axis_label'],
        'axes.spines.top': False,
        'axes.spines.right': False,
        'axes.grid': True,
        'grid.color': '#E5E5E5',
        'grid.linewidth': 0.5,
        'legend.fontsize': FONT_SIZES['legend'],
        'legend.frameon': True,
        'figure.facecolor': 'white',
        'savefig.dpi': FIGURE_SETTINGS['dpi'],
        'lines.linewidth': 2,
        'lines.markersize': 6,
    }

    mpl.rcParams.update(params)


def save_figure(fig, filename, output_dir=None):
    """
    Save figure in both PDF and PNG formats.

    Args:
        fig: matplotlib Figure object
        filename: base filename without extension
        output_dir: output directory (defaults to OUTPUT_DIR)
    """
    if output_dir is None:
        output_dir = OUTPUT_DIR

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    for fmt in FIGURE_SETTINGS['format']:
        filepath = output_dir / f"{filename}.{fmt}"
        fig.savefig(
            filepath,
            format=fmt,
            dpi=FIGURE_SETTINGS['dpi'],
            bbox_inches=FIGURE_SETTINGS['bbox_inches'],
            pad_inches=FIGURE_SETTINGS['pad_inches'],
            facecolor=FIGURE_SETTINGS['facecolor'],
        )
        print(f"Saved: {filepath}")


def get_dtype_color(dtype):
    return DTYPE_COLORS.get(dtype, '#7f7f7f')


def get_dtype_name(dtype):
    return DTYPE_NAMES.get(dtype, dtype)
