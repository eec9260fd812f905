"""
Visualization module for ledger statistics.
"""

from pathlib import Path
from typing import Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator

from ledgerstats.config import CONFIG, DEPTH_PLOT_FILE
from ledgerstats.depth import depth_histogram
from ledgerstats.ledger import Ledger


def plot_depth_distribution(ledger: Ledger, output_dir: Union[str, Path]) -> Path:
    """Horizontal bar chart of how many nodes sit at each depth."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    histogram = depth_histogram(ledger.depths)
    max_depth = max(histogram)
    levels = list(range(max_depth + 1))
    counts = [histogram.get(level, 0) for level in levels]

    print("[INFO] Generating depth distribution plot...")
    # Keep the canvas bounded for long chains
    fig_height = min(max(4, max_depth * 0.4), CONFIG['plot_max_height'])
    fig, ax = plt.subplots(figsize=(10, fig_height))

    bars = ax.barh(levels, counts, color='#1f77b4', alpha=0.8, height=0.6)

    ax.set_title(
        f"Transactions per Depth (Max Depth: {max_depth}, Avg Depth: {ledger.avg_dag_depth():.3f})",
        fontsize=13,
        fontweight='bold',
    )
    ax.set_xlabel("Number of Transactions", fontsize=12)
    ax.set_ylabel("Depth (approvals to genesis)", fontsize=12)

    if len(levels) <= CONFIG['plot_max_labeled_levels']:
        ax.set_yticks(levels)
        for bar, count in zip(bars, counts):
            ax.text(bar.get_width(), bar.get_y() + bar.get_height() / 2, f" {count}", va='center', fontsize=9)
    else:
        ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax.invert_yaxis()

    plt.tight_layout()
    plot_path = output_dir / DEPTH_PLOT_FILE
    plt.savefig(plot_path, dpi=CONFIG['plot_dpi'])
    plt.close(fig)
    print(f"[INFO] Saved depth plot to {plot_path}")

    return plot_path
