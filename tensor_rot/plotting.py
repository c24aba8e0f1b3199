"""
plotting.py — Figure of Every Depth-Slice
===========================================

One panel per z-slice, each element drawn as a colour-coded cell labelled
with its character.  Row y runs downward, column x to the right, matching
the text renderer.
"""

import math

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt


def plot_volume(volume, filename=None, max_labels=16):
    """
    Plot all depth-slices of a volume.

    Args:
        volume: Volume
        filename: optional path; the figure is saved there and closed
        max_labels: character labels are drawn only up to this dimension

    Returns:
        matplotlib Figure
    """
    N = volume.N
    ncols = math.ceil(math.sqrt(N))
    nrows = math.ceil(N / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(3 * ncols, 3 * nrows),
                             squeeze=False)
    cube = volume.as_array()

    for z, ax in enumerate(axes.flat):
        if z >= N:
            ax.axis('off')
            continue
        grid = cube[z].astype(np.int32)
        ax.imshow(grid, cmap='viridis', vmin=int(cube.min()), vmax=int(cube.max()),
                  interpolation='nearest')
        if N <= max_labels:
            for y in range(N):
                for x in range(N):
                    ax.text(x, y, chr(grid[y, x]), ha='center', va='center',
                            fontsize=8, color='white')
        ax.set_title(f"z = {z}")
        ax.set_xticks([])
        ax.set_yticks([])

    fig.suptitle(f"Volume N={N}")
    fig.tight_layout()
    if filename:
        fig.savefig(filename, dpi=150, bbox_inches='tight')
        plt.close(fig)
    return fig
