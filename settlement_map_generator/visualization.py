"""
Visualization utilities for generated settlement maps.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from pathlib import Path
from typing import Optional, Tuple

from .streetmap import StreetMap


def plot_blocks(
    street_map: StreetMap,
    ax: Optional[plt.Axes] = None,
    title: str = "Settlement Blocks",
    extent: Optional[float] = None,
    show_chunks: bool = False,
    show_edges: bool = True,
    block_size: float = 12,
    block_color: str = 'green',
    edge_color: str = '#2C3E50'
) -> plt.Axes:
    """
    Plot map blocks as a scatter.

    Args:
        street_map: Map to draw (read only)
        ax: Matplotlib axis (creates new if None)
        title: Plot title
        extent: Axis upper limit for both axes (fits the area if None)
        show_chunks: Draw the chunk grid
        show_edges: Draw directed edges between blocks
        block_size: Block marker size
        block_color: Block marker color
        edge_color: Edge color

    Returns:
        Matplotlib axis
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))

    width, height = street_map.width, street_map.height

    # Area boundary
    ax.add_patch(Rectangle(
        (0, 0), width, height,
        fill=False, edgecolor='gray', linestyle='--', linewidth=1
    ))

    if show_chunks:
        grid = street_map.grid
        for cx in range(1, grid.x_chunks):
            ax.axvline(cx * grid.chunk_size, color='lightgray', linewidth=0.5, zorder=0)
        for cy in range(1, grid.y_chunks):
            ax.axhline(cy * grid.chunk_size, color='lightgray', linewidth=0.5, zorder=0)

    if show_edges and street_map.edges:
        for source, block in enumerate(street_map.blocks):
            for target in street_map.block_edges(source):
                end = street_map.blocks[target]
                ax.annotate(
                    "", xy=(end.x, end.y), xytext=(block.x, block.y),
                    arrowprops=dict(arrowstyle='->', color=edge_color, linewidth=0.8),
                    zorder=1
                )

    coords = street_map.coordinates()
    if len(coords) > 0:
        ax.scatter(
            coords[:, 0], coords[:, 1],
            s=block_size, c=block_color, zorder=2
        )

    if extent is None:
        extent = max(width, height)
    ax.set_xlim(0, extent)
    ax.set_ylim(0, extent)
    ax.set_aspect('equal')
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.set_xlabel('X')
    ax.set_ylabel('Y')

    return ax


def save_map_image(
    street_map: StreetMap,
    output_path: str,
    figsize: Tuple[float, float] = (10.24, 7.68),
    dpi: int = 100,
    **plot_kwargs
) -> Path:
    """
    Render map to an image file.

    Args:
        street_map: Map to draw
        output_path: Destination file (parent directories are created)
        figsize: Figure size in inches
        dpi: Resolution
        **plot_kwargs: Passed to plot_blocks

    Returns:
        Path written
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor('white')
    plot_blocks(street_map, ax=ax, **plot_kwargs)
    fig.savefig(path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)

    return path
