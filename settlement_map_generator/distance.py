"""
Module C: Nearest-distance scoring of candidate positions.

All distances are squared; they are only ever compared against each other.
"""

from typing import Iterable, Optional

from .streetmap import BlockData, StreetMap


def sq_dist_from_edge(x: float, y: float, width: float, height: float) -> float:
    """
    Approximate squared distance from (x, y) to the area boundary.

    Takes the nearer side on each axis, squares both and keeps the smaller.

    Args:
        x: X coordinate
        y: Y coordinate
        width: Area width
        height: Area height

    Returns:
        Squared boundary distance
    """
    x_dist = min(x, width - x)
    y_dist = min(y, height - y)
    return min(x_dist ** 2, y_dist ** 2)


def sq_dist_from_block(block: BlockData, x: float, y: float) -> float:
    return (block.x - x) ** 2 + (block.y - y) ** 2


def nearest_block_score(
    street_map: StreetMap,
    x: float,
    y: float,
    chunk_indices: Iterable[int]
) -> Optional[float]:
    """
    Minimum squared distance from (x, y) to any block in the given chunks.

    Args:
        street_map: Map holding the blocks
        x: X coordinate
        y: Y coordinate
        chunk_indices: Chunks to search

    Returns:
        Squared distance, or None if the chunks hold no blocks
    """
    best = None
    for chunk in chunk_indices:
        for b_index in street_map.grid.chunk_blocks(chunk):
            dist = sq_dist_from_block(street_map.blocks[b_index], x, y)
            if best is None or dist < best:
                best = dist
    return best


def candidate_score(street_map: StreetMap, x: float, y: float) -> float:
    """
    Score a candidate: the smaller of its boundary distance and its distance
    to the nearest block in its own or a neighboring chunk.
    """
    dist = sq_dist_from_edge(x, y, street_map.width, street_map.height)

    chunk = street_map.grid.locate(x, y)
    block_dist = nearest_block_score(
        street_map, x, y, street_map.grid.neighbors(chunk)
    )
    if block_dist is not None and block_dist < dist:
        dist = block_dist
    return dist
