"""
Spacing metrics for judging how evenly blocks are distributed.
"""

import numpy as np
from typing import Dict, Optional
from scipy.spatial import cKDTree

from .streetmap import StreetMap
from .utils import as_point_array, points_within_area


def nearest_neighbor_distances(points) -> np.ndarray:
    """
    Distance from every point to its nearest other point.

    Args:
        points: (N, 2) array-like

    Returns:
        Array of N distances (empty when N < 2)
    """
    arr = as_point_array(points)
    if len(arr) < 2:
        return np.array([])

    tree = cKDTree(arr)
    # k=2: the closest hit is the point itself
    distances, _ = tree.query(arr, k=2)
    return distances[:, 1]


def min_pairwise_distance(points) -> float:
    """
    Smallest distance between any two points.

    Returns:
        Distance, or inf when there are fewer than two points
    """
    nn = nearest_neighbor_distances(points)
    if len(nn) == 0:
        return float('inf')
    return float(np.min(nn))


def uniform_sample(
    count: int,
    width: float,
    height: float,
    rng: np.random.Generator
) -> np.ndarray:
    """Plain uniform random sample of the area, the white-noise baseline."""
    return np.column_stack((
        rng.random(count) * width,
        rng.random(count) * height,
    ))


def compute_all_metrics(street_map: StreetMap) -> Dict:
    """
    Compute spacing metrics for a map.

    Args:
        street_map: Populated map

    Returns:
        Dict of metrics
    """
    coords = street_map.coordinates()
    nn = nearest_neighbor_distances(coords)

    return {
        "block_count": len(coords),
        "edge_count": len(street_map.edges),
        "min_distance": min_pairwise_distance(coords),
        "mean_nn_distance": float(np.mean(nn)) if len(nn) else 0.0,
        "std_nn_distance": float(np.std(nn)) if len(nn) else 0.0,
        "all_within_area": points_within_area(
            coords, street_map.width, street_map.height
        ),
    }


def compare_to_uniform(
    street_map: StreetMap,
    rng: Optional[np.random.Generator] = None
) -> Dict:
    """
    Compare minimum spacing of the map to a uniform sample of equal size.

    Args:
        street_map: Populated map
        rng: Random generator for the baseline sample

    Returns:
        Dict with generated/uniform minimum distances and their ratio
    """
    if rng is None:
        rng = np.random.default_rng()

    coords = street_map.coordinates()
    baseline = uniform_sample(len(coords), street_map.width, street_map.height, rng)

    generated_min = min_pairwise_distance(coords)
    uniform_min = min_pairwise_distance(baseline)

    if np.isfinite(generated_min) and uniform_min > 0:
        ratio = generated_min / uniform_min
    else:
        ratio = float('nan')

    return {
        "generated_min_distance": generated_min,
        "uniform_min_distance": uniform_min,
        "ratio": ratio,
    }
