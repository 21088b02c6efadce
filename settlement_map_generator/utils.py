"""
Geometry helpers shared by metrics and visualization.
"""

import numpy as np
from typing import Iterable, Tuple
from shapely.geometry import MultiPoint, Polygon, box


def create_area_polygon(width: float, height: float) -> Polygon:
    """
    Create rectangle polygon [0, width] x [0, height].

    Args:
        width: Area width
        height: Area height

    Returns:
        Rectangle polygon
    """
    return box(0, 0, width, height)


def points_within_area(
    points: Iterable[Tuple[float, float]],
    width: float,
    height: float
) -> bool:
    """
    Check that every point lies inside or on the area boundary.

    Args:
        points: Iterable of (x, y)
        width: Area width
        height: Area height

    Returns:
        True if all points are covered (vacuously True for no points)
    """
    points = [tuple(p) for p in points]
    if not points:
        return True
    area = create_area_polygon(width, height)
    return area.covers(MultiPoint(points))


def as_point_array(points) -> np.ndarray:
    """Coerce a sequence of (x, y) to an (N, 2) float array."""
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)
