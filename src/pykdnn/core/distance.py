"""
Squared Euclidean distance

Squared distance is used everywhere instead of true distance; sqrt is
monotonic so nearest-neighbor decisions are unchanged.
"""
import numpy as np

from .point import PointLike, as_xy


def squared_distance(a: PointLike, b: PointLike) -> float:
    """Squared Euclidean distance between two points"""
    ax, ay = as_xy(a)
    bx, by = as_xy(b)
    dx = bx - ax
    dy = by - ay
    return dx * dx + dy * dy


def squared_distances(query: PointLike, data: np.ndarray) -> np.ndarray:
    """
    Squared distances from query to every row of data.

    Element i is bit-identical to squared_distance(query, data[i]): same
    operations, same order, no fused multiply-add.

    Args:
        query: Query point
        data: (N, 2) reference array

    Returns:
        (N,) float64 array
    """
    qx, qy = as_xy(query)
    dx = data[:, 0] - qx
    dy = data[:, 1] - qy
    return dx * dx + dy * dy
