"""
Random point generation
"""
import numpy as np
from typing import List, Optional

from ..core.params import DIMENSIONS
from ..core.point import Point


def random_points(num_points: int, x_min: float, x_max: float,
                  y_min: float, y_max: float,
                  seed: Optional[int] = None) -> np.ndarray:
    """
    Uniform random points in [x_min, x_max) x [y_min, y_max)

    Args:
        num_points: Number of points
        x_min, x_max: Bounds on x
        y_min, y_max: Bounds on y
        seed: Seed for numpy's default generator

    Returns:
        (num_points, 2) float64 array
    """
    if num_points < 0:
        raise ValueError(f"num_points must be >= 0, got {num_points}")
    if x_min >= x_max or y_min >= y_max:
        raise ValueError(
            f"empty sampling range x=[{x_min}, {x_max}) y=[{y_min}, {y_max})"
        )

    rng = np.random.default_rng(seed)
    points = np.empty((num_points, DIMENSIONS), dtype=np.float64)
    points[:, 0] = rng.uniform(x_min, x_max, size=num_points)
    points[:, 1] = rng.uniform(y_min, y_max, size=num_points)
    return points


def to_points(array: np.ndarray) -> List[Point]:
    """Convert an (N, 2) array to a list of Point"""
    return [Point(float(x), float(y)) for x, y in array]
