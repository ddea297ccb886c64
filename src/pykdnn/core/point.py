"""
Point and result value types, plus reference-set coercion
"""
import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from .params import DIMENSIONS


@dataclass(frozen=True)
class Point:
    """Immutable 2-D coordinate"""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class QueryResult:
    """Winning reference index and its squared distance to the query"""
    index: int
    squared_distance: float


PointLike = Union[Point, Tuple[float, float], Sequence[float], np.ndarray]


def as_xy(point: PointLike) -> Tuple[float, float]:
    """Return (x, y) as Python floats for any point-like value"""
    if isinstance(point, Point):
        return float(point.x), float(point.y)
    x, y = point
    return float(x), float(y)


def as_reference_array(points) -> np.ndarray:
    """
    Coerce a reference set to a read-only (N, 2) float64 array.

    Accepts a sequence of Point, a sequence of (x, y) pairs, or an (N, 2)
    array. Row i keeps the identity of input element i.

    Args:
        points: Reference points

    Returns:
        (N, 2) float64 array with the writeable flag cleared
    """
    if isinstance(points, np.ndarray):
        data = np.array(points, dtype=np.float64)
    else:
        points = list(points)
        if len(points) == 0:
            data = np.empty((0, DIMENSIONS), dtype=np.float64)
        else:
            data = np.array([as_xy(p) for p in points], dtype=np.float64)

    if data.ndim == 1 and data.size == 0:
        data = data.reshape(0, DIMENSIONS)
    if data.ndim != 2 or data.shape[1] != DIMENSIONS:
        raise ValueError(
            f"expected an (N, {DIMENSIONS}) array of points, got shape {data.shape}"
        )

    data.setflags(write=False)
    return data
