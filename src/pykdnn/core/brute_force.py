"""
Brute-force nearest neighbor: the linear-scan baseline

Every search strategy in the package is validated against this one.
Ties resolve to the lowest index (strict < while scanning in index order).
"""
import numpy as np
from numba import njit, prange

from .distance import squared_distances
from .errors import EmptyReferenceSetError
from .point import PointLike, QueryResult, as_reference_array


def nearest_result(query: PointLike, reference_set) -> QueryResult:
    """
    Scan all reference points and return the closest one.

    Args:
        query: Query point
        reference_set: Reference points (sequence of points or (N, 2) array)

    Returns:
        QueryResult with the lowest index among the points at minimum distance
    """
    data = as_reference_array(reference_set)
    if len(data) == 0:
        raise EmptyReferenceSetError()

    dists = squared_distances(query, data)
    # argmin returns the first occurrence of the minimum
    index = int(np.argmin(dists))
    return QueryResult(index, float(dists[index]))


def nearest(query: PointLike, reference_set) -> int:
    """Index of the reference point closest to query"""
    return nearest_result(query, reference_set).index


@njit(parallel=True, cache=True)
def _nearest_batch_kernel(queries, data):
    """JIT-compiled linear scan, one query per prange iteration"""
    m = queries.shape[0]
    n = data.shape[0]
    out = np.empty(m, dtype=np.int64)

    for j in prange(m):
        qx = queries[j, 0]
        qy = queries[j, 1]
        best = 0
        d_min = np.inf
        for i in range(n):
            dx = data[i, 0] - qx
            dy = data[i, 1] - qy
            d = dx * dx + dy * dy
            if d < d_min:
                d_min = d
                best = i
        out[j] = best
    return out


def nearest_batch(queries, reference_set) -> np.ndarray:
    """
    Brute-force nearest index for every query, in parallel.

    No fastmath on the kernel: results must stay bit-identical to the
    scalar scan, including tie order.

    Args:
        queries: Query points (sequence of points or (M, 2) array)
        reference_set: Reference points (sequence of points or (N, 2) array)

    Returns:
        (M,) int64 array, entry j answering queries[j]
    """
    data = as_reference_array(reference_set)
    if len(data) == 0:
        raise EmptyReferenceSetError()

    queries = as_reference_array(queries)
    if len(queries) == 0:
        return np.empty(0, dtype=np.int64)

    return _nearest_batch_kernel(np.ascontiguousarray(queries),
                                 np.ascontiguousarray(data))


class BruteForceSearch:
    """Linear-scan index with the same query interface as KDTree"""

    def __init__(self, reference_set):
        self.data = as_reference_array(reference_set)

    def __len__(self) -> int:
        return len(self.data)

    def nearest(self, query: PointLike) -> QueryResult:
        return nearest_result(query, self.data)

    def nearest_index(self, query: PointLike) -> int:
        return self.nearest(query).index

    def nearest_batch(self, queries) -> np.ndarray:
        return nearest_batch(queries, self.data)
