"""
Cross-validation of tree search against reference implementations
"""
import numpy as np
from scipy.spatial import cKDTree
from typing import List

from ..core.brute_force import nearest_batch
from ..core.errors import EmptyReferenceSetError
from ..core.point import as_reference_array


def compare_with_brute_force(tree, reference_set, queries) -> List[int]:
    """
    Positions where the tree and the brute-force scan pick different indices.

    Indices must match exactly, ties included.

    Args:
        tree: Built KDTree
        reference_set: Points the tree was built from
        queries: Query points

    Returns:
        Sorted list of mismatching query positions (empty when equivalent)
    """
    queries = as_reference_array(queries)
    expected = nearest_batch(queries, reference_set)
    actual = np.array([tree.nearest(q).index for q in queries], dtype=np.int64)
    return np.flatnonzero(actual != expected).tolist()


def compare_with_scipy(tree, reference_set, queries, rtol: float = 1e-12) -> bool:
    """
    Check tree distances against scipy.spatial.cKDTree.

    scipy does not promise lowest-index tie order, so only distances are
    compared.

    Args:
        tree: Built KDTree
        reference_set: Points the tree was built from
        queries: Query points
        rtol: Relative tolerance on squared distance

    Returns:
        True if every query's nearest distance agrees
    """
    data = as_reference_array(reference_set)
    if len(data) == 0:
        raise EmptyReferenceSetError()

    queries = as_reference_array(queries)
    if len(queries) == 0:
        return True

    dists, _ = cKDTree(data).query(queries, k=1)
    expected = dists ** 2
    actual = np.array([tree.nearest(q).squared_distance for q in queries])
    return bool(np.allclose(actual, expected, rtol=rtol, atol=0.0))
