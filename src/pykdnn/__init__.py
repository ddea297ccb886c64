"""
pykdnn - Exact nearest neighbor search over static 2-D point sets

K-d tree with branch-and-bound queries, validated index-for-index against a
brute-force scan.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Core data structures
from .core.point import Point, QueryResult
from .core.errors import EmptyReferenceSetError
from .core.distance import squared_distance
from .core.kdtree import KDTree
from .core.brute_force import BruteForceSearch
from .core import brute_force

# Batch querying
from .index.batch_search import search_batch, nearest_indices
from .index.validation import compare_with_brute_force, compare_with_scipy

# Utilities
from .utils.sampling import random_points, to_points
from .utils.io import load_hdf5_points, save_hdf5_points

__all__ = [
    # Core structures
    "Point",
    "QueryResult",
    "EmptyReferenceSetError",
    "squared_distance",
    "KDTree",
    "BruteForceSearch",
    "brute_force",

    # Batch querying
    "search_batch",
    "nearest_indices",
    "compare_with_brute_force",
    "compare_with_scipy",

    # Utilities
    "random_points",
    "to_points",
    "load_hdf5_points",
    "save_hdf5_points",
]
