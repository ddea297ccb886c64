"""
Basic Usage Example - pykdnn

Demonstrates core functionality:
1. Build a KD-Tree
2. Single and batch nearest neighbor queries
3. Cross-check against brute force
4. Save/load point sets with HDF5
"""
import shutil
import tempfile
from pathlib import Path

import numpy as np

from pykdnn import (
    BruteForceSearch,
    KDTree,
    Point,
    compare_with_brute_force,
    load_hdf5_points,
    nearest_indices,
    random_points,
    save_hdf5_points,
)

print("=" * 80)
print("pykdnn - Basic Usage Example")
print("=" * 80)

n_reference = 10000
n_queries = 1000

reference = random_points(n_reference, -10.0, 10.0, -10.0, 10.0, seed=42)
queries = random_points(n_queries, -10.0, 10.0, -10.0, 10.0, seed=43)

print(f"\nDataset: {n_reference:,} reference, {n_queries:,} queries")

# ============================================================================
# Example 1: Build and query
# ============================================================================
print("\n" + "=" * 80)
print("Example 1: Build and query")
print("=" * 80)

tree = KDTree.build(reference)
print(f"  Nodes: {len(tree)}, depth: {tree.depth}")

result = tree.nearest(Point(1.0, 1.0))
print(f"  Nearest to (1, 1): point {result.index} at {reference[result.index]}"
      f" (squared distance: {result.squared_distance:.6f})")

# Worked example: equal distances resolve to the lower index
small = KDTree([(0, 0), (10, 0), (0, 10)])
print(f"  (1, 1) -> {small.nearest_index((1, 1))}, (9, 9) -> {small.nearest_index((9, 9))}")

# ============================================================================
# Example 2: Batch queries
# ============================================================================
print("\n" + "=" * 80)
print("Example 2: Batch queries")
print("=" * 80)

indices = nearest_indices(tree, queries, num_threads=4)
brute = nearest_indices(BruteForceSearch(reference), queries, num_threads=4)
print(f"  First 5 results: {indices[:5].tolist()}")
print(f"  Matches brute force: {np.array_equal(indices, brute)}")
print(f"  Mismatches: {compare_with_brute_force(tree, reference, queries)}")

# ============================================================================
# Example 3: HDF5 round trip
# ============================================================================
print("\n" + "=" * 80)
print("Example 3: HDF5 round trip")
print("=" * 80)

temp_dir = tempfile.mkdtemp()
path = str(Path(temp_dir) / "points.h5")

save_hdf5_points(path, reference, queries, indices)
reference2, queries2, neighbors2 = load_hdf5_points(path)
print(f"  Ground truth preserved: {np.array_equal(neighbors2, indices)}")

shutil.rmtree(temp_dir)

print("=" * 80)
