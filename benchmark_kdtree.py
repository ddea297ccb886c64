"""
Benchmark KD-Tree vs brute force for 2-D nearest neighbor

Times tree build, parallel tree queries and the brute-force scan, then
checks that both return the same index for every query.
"""
import os
import time

from pykdnn import KDTree, random_points, nearest_indices
from pykdnn.core.brute_force import nearest_batch
from pykdnn.core.params import (
    DEFAULT_NUM_QUERY_POINTS,
    DEFAULT_NUM_REFERENCE_POINTS,
    DEFAULT_X_RANGE,
    DEFAULT_Y_RANGE,
)
from pykdnn.index.validation import compare_with_scipy

x_min, x_max = DEFAULT_X_RANGE
y_min, y_max = DEFAULT_Y_RANGE
num_threads = os.cpu_count() or 1

print("=" * 80)
print("BENCHMARK: KD-Tree vs brute force")
print("=" * 80)

reference = random_points(DEFAULT_NUM_REFERENCE_POINTS, x_min, x_max, y_min, y_max)
queries = random_points(DEFAULT_NUM_QUERY_POINTS, x_min, x_max, y_min, y_max)
print(f"\nDataset: {len(reference):,} reference, {len(queries):,} queries, threads={num_threads}")

start = time.time()
tree = KDTree.build(reference)
print(f"time elapsed in building tree: {(time.time() - start) * 1000:.2f}ms (depth {tree.depth})")

start = time.time()
indices = nearest_indices(tree, queries, num_threads=num_threads, show_progress=True)
print(f"time elapsed in finding neighbors: {(time.time() - start) * 1000:.2f}ms")

# Warmup JIT
nearest_batch(queries[:2], reference[:2])

start = time.time()
indices_brute = nearest_batch(queries, reference)
print(f"time elapsed in brute force: {(time.time() - start) * 1000:.2f}ms")

mismatches = (indices != indices_brute).sum()
if mismatches:
    raise SystemExit(f"✗ {mismatches} of {len(queries)} queries disagree with brute force")
print("✓ Tree and brute force agree on every query")

if not compare_with_scipy(tree, reference, queries[:1000]):
    raise SystemExit("✗ Distances disagree with scipy.spatial.cKDTree")
print("✓ Distances agree with scipy.spatial.cKDTree")

print("\n" + "=" * 80)
