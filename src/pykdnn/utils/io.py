"""
I/O Utilities - Point set loading and saving
"""
import h5py
import numpy as np
from typing import Optional, Tuple

from ..core.params import HDF5_NEIGHBORS_KEY, HDF5_QUERIES_KEY, HDF5_REFERENCE_KEY
from ..core.point import as_reference_array


def load_hdf5_points(file_path: str) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray]]:
    """
    Load reference and query points from an HDF5 file

    Expected format:
        - reference: (N, 2) reference points
        - queries: (Q, 2) query points
        - neighbors: (Q,) nearest reference index per query (optional)

    Args:
        file_path: Path to HDF5 file

    Returns:
        reference, queries, neighbors (None if the file has no ground truth)
    """
    print(f"Loading points from {file_path}...")

    with h5py.File(file_path, 'r') as f:
        print(f"  Keys in file: {list(f.keys())}")

        reference = as_reference_array(f[HDF5_REFERENCE_KEY][:])
        queries = as_reference_array(f[HDF5_QUERIES_KEY][:])
        neighbors = None
        if HDF5_NEIGHBORS_KEY in f:
            neighbors = f[HDF5_NEIGHBORS_KEY][:].astype(np.int64)

        print(f"  Reference: {reference.shape}")
        print(f"  Queries: {queries.shape}")
        if neighbors is not None:
            print(f"  Neighbors: {neighbors.shape}")

    return reference, queries, neighbors


def save_hdf5_points(
    file_path: str,
    reference,
    queries,
    neighbors: np.ndarray = None
):
    """
    Save reference and query points to an HDF5 file

    Args:
        file_path: Path to save HDF5 file
        reference: Reference points
        queries: Query points
        neighbors: Nearest reference index per query (optional)
    """
    print(f"Saving points to {file_path}...")

    reference = as_reference_array(reference)
    queries = as_reference_array(queries)
    if neighbors is not None and len(neighbors) != len(queries):
        raise ValueError(
            f"got {len(neighbors)} neighbors for {len(queries)} queries"
        )

    with h5py.File(file_path, 'w') as f:
        f.create_dataset(HDF5_REFERENCE_KEY, data=reference)
        f.create_dataset(HDF5_QUERIES_KEY, data=queries)

        if neighbors is not None:
            f.create_dataset(HDF5_NEIGHBORS_KEY, data=np.asarray(neighbors, dtype=np.int64))

    print("✓ Saved")
