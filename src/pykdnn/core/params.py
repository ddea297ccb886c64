"""
Default parameters for building and querying

Benchmark values: 50k reference and 50k query points in [-10, 10)^2.
"""

DIMENSIONS = 2

# Axis ids
AXIS_X = 0
AXIS_Y = 1

# Batch search parameters
DEFAULT_NUM_THREADS = 1
DEFAULT_CHUNK_SIZE = 1024

# Benchmark parameters
DEFAULT_NUM_REFERENCE_POINTS = 50_000
DEFAULT_NUM_QUERY_POINTS = 50_000
DEFAULT_X_RANGE = (-10.0, 10.0)
DEFAULT_Y_RANGE = (-10.0, 10.0)

# HDF5 dataset keys
HDF5_REFERENCE_KEY = 'reference'
HDF5_QUERIES_KEY = 'queries'
HDF5_NEIGHBORS_KEY = 'neighbors'


def default_chunk_size(num_queries: int, num_threads: int) -> int:
    """
    Pick a chunk size for spreading queries over workers.

    Aims for roughly four chunks per worker so a slow chunk does not leave
    the other workers idle, capped at DEFAULT_CHUNK_SIZE.

    Args:
        num_queries: Number of queries in the batch
        num_threads: Number of workers

    Returns:
        Chunk size (always >= 1)
    """
    per_worker = -(-num_queries // max(1, num_threads * 4))
    return max(1, min(DEFAULT_CHUNK_SIZE, per_worker))
