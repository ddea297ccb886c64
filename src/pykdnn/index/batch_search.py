"""Batch query processing"""
import numpy as np
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, List, Optional, Sequence

from tqdm import tqdm

from ..core.params import DEFAULT_NUM_THREADS, default_chunk_size


def search_batch(search_fn: Callable[[Any], Any], queries: Sequence,
                 num_threads: int = DEFAULT_NUM_THREADS,
                 chunk_size: Optional[int] = None,
                 show_progress: bool = False) -> List[Any]:
    """
    Apply search_fn to every query, keeping input order in the output

    Queries share nothing but the read-only index behind search_fn, so they
    can run in any order on any worker. Each worker writes its results into
    a preallocated list at the queries' original positions.

    Args:
        search_fn: Function mapping one query to one result
        queries: Ordered query points
        num_threads: Worker count (1 runs inline)
        chunk_size: Queries per work item (default: derived from batch size)
        show_progress: Show a tqdm progress bar

    Returns:
        results[i] == search_fn(queries[i])
    """
    if num_threads < 1:
        raise ValueError(f"num_threads must be >= 1, got {num_threads}")
    if chunk_size is not None and chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    n = len(queries)
    results: List[Any] = [None] * n

    if num_threads == 1 or n <= 1:
        for i in tqdm(range(n), desc="Searching", disable=not show_progress):
            results[i] = search_fn(queries[i])
        return results

    if chunk_size is None:
        chunk_size = default_chunk_size(n, num_threads)
    bounds = [(start, min(start + chunk_size, n)) for start in range(0, n, chunk_size)]

    def search_chunk(start: int, end: int) -> int:
        for i in range(start, end):
            results[i] = search_fn(queries[i])
        return end - start

    with ThreadPoolExecutor(max_workers=num_threads) as executor:
        futures = [executor.submit(search_chunk, start, end) for start, end in bounds]
        with tqdm(total=n, desc="Searching", disable=not show_progress) as bar:
            for future in as_completed(futures):
                # re-raises any exception from search_fn
                bar.update(future.result())

    return results


def nearest_indices(index, queries: Sequence, **kwargs) -> np.ndarray:
    """
    Nearest reference index for every query, as an int64 array

    Args:
        index: Anything with nearest(query) -> QueryResult (KDTree, BruteForceSearch)
        queries: Ordered query points
        **kwargs: Passed through to search_batch

    Returns:
        (M,) int64 array
    """
    results = search_batch(index.nearest, queries, **kwargs)
    return np.array([r.index for r in results], dtype=np.int64)
