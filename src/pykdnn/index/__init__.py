"""
Batch querying and validation
"""
from .batch_search import search_batch, nearest_indices
from .validation import compare_with_brute_force, compare_with_scipy

__all__ = ['search_batch', 'nearest_indices', 'compare_with_brute_force', 'compare_with_scipy']
