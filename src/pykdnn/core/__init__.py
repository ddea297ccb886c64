"""
Core search structures
"""
from .errors import EmptyReferenceSetError
from .point import Point, QueryResult
from .distance import squared_distance, squared_distances
from .brute_force import BruteForceSearch
from .kdtree import KDTree

__all__ = [
    'EmptyReferenceSetError',
    'Point',
    'QueryResult',
    'squared_distance',
    'squared_distances',
    'BruteForceSearch',
    'KDTree',
]
