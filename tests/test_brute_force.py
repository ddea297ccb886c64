"""Brute-force baseline"""
import numpy as np
import pytest

from pykdnn import BruteForceSearch, EmptyReferenceSetError, Point, brute_force


def test_worked_example(triangle):
    assert brute_force.nearest((1, 1), triangle) == 0
    # (10,0) and (0,10) are both at 82 from (9,9); lower index wins
    result = brute_force.nearest_result(Point(9, 9), triangle)
    assert result.index == 1
    assert result.squared_distance == 82.0


def test_ties_resolve_to_lowest_index():
    points = [(5, 5), (1, 0), (-1, 0), (0, 1), (1, 0)]
    assert brute_force.nearest((0, 0), points) == 1


def test_duplicate_points_return_first_copy():
    points = [(3, 3), (1, 1), (1, 1), (1, 1)]
    assert brute_force.nearest((1, 1), points) == 1


def test_single_point():
    assert brute_force.nearest((100, -100), [(0, 0)]) == 0


def test_matches_naive_scan(uniform_points, uniform_queries):
    for q in uniform_queries[:50]:
        best, d_min = 0, float('inf')
        for i, p in enumerate(uniform_points):
            d = (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2
            if d < d_min:
                best, d_min = i, d
        assert brute_force.nearest(q, uniform_points) == best


def test_batch_kernel_matches_scalar(grid_points, grid_queries):
    batch = brute_force.nearest_batch(grid_queries, grid_points)
    assert batch.dtype == np.int64
    expected = [brute_force.nearest(q, grid_points) for q in grid_queries]
    assert batch.tolist() == expected


def test_batch_kernel_no_queries(triangle):
    assert brute_force.nearest_batch(np.empty((0, 2)), triangle).shape == (0,)


def test_search_object(triangle):
    search = BruteForceSearch(triangle)
    assert len(search) == 3
    assert search.nearest((9, 9)).index == 1
    assert search.nearest_index((1, 1)) == 0
    assert search.nearest_batch([(1, 1), (9, 9)]).tolist() == [0, 1]


def test_empty_reference_set_raises():
    with pytest.raises(EmptyReferenceSetError):
        brute_force.nearest((0, 0), [])
    with pytest.raises(EmptyReferenceSetError):
        brute_force.nearest_result((0, 0), np.empty((0, 2)))
    with pytest.raises(EmptyReferenceSetError):
        brute_force.nearest_batch([(0, 0)], [])
    with pytest.raises(EmptyReferenceSetError):
        BruteForceSearch([]).nearest((0, 0))


def test_empty_reference_set_error_is_value_error():
    assert issubclass(EmptyReferenceSetError, ValueError)
