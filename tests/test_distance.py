"""Point, reference-set coercion and squared distance"""
import dataclasses

import numpy as np
import pytest

from pykdnn import Point, squared_distance
from pykdnn.core.distance import squared_distances
from pykdnn.core.point import as_reference_array, as_xy


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0


def test_point_equality_and_unpacking():
    assert Point(1.5, -2.0) == Point(1.5, -2.0)
    assert Point(1.5, -2.0) != Point(1.5, 2.0)
    x, y = Point(1.5, -2.0)
    assert (x, y) == (1.5, -2.0)
    assert Point(3.0, 4.0).as_tuple() == (3.0, 4.0)


def test_as_xy_accepts_points_tuples_and_arrays():
    assert as_xy(Point(1, 2)) == (1.0, 2.0)
    assert as_xy((1, 2)) == (1.0, 2.0)
    assert as_xy(np.array([1.0, 2.0])) == (1.0, 2.0)


def test_squared_distance():
    assert squared_distance(Point(0, 0), Point(3, 4)) == 25.0
    assert squared_distance((1, 1), (1, 1)) == 0.0
    assert squared_distance((9, 9), (10, 0)) == 82.0
    assert squared_distance((9, 9), (0, 10)) == 82.0


def test_squared_distance_is_symmetric():
    a, b = (0.1, -7.3), (5.5, 2.25)
    assert squared_distance(a, b) == squared_distance(b, a)


def test_vectorised_distances_match_scalar_bit_for_bit(uniform_points):
    query = (0.123456789, -3.987654321)
    dists = squared_distances(query, uniform_points)
    expected = [squared_distance(query, p) for p in uniform_points]
    assert dists.tolist() == expected


def test_reference_array_from_points_and_tuples():
    a = as_reference_array([Point(0, 1), Point(2, 3)])
    b = as_reference_array([(0, 1), (2, 3)])
    assert a.dtype == np.float64
    assert a.shape == (2, 2)
    np.testing.assert_array_equal(a, b)


def test_reference_array_is_read_only():
    data = np.zeros((4, 2))
    ref = as_reference_array(data)
    assert not ref.flags.writeable
    # caller's array is untouched
    assert data.flags.writeable


def test_reference_array_empty():
    assert as_reference_array([]).shape == (0, 2)
    assert as_reference_array(np.empty((0, 2))).shape == (0, 2)


@pytest.mark.parametrize("bad", [np.zeros((3, 3)), np.zeros(5), np.zeros((2, 2, 2))])
def test_reference_array_rejects_wrong_shape(bad):
    with pytest.raises(ValueError):
        as_reference_array(bad)
