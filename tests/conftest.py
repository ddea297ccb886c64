import numpy as np
import pytest


@pytest.fixture
def triangle():
    """Reference set from the worked example: (0,0), (10,0), (0,10)"""
    return [(0.0, 0.0), (10.0, 0.0), (0.0, 10.0)]


@pytest.fixture
def uniform_points():
    rng = np.random.default_rng(42)
    return rng.uniform(-10.0, 10.0, size=(2000, 2))


@pytest.fixture
def uniform_queries():
    rng = np.random.default_rng(7)
    return rng.uniform(-12.0, 12.0, size=(500, 2))


@pytest.fixture
def grid_points():
    """Integer grid with repeated points: lots of exact distance ties"""
    rng = np.random.default_rng(3)
    return rng.integers(-5, 6, size=(400, 2)).astype(np.float64)


@pytest.fixture
def grid_queries():
    """Integer and half-integer queries against grid_points"""
    rng = np.random.default_rng(11)
    return rng.integers(-14, 15, size=(600, 2)).astype(np.float64) / 2.0
