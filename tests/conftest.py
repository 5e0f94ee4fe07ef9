"""Shared fixtures for City Sector Generator tests."""

import random

import pytest

from city_sector.models.geometry import Point2D


def ring_of(*coords):
    return [Point2D(x, y) for x, y in coords]


def assert_points_close(actual, expected, abs_tol=1e-6):
    """Compare point lists coordinate-wise."""
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert a.x == pytest.approx(e.x, abs=abs_tol)
        assert a.y == pytest.approx(e.y, abs=abs_tol)


@pytest.fixture
def ccw_square():
    """10x10 square, counter-clockwise."""
    return ring_of((0, 0), (10, 0), (10, 10), (0, 10))


@pytest.fixture
def cw_square():
    """5x5 square, clockwise."""
    return ring_of((0, 0), (0, 5), (5, 5), (5, 0))


@pytest.fixture
def l_shape():
    """Non-convex L-shaped hexagon of area 3, counter-clockwise."""
    return ring_of((0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2))


@pytest.fixture
def rng():
    return random.Random(1)
