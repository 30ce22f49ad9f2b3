"""Shared pytest fixtures for the pathfind test suite."""

import pytest
from pathfind import Polygon, PolygonSet


# ============== Polygon Fixtures ==============
# All shapes use screen coordinates: origin at the top left, y grows downward.

@pytest.fixture
def square():
    """A 10x10 square.

         0,0 >---+ 10,0
             |   |
        0,10 +---+ 10,10
    """
    return Polygon(vertices=[(0, 0), (10, 0), (10, 10), (0, 10)])


@pytest.fixture
def diamond():
    """A diamond with corners at the middle of the square's sides."""
    return Polygon(vertices=[(5, 0), (10, 5), (5, 10), (0, 5)])


@pytest.fixture
def sloped_u():
    """A U shape with a downward slope as the right edge.

         0,0 >---+   +---+ 30,0
             |   |   |    \\
             |   +---+     \\
        0,20 +---------------+ 40,20
    """
    return Polygon(
        vertices=[(0, 0), (10, 0), (10, 10), (20, 10), (20, 0), (30, 0), (40, 20), (0, 20)]
    )


@pytest.fixture
def polygon_k():
    """A polygon with a single concave vertex at (10, 10) on the right side."""
    return Polygon(vertices=[(0, 0), (20, 0), (10, 10), (20, 20), (0, 20)])


# ============== Polygon Set Fixtures ==============

@pytest.fixture
def two_squares_nested():
    """A 40x40 square around a 20x20 square, centred on the origin."""
    return PolygonSet(
        polygons=(
            [(-20, -20), (20, -20), (20, 20), (-20, 20)],
            [(-10, -10), (10, -10), (10, 10), (-10, 10)],
        )
    )


@pytest.fixture
def three_squares_nested(two_squares_nested):
    """The nested pair plus a 60x60 square around both, listed last."""
    return PolygonSet(
        polygons=two_squares_nested.polygons
        + (Polygon(vertices=[(-30, -30), (30, -30), (30, 30), (-30, 30)]),)
    )


@pytest.fixture
def two_disjoint_squares():
    """Two 10x10 squares side by side with a gap of 10."""
    return PolygonSet(
        polygons=(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            [(20, 0), (30, 0), (30, 10), (20, 10)],
        )
    )


# ============== Pathfinder Inputs ==============

@pytest.fixture
def polygons_u():
    """A U-shaped floor plan.

         0,0 >---+   +---+ 30,0
             |   |   |   |
             |   +---+   |
        0,20 +-----------+ 30,20
    """
    return [[(0, 0), (10, 0), (10, 10), (20, 10), (20, 0), (30, 0), (30, 20), (0, 20)]]


@pytest.fixture
def polygons_o():
    """A 40x40 square with a diamond-shaped hole in the middle."""
    return [
        [(0, 0), (40, 0), (40, 40), (0, 40)],
        [(20, 10), (30, 20), (20, 30), (10, 20)],
    ]


@pytest.fixture
def polygons_notch_and_hole():
    """A notched outer boundary with a rectangular hole on the right.

         0,0 >---+   +-----------+ 50,0
             | s |   |   >---+   |
             |   +---+   |   | d |
             |           +---+   |
        0,20 +-------------------+ 50,20
    """
    return [
        [(0, 0), (10, 0), (10, 10), (20, 10), (20, 0), (50, 0), (50, 20), (0, 20)],
        [(30, 5), (40, 5), (40, 15), (30, 15)],
    ]
