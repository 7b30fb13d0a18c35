"""
File: test_point_set.py
Description: Unit tests for the PointSet collection
"""

from scatterplay.models.point import Point
from scatterplay.models.point_set import PointSet


def test_add_keeps_insertion_order():
    """Test that points are kept in the order they were added."""
    point_set = PointSet()
    assert point_set.add(Point(3, 1)) is True
    assert point_set.add(Point(-2, 4)) is True
    assert point_set.add(Point(0, 0)) is True

    assert point_set.as_tuples() == [(3, 1), (-2, 4), (0, 0)]
    assert len(point_set) == 3
    assert point_set[1] == Point(-2, 4)


def test_duplicate_is_rejected():
    """Test that adding an existing point leaves the set unchanged."""
    point_set = PointSet([Point(1, 1), Point(2, 2)])
    before = point_set.points

    assert point_set.add(Point(1.0, 1.0)) is False
    assert point_set.points == before


def test_same_x_different_y_is_not_duplicate():
    """Test that only identical (x, y) pairs are duplicates."""
    point_set = PointSet()
    point_set.add(Point(3, 1))
    assert point_set.add(Point(3, 4)) is True
    assert Point(3, 4) in point_set


def test_clear():
    """Test clearing the set."""
    point_set = PointSet([Point(1, 1), Point(2, 2)])
    point_set.clear()
    assert len(point_set) == 0
    assert list(point_set) == []


def test_replace_drops_duplicates():
    """Test replacing the contents with a new sequence."""
    point_set = PointSet([Point(5, 5)])
    point_set.replace([Point(1, 1), Point(2, 2), Point(1, 1)])
    assert point_set.as_tuples() == [(1, 1), (2, 2)]


def test_constructor_drops_duplicates():
    """Test that duplicates passed to the constructor are dropped."""
    point_set = PointSet([Point(1, 1), Point(1, 1)])
    assert len(point_set) == 1


def test_points_snapshot_is_not_affected_by_mutation():
    """Test that a snapshot does not change when the set is mutated."""
    point_set = PointSet([Point(1, 1)])
    snapshot = point_set.points
    point_set.add(Point(2, 2))
    assert snapshot == (Point(1, 1),)


def test_to_rows():
    """Test export rows."""
    point_set = PointSet([Point(1.5, -2), Point(0, 3)])
    assert point_set.to_rows() == [['x', 'y'], [1.5, -2], [0, 3]]
