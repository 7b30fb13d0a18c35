"""
File: point_set.py
Description: Insertion-ordered collection of points placed by the user
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from .point import Point


class PointSet:
    """
    Ordered set of points. Identical (x, y) pairs are rejected on insert.

    Attributes:
        points (list): Points in the order they were added
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: List[Point] = []
        self.logger = logging.getLogger(__name__)
        for point in points:
            self._append_unique(point)

    def _append_unique(self, point: Point) -> bool:
        if point in self._points:
            return False
        self._points.append(point)
        return True

    def add(self, point: Point) -> bool:
        """Append a point.

        Args:
            point: Point to add

        Returns:
            bool: True if the point was added, False if it was already present
        """
        added = self._append_unique(point)
        if added:
            self.logger.info(
                f"Added point {len(self._points)}: ({point.x}, {point.y})")
        else:
            self.logger.debug(
                f"Ignored duplicate point ({point.x}, {point.y})")
        return added

    def clear(self):
        """Remove all points."""
        self._points = []
        self.logger.info("Points cleared")

    def replace(self, points: Iterable[Point]):
        """Replace the contents with a new sequence, dropping duplicates."""
        self._points = []
        for point in points:
            self._append_unique(point)
        self.logger.info(f"Loaded {len(self._points)} points")

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def as_tuples(self) -> List[Tuple[float, float]]:
        return [point.as_tuple() for point in self._points]

    def to_rows(self) -> List[List[float]]:
        """Rows for CSV export, header first."""
        return [['x', 'y']] + [[point.x, point.y] for point in self._points]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __contains__(self, point) -> bool:
        return point in self._points
