"""
File: viewport.py
Description: Mapping between the square plot viewport and data coordinates
"""

import math
from typing import Iterable, Tuple

from .point import DOMAIN_MAX, DOMAIN_MIN, Point

DOMAIN_SPAN = DOMAIN_MAX - DOMAIN_MIN

# Decimal places kept for a clicked coordinate
COORDINATE_DECIMALS = 2


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def to_data(rel_x: float, rel_y: float) -> Tuple[float, float]:
    """Convert a click position to data coordinates.

    Args:
        rel_x: Horizontal position from the left edge, 0 to 1
        rel_y: Vertical position from the top edge, 0 to 1

    Returns:
        Tuple of (x, y) rounded to two decimals
    """
    rel_x = _clamp_unit(rel_x)
    rel_y = _clamp_unit(rel_y)
    x = round(rel_x * DOMAIN_SPAN + DOMAIN_MIN, COORDINATE_DECIMALS)
    y = round(-rel_y * DOMAIN_SPAN + DOMAIN_MAX, COORDINATE_DECIMALS)
    # Avoid -0.0 showing up in the points list
    return x + 0.0, y + 0.0


def to_relative(x: float, y: float) -> Tuple[float, float]:
    """Inverse of to_data: position from the top left corner, 0 to 1."""
    return (x - DOMAIN_MIN) / DOMAIN_SPAN, (DOMAIN_MAX - y) / DOMAIN_SPAN


def to_pixels(x: float, y: float, width: float,
              height: float) -> Tuple[float, float]:
    """Project data coordinates into a viewport of the given size."""
    rel_x, rel_y = to_relative(x, y)
    return rel_x * width, rel_y * height


def hits_point(rel_x: float, rel_y: float, points: Iterable[Point],
               width: float, height: float, radius: float) -> bool:
    """Check whether a click lands on the marker of an existing point.

    Args:
        rel_x: Horizontal click position, 0 to 1
        rel_y: Vertical click position from the top, 0 to 1
        points: Points currently on the plot
        width: Viewport width in pixels
        height: Viewport height in pixels
        radius: Marker radius in pixels
    """
    click_x = rel_x * width
    click_y = rel_y * height
    for point in points:
        px, py = to_pixels(point.x, point.y, width, height)
        if math.hypot(px - click_x, py - click_y) <= radius:
            return True
    return False


def regression_segment(slope: float, intercept: float
                       ) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Endpoints of the regression line across the full x domain."""
    return ((DOMAIN_MIN, slope * DOMAIN_MIN + intercept),
            (DOMAIN_MAX, slope * DOMAIN_MAX + intercept))
