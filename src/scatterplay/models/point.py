"""
File: point.py
Description: Defines the Point class placed on the scatter plot.
"""

from dataclasses import dataclass
import math

DOMAIN_MIN = -10.0
DOMAIN_MAX = 10.0


@dataclass(frozen=True)
class Point:
    """
    A single point on the scatter plot.

    Attributes:
        x: Horizontal coordinate in [-10, 10]
        y: Vertical coordinate in [-10, 10]
    """
    x: float
    y: float

    def __post_init__(self):
        """Validate coordinates after initialization."""
        self._validate_coordinate('x', self.x)
        self._validate_coordinate('y', self.y)

    @staticmethod
    def _validate_coordinate(name: str, value):
        """Ensure a coordinate is a finite number inside the plot domain."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Coordinate {name} must be a number, got: "
                             f"{type(value)}")
        if not math.isfinite(value):
            raise ValueError(f"Coordinate {name} must be finite, got: {value}")
        if not DOMAIN_MIN <= value <= DOMAIN_MAX:
            raise ValueError(f"Coordinate {name} out of range: {value}. "
                             f"Must be within [{DOMAIN_MIN}, {DOMAIN_MAX}]")

    def as_tuple(self):
        return (self.x, self.y)
