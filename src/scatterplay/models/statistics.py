"""
File: statistics.py
Description: Pearson correlation and least-squares regression with the
intermediate sums shown in the derivation panels.

Both compute functions accept any sequence of Point objects or (x, y) pairs
and always return a result. Degenerate inputs produce the sentinel results
documented on each function instead of raising.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from .point import Point

# Minimum number of points before any result is shown
MIN_POINTS = 3

# Tolerance for the constant-y and near-zero denominator guards
VARIATION_TOLERANCE = 0.0001

SUM_DECIMALS = 2
COEFFICIENT_DECIMALS = 3

PointLike = Union[Point, Tuple[float, float]]


@dataclass(frozen=True)
class SumStats:
    """Sums accumulated in a single pass over the points."""
    n: int
    sum_x: float
    sum_y: float
    sum_xy: float
    sum_x_square: float
    sum_y_square: float

    def formatted(self) -> Dict[str, str]:
        return {
            'n': str(self.n),
            'sum_x': _fixed(self.sum_x, SUM_DECIMALS),
            'sum_y': _fixed(self.sum_y, SUM_DECIMALS),
            'sum_xy': _fixed(self.sum_xy, SUM_DECIMALS),
            'sum_x_square': _fixed(self.sum_x_square, SUM_DECIMALS),
            'sum_y_square': _fixed(self.sum_y_square, SUM_DECIMALS),
        }


@dataclass(frozen=True)
class CorrelationSteps:
    """Intermediate values of the Pearson coefficient derivation."""
    sums: SumStats
    numerator: float
    denominator: float

    def formatted(self) -> Dict[str, str]:
        values = self.sums.formatted()
        values['numerator'] = _fixed(self.numerator, SUM_DECIMALS)
        values['denominator'] = _fixed(self.denominator, SUM_DECIMALS)
        return values


@dataclass(frozen=True)
class CorrelationResult:
    coefficient: Optional[float]
    steps: Optional[CorrelationSteps]


@dataclass(frozen=True)
class RegressionLine:
    slope: float
    intercept: float

    def y_at(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class RegressionSteps:
    """Intermediate values of the least-squares slope and intercept."""
    sums: SumStats
    slope: float
    intercept: float
    slope_numerator: float
    slope_denominator: float

    def formatted(self) -> Dict[str, str]:
        values = self.sums.formatted()
        # Σy² is not part of the regression derivation
        del values['sum_y_square']
        values['slope'] = _fixed(self.slope, COEFFICIENT_DECIMALS)
        values['intercept'] = _fixed(self.intercept, COEFFICIENT_DECIMALS)
        values['slope_numerator'] = _fixed(self.slope_numerator, SUM_DECIMALS)
        values['slope_denominator'] = _fixed(
            self.slope_denominator, SUM_DECIMALS)
        return values


@dataclass(frozen=True)
class RegressionResult:
    line: Optional[RegressionLine]
    steps: Optional[RegressionSteps]


@dataclass(frozen=True)
class Analysis:
    """Correlation and regression computed from the same point snapshot."""
    correlation: CorrelationResult
    regression: RegressionResult


def _fixed(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def _coordinates(point: PointLike) -> Tuple[float, float]:
    if isinstance(point, Point):
        return point.x, point.y
    x, y = point
    return x, y


def sum_stats(points: Iterable[PointLike]) -> SumStats:
    """Accumulate n, Σx, Σy, Σxy, Σx² and Σy² in a single pass."""
    n = 0
    sum_x = sum_y = sum_xy = sum_x_square = sum_y_square = 0.0
    for point in points:
        x, y = _coordinates(point)
        n += 1
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_x_square += x * x
        sum_y_square += y * y
    return SumStats(n, sum_x, sum_y, sum_xy, sum_x_square, sum_y_square)


def compute_correlation(points: Sequence[PointLike]) -> CorrelationResult:
    """
    Compute Pearson's correlation coefficient.

    Args:
        points: Ordered points

    Returns:
        CorrelationResult: coefficient None with fewer than 3 points;
        coefficient 0 without steps when y does not vary or the denominator
        is within tolerance of zero
    """
    if len(points) < MIN_POINTS:
        return CorrelationResult(coefficient=None, steps=None)

    sums = sum_stats(points)
    n = sums.n

    y_mean = sums.sum_y / n
    has_y_variation = any(
        abs(_coordinates(point)[1] - y_mean) > VARIATION_TOLERANCE
        for point in points
    )
    if not has_y_variation:
        return CorrelationResult(coefficient=0, steps=None)

    numerator = n * sums.sum_xy - sums.sum_x * sums.sum_y
    radicand = ((n * sums.sum_x_square - sums.sum_x * sums.sum_x)
                * (n * sums.sum_y_square - sums.sum_y * sums.sum_y))
    # Rounding can leave a tiny negative radicand; numpy yields NaN there
    with np.errstate(invalid='ignore'):
        denominator = float(np.sqrt(radicand))

    if abs(denominator) < VARIATION_TOLERANCE:
        return CorrelationResult(coefficient=0, steps=None)

    steps = CorrelationSteps(sums=sums, numerator=numerator,
                             denominator=denominator)
    return CorrelationResult(coefficient=numerator / denominator, steps=steps)


def compute_regression(points: Sequence[PointLike]) -> RegressionResult:
    """
    Fit y = slope * x + intercept by ordinary least squares.

    Args:
        points: Ordered points

    Returns:
        RegressionResult: line None with fewer than 3 points or when every x
        is identical (undefined slope)
    """
    if len(points) < MIN_POINTS:
        return RegressionResult(line=None, steps=None)

    sums = sum_stats(points)
    n = sums.n

    denominator = n * sums.sum_x_square - sums.sum_x * sums.sum_x
    if denominator == 0:
        return RegressionResult(line=None, steps=None)

    numerator = n * sums.sum_xy - sums.sum_x * sums.sum_y
    slope = numerator / denominator
    intercept = (sums.sum_y - slope * sums.sum_x) / n

    steps = RegressionSteps(
        sums=sums,
        slope=slope,
        intercept=intercept,
        slope_numerator=numerator,
        slope_denominator=denominator,
    )
    return RegressionResult(line=RegressionLine(slope, intercept), steps=steps)


def analyze(points: Sequence[PointLike]) -> Analysis:
    """Run both computations on one snapshot of the points."""
    snapshot = tuple(points)
    return Analysis(
        correlation=compute_correlation(snapshot),
        regression=compute_regression(snapshot),
    )
