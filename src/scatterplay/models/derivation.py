"""
File: derivation.py
Description: Display text for the correlation and regression derivations
"""

from typing import List, Optional, Sequence

from .point import Point
from .statistics import (
    COEFFICIENT_DECIMALS, MIN_POINTS, SUM_DECIMALS,
    CorrelationResult, RegressionResult, sum_stats
)

NOT_AVAILABLE = "N/A"
NEED_MORE_POINTS = f"N/A (need at least {MIN_POINTS} points)"

CORRELATION_NUMERATOR = "n(∑xy) - (∑x)(∑y)"
CORRELATION_DENOMINATOR = "√[n(∑x²) - (∑x)²][n(∑y²) - (∑y)²]"
SLOPE_DENOMINATOR = "n(∑x²) - (∑x)²"


def format_coefficient(coefficient: Optional[float]) -> str:
    if coefficient is None:
        return NOT_AVAILABLE
    return f"{coefficient:.{COEFFICIENT_DECIMALS}f}"


def format_coordinate(value: float) -> str:
    """Shortest decimal form of a clicked coordinate, e.g. 3, 2.5, -1.25."""
    text = f"{value:.2f}".rstrip('0').rstrip('.')
    return "0" if text == "-0" else text


def point_lines(points: Sequence[Point]) -> List[str]:
    return [
        f"Point {index}: ({format_coordinate(point.x)}, "
        f"{format_coordinate(point.y)})"
        for index, point in enumerate(points, start=1)
    ]


def _sum_lines(points: Sequence[Point], empty: str,
               include_y_square: bool) -> List[str]:
    """Running sums, shown as soon as a single point exists."""
    values = sum_stats(points).formatted() if points else {}
    rows = [
        ("∑x", 'sum_x'),
        ("∑y", 'sum_y'),
        ("∑xy", 'sum_xy'),
        ("∑x²", 'sum_x_square'),
    ]
    if include_y_square:
        rows.append(("∑y²", 'sum_y_square'))

    lines = [f"n = {len(points)}"]
    for label, key in rows:
        lines.append(f"{label} = {values.get(key, empty)}")
    return lines


def correlation_lines(points: Sequence[Point],
                      result: CorrelationResult) -> List[str]:
    """
    Step-by-step derivation of Pearson's r.

    Sums are listed for any number of points. The numerator, denominator and
    final result are only shown when the computation produced steps; the
    degenerate cases fall back to the N/A text.
    """
    empty_sum = f"{0:.{SUM_DECIMALS}f}"
    lines = [
        "Pearson's Correlation Coefficient (r):",
        f"r = [{CORRELATION_NUMERATOR}] / {CORRELATION_DENOMINATOR}",
        "",
    ]
    lines.extend(_sum_lines(points, empty_sum, include_y_square=True))

    steps = result.steps.formatted() if result.steps else None

    lines.extend(["", "Numerator:", f"    {CORRELATION_NUMERATOR}"])
    if steps:
        lines.append(f"    = ({steps['n']} × {steps['sum_xy']}) - "
                     f"({steps['sum_x']} × {steps['sum_y']})")
        lines.append(f"    = {steps['numerator']}")
    else:
        lines.append(f"    = {NOT_AVAILABLE}")
        lines.append(f"    = {NOT_AVAILABLE}")

    lines.extend(["", "Denominator:", f"    {CORRELATION_DENOMINATOR}"])
    if steps:
        lines.append(f"    = √[({steps['n']} × {steps['sum_x_square']}) - "
                     f"({steps['sum_x']})²]")
        lines.append(f"        × √[({steps['n']} × {steps['sum_y_square']}) - "
                     f"({steps['sum_y']})²]")
        lines.append(f"    = {steps['denominator']}")
    else:
        lines.append(f"    = {NEED_MORE_POINTS}")

    lines.extend(["", "Final Result:"])
    if steps:
        lines.append(f"    r = {steps['numerator']} ÷ {steps['denominator']} = "
                     f"{format_coefficient(result.coefficient)}")
    else:
        lines.append(f"    r = {NEED_MORE_POINTS}")
    return lines


def regression_lines(points: Sequence[Point],
                     result: RegressionResult) -> List[str]:
    """Step-by-step derivation of the least-squares line y = mx + b."""
    lines = [
        "Linear Regression Equation: y = mx + b",
        "",
        "Slope (m):",
        f"m = [{CORRELATION_NUMERATOR}] / [{SLOPE_DENOMINATOR}]",
        "Intercept (b):",
        "b = (∑y - m∑x) / n",
        "",
    ]
    lines.extend(_sum_lines(points, NOT_AVAILABLE, include_y_square=False))

    steps = result.steps.formatted() if result.steps else None

    lines.extend(["", "Slope Calculation:"])
    if steps:
        lines.append(f"    m = {steps['slope_numerator']} ÷ "
                     f"{steps['slope_denominator']} = {steps['slope']}")
    else:
        lines.append(f"    m = {NEED_MORE_POINTS}")

    lines.extend(["", "Intercept Calculation:"])
    if steps:
        lines.append(f"    b = ({steps['sum_y']} - {steps['slope']} × "
                     f"{steps['sum_x']}) ÷ {steps['n']} = {steps['intercept']}")
    else:
        lines.append(f"    b = {NEED_MORE_POINTS}")

    lines.extend(["", "Final Equation:"])
    if steps:
        lines.append(f"    y = {steps['slope']}x + {steps['intercept']}")
    else:
        lines.append("    y = mx + b")
    return lines
