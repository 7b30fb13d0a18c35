"""
File: test_scatter_canvas.py
Description: Tests for the scatter plot canvas
"""

from unittest.mock import Mock

import pytest

from scatterplay.models.point import Point
from scatterplay.models.statistics import RegressionLine
from scatterplay.ui.widgets.scatter_canvas import ScatterCanvas


@pytest.fixture
def canvas(qapp, qtbot):
    """Create canvas widget instance."""
    widget = ScatterCanvas(canvas_size=600, point_radius=6)
    qtbot.addWidget(widget)
    return widget


def click_event(canvas, rel_x, rel_y, button=1, inaxes=True):
    """Build a matplotlib-like press event at a relative position."""
    bbox = canvas.ax.bbox
    return Mock(
        button=button,
        inaxes=canvas.ax if inaxes else None,
        x=bbox.x0 + rel_x * bbox.width,
        y=bbox.y1 - rel_y * bbox.height,
    )


def test_initialization(canvas):
    """Test widget initialization."""
    assert canvas.canvas_size == 600
    assert canvas.point_radius == 6
    assert canvas.points == ()
    assert canvas.ax.get_xlim() == (-10, 10)
    assert canvas.ax.get_ylim() == (-10, 10)
    assert not canvas.regression_artist.get_visible()


def test_click_emits_data_coordinates(canvas, qtbot):
    """Test that a click emits the mapped coordinates."""
    with qtbot.waitSignal(canvas.point_clicked, timeout=1000) as blocker:
        canvas.on_click(click_event(canvas, 0.75, 0.25))

    x, y = blocker.args
    assert x == pytest.approx(5.0)
    assert y == pytest.approx(5.0)


def test_click_on_existing_point_is_ignored(canvas, qtbot):
    """Test that clicking a marker does not place a new point."""
    canvas.set_points([Point(5, 5)])
    with qtbot.assertNotEmitted(canvas.point_clicked):
        canvas.on_click(click_event(canvas, 0.75 + 2 / 600, 0.25))


@pytest.mark.parametrize("button,inaxes", [(3, True), (1, False)])
def test_other_clicks_are_ignored(canvas, qtbot, button, inaxes):
    """Test that right clicks and clicks outside the axes are ignored."""
    with qtbot.assertNotEmitted(canvas.point_clicked):
        canvas.on_click(click_event(canvas, 0.5, 0.5, button, inaxes))


def test_set_points(canvas):
    """Test showing points."""
    canvas.set_points([Point(1, 2), Point(-3, 4)])
    offsets = canvas.scatter.get_offsets()
    assert offsets.tolist() == [[1, 2], [-3, 4]]

    canvas.set_points([])
    assert len(canvas.scatter.get_offsets()) == 0


def test_regression_line(canvas):
    """Test drawing and hiding the regression line."""
    canvas.set_regression_line(RegressionLine(slope=0.5, intercept=1))
    xs, ys = canvas.regression_artist.get_data()
    assert list(xs) == [-10, 10]
    assert list(ys) == [-4, 6]
    assert canvas.regression_artist.get_visible()

    canvas.set_regression_line(None)
    assert not canvas.regression_artist.get_visible()


def test_update_plot(canvas):
    """Test updating points and line together."""
    canvas.update_plot([Point(0, 0), Point(1, 1), Point(2, 2)],
                       RegressionLine(slope=1, intercept=0))
    assert len(canvas.points) == 3
    assert canvas.regression_artist.get_visible()
