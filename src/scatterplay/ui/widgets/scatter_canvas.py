"""
File: scatter_canvas.py
Description: Clickable scatter plot canvas with the regression line
"""

from PyQt6.QtWidgets import QWidget, QVBoxLayout
from PyQt6.QtCore import pyqtSignal
import numpy as np
import logging
from typing import Optional, Sequence
import matplotlib
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg

from ...models.point import DOMAIN_MAX, DOMAIN_MIN, Point
from ...models.statistics import RegressionLine
from ...models import viewport

matplotlib.use('QtAgg')

# Left mouse button in matplotlib events
LEFT_BUTTON = 1


class ScatterCanvas(QWidget):
    """
    Square plot over [-10, 10] x [-10, 10] where clicks place points.

    Signals:
        point_clicked(float, float): data coordinates of a click on empty space

    Attributes:
        canvas_size (int): Side of the plot area in pixels
        point_radius (int): Marker radius in pixels
    """

    point_clicked = pyqtSignal(float, float)

    def __init__(self, canvas_size: int = 600, point_radius: int = 6):
        """Initialize canvas widget."""
        super().__init__()

        self.logger = logging.getLogger(__name__)
        self.canvas_size = canvas_size
        self.point_radius = point_radius
        self.points = ()

        # Create matplotlib figure with the axes filling the whole canvas
        dpi = 100
        self.figure = Figure(figsize=(canvas_size / dpi, canvas_size / dpi),
                             dpi=dpi)
        self.canvas = FigureCanvasQTAgg(self.figure)
        self.canvas.setFixedSize(canvas_size, canvas_size)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self._setup_axes()

        self.scatter = self.ax.scatter(
            [], [], s=(2 * point_radius) ** 2 / 2, color='tab:blue', zorder=3)
        self.regression_artist, = self.ax.plot(
            [], [], color='red', linewidth=2, zorder=2)
        self.regression_artist.set_visible(False)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.canvas)
        self.setLayout(layout)

        self.canvas.mpl_connect('button_press_event', self.on_click)

    def _setup_axes(self):
        """Fixed domain, unit grid and labelled axes through the origin."""
        self.ax.set_xlim(DOMAIN_MIN, DOMAIN_MAX)
        self.ax.set_ylim(DOMAIN_MIN, DOMAIN_MAX)
        self.ax.set_autoscalex_on(False)
        self.ax.set_autoscaley_on(False)

        ticks = np.arange(DOMAIN_MIN, DOMAIN_MAX + 1, 1)
        self.ax.set_xticks(ticks)
        self.ax.set_yticks(ticks)
        self.ax.grid(True, color='#e5e7eb', linewidth=1)
        self.ax.tick_params(length=0, labelbottom=False, labelleft=False)
        self.ax.axhline(0, color='black', linewidth=1)
        self.ax.axvline(0, color='black', linewidth=1)

        # Label every second unit next to the axes
        for value in range(int(DOMAIN_MIN), int(DOMAIN_MAX) + 1, 2):
            self.ax.annotate(str(value), (value, 0), xytext=(0, -12),
                             textcoords='offset points', ha='center',
                             fontsize='x-small')
            if value != 0:
                self.ax.annotate(str(value), (0, value), xytext=(6, 0),
                                 textcoords='offset points', va='center',
                                 fontsize='x-small')

    def relative_position(self, event):
        """Click position within the axes, 0 to 1 from the top left corner."""
        bbox = self.ax.bbox
        rel_x = (event.x - bbox.x0) / bbox.width
        rel_y = (bbox.y1 - event.y) / bbox.height
        return rel_x, rel_y

    def on_click(self, event):
        """Handle a mouse press on the canvas."""
        if event.button != LEFT_BUTTON or event.inaxes is not self.ax:
            return

        rel_x, rel_y = self.relative_position(event)
        if viewport.hits_point(rel_x, rel_y, self.points,
                               self.canvas_size, self.canvas_size,
                               self.point_radius):
            self.logger.debug("Click on existing point ignored")
            return

        x, y = viewport.to_data(rel_x, rel_y)
        self.point_clicked.emit(x, y)

    def set_points(self, points: Sequence[Point]):
        """Show the given points."""
        self.points = tuple(points)
        if self.points:
            offsets = np.array([point.as_tuple() for point in self.points])
        else:
            offsets = np.empty((0, 2))
        self.scatter.set_offsets(offsets)

    def set_regression_line(self, line: Optional[RegressionLine]):
        """Draw the regression line across the domain, or hide it."""
        if line is None:
            self.regression_artist.set_data([], [])
            self.regression_artist.set_visible(False)
            return

        (x1, y1), (x2, y2) = viewport.regression_segment(
            line.slope, line.intercept)
        self.regression_artist.set_data([x1, x2], [y1, y2])
        self.regression_artist.set_visible(True)

    def update_plot(self, points: Sequence[Point],
                    line: Optional[RegressionLine]):
        """Update points and regression line, then redraw."""
        self.set_points(points)
        self.set_regression_line(line)
        self.canvas.draw_idle()
