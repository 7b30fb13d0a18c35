"""
File: main_window.py
Description: Main application window implementation
"""

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel,
    QPushButton, QListWidget, QFileDialog
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
import csv
import logging
from typing import Optional

from ..models.point import Point
from ..models.point_set import PointSet
from ..models.statistics import analyze
from ..models import derivation
from ..utils.config import Config
from ..utils.presets import PresetLibrary
from .widgets.scatter_canvas import ScatterCanvas
from .widgets.derivation_panel import DerivationPanel


class MainWindow(QMainWindow):
    """
    Main application window.

    Attributes:
        point_set: Points placed by the user
        analysis: Correlation and regression for the current points
        canvas: Clickable scatter plot
        correlation_panel: Pearson derivation
        regression_panel: Least-squares derivation
    """

    def __init__(self, config: Optional[Config] = None,
                 presets: Optional[PresetLibrary] = None):
        """Initialize the main window."""
        super().__init__()

        self.logger = logging.getLogger(__name__)

        self.config = config if config is not None else Config()
        self.presets = presets if presets is not None else \
            PresetLibrary(self.config.presets_path)

        self.point_set = PointSet()
        self.analysis = analyze(self.point_set)

        self.setup_ui()
        self.setup_connections()
        self.refresh()

        self.logger.info("Application started")

    def setup_ui(self):
        """Setup user interface."""
        self.setWindowTitle("Correlation & Regression Explorer")

        self.setup_menu_bar()
        self.setup_status_bar()

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(20, 10, 20, 10)

        title = QLabel("Correlation & Regression Explorer")
        title_font = QFont()
        title_font.setPointSize(16)
        title_font.setBold(True)
        title.setFont(title_font)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(title)

        self.correlation_label = QLabel()
        header_font = QFont()
        header_font.setPointSize(12)
        self.correlation_label.setFont(header_font)
        self.correlation_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_layout.addWidget(self.correlation_label)

        content_layout = QHBoxLayout()
        self.canvas = ScatterCanvas(
            canvas_size=self.config.canvas_size,
            point_radius=self.config.point_radius
        )
        content_layout.addWidget(self.canvas)

        self.setup_points_section(content_layout)

        self.correlation_panel = DerivationPanel("Correlation Calculation")
        self.regression_panel = DerivationPanel(
            "Linear Regression Calculation")
        content_layout.addWidget(self.correlation_panel)
        content_layout.addWidget(self.regression_panel)
        main_layout.addLayout(content_layout)

        self.reset_button = QPushButton("Reset Points")
        self.reset_button.setStyleSheet(
            "QPushButton { background-color: #ef4444; color: white; "
            "padding: 6px 12px; border-radius: 4px; }"
            "QPushButton:hover { background-color: #dc2626; }")
        reset_row = QHBoxLayout()
        reset_row.addWidget(self.reset_button)
        reset_row.addStretch()
        main_layout.addLayout(reset_row)

        instructions = QLabel(
            "Click anywhere on the grid to add points.\n"
            "Correlation coefficient and regression line will appear after "
            "adding 3 or more points.")
        instructions.setStyleSheet("color: #4b5563;")
        main_layout.addWidget(instructions)

    def setup_points_section(self, layout):
        """Setup the list of placed points."""
        points_layout = QVBoxLayout()
        points_title = QLabel("Points")
        points_title.setStyleSheet("font-weight: bold;")
        self.points_list = QListWidget()
        self.points_list.setFixedWidth(200)
        points_layout.addWidget(points_title)
        points_layout.addWidget(self.points_list)
        layout.addLayout(points_layout)

    def setup_menu_bar(self):
        """Setup application menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("File")
        export_action = file_menu.addAction("Export Points...")
        export_action.triggered.connect(self.export_points)
        file_menu.addSeparator()
        exit_action = file_menu.addAction("Exit")
        exit_action.triggered.connect(self.close)

        # Presets menu
        self.presets_menu = menubar.addMenu("Presets")
        self.populate_presets_menu()

    def populate_presets_menu(self):
        """Rebuild the presets menu from the preset library."""
        self.presets_menu.clear()
        self.preset_actions = []
        for name in self.presets.names():
            action = self.presets_menu.addAction(name)
            action.triggered.connect(
                lambda checked=False, preset=name: self.load_preset(preset))
            self.preset_actions.append(action)

        self.presets_menu.addSeparator()
        self.reload_presets_action = self.presets_menu.addAction("Reload")
        self.reload_presets_action.triggered.connect(self.reload_presets)

    def reload_presets(self):
        """Re-read the presets file and rebuild the menu."""
        self.presets.reload()
        self.populate_presets_menu()
        self.statusBar().showMessage(
            f"Loaded {len(self.presets.names())} presets")

    def setup_status_bar(self):
        """Setup status bar."""
        self.statusBar().showMessage("Ready")

    def setup_connections(self):
        """Set up signal-slot connections."""
        self.canvas.point_clicked.connect(self.add_point)
        self.reset_button.clicked.connect(self.reset_points)

    def add_point(self, x: float, y: float) -> bool:
        """Add a clicked point and recompute if it was new."""
        try:
            point = Point(float(x), float(y))
        except (TypeError, ValueError) as e:
            self.logger.error(f"Rejected point: {e}")
            return False

        if not self.point_set.add(point):
            self.statusBar().showMessage(
                f"Point ({derivation.format_coordinate(x)}, "
                f"{derivation.format_coordinate(y)}) already placed")
            return False

        self.refresh()
        return True

    def reset_points(self):
        """Remove all points."""
        self.point_set.clear()
        self.refresh()
        self.statusBar().showMessage("Points cleared")

    def load_preset(self, name: str):
        """Replace the current points with a preset."""
        points = self.presets.get(name)
        self.point_set.replace(points)
        self.refresh()
        self.statusBar().showMessage(f"Loaded preset: {name}")

    def refresh(self):
        """Recompute both results from the current points and redraw."""
        points = self.point_set.points
        self.analysis = analyze(points)
        correlation = self.analysis.correlation
        regression = self.analysis.regression
        self.logger.debug(
            f"Recomputed for {len(points)} points: "
            f"r={correlation.coefficient}, line={regression.line}")

        self.correlation_label.setText(
            "Correlation: "
            f"{derivation.format_coefficient(correlation.coefficient)}")

        self.points_list.clear()
        self.points_list.addItems(derivation.point_lines(points))

        self.correlation_panel.set_lines(
            derivation.correlation_lines(points, correlation))
        self.regression_panel.set_lines(
            derivation.regression_lines(points, regression))

        self.canvas.update_plot(points, regression.line)

    def save_points(self, filename: str) -> bool:
        """Write the current points to a CSV file."""
        try:
            with open(filename, 'w', newline='') as f:
                writer = csv.writer(f)
                writer.writerows(self.point_set.to_rows())
            self.logger.info(f"Points exported to {filename}")
            return True
        except OSError as e:
            self.logger.error(f"Error exporting points: {e}")
            return False

    def export_points(self):
        """Ask for a file name and export the points as CSV."""
        filename, _ = QFileDialog.getSaveFileName(
            self,
            "Export Points",
            "points.csv",
            "CSV Files (*.csv)"
        )
        if filename:
            self.save_points(filename)
