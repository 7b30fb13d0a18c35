"""
File: tests/conftest.py
"""

import os
import sys
from pathlib import Path

import pytest

# Run Qt without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import matplotlib
matplotlib.use('QtAgg')

from PyQt6.QtWidgets import QApplication

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from scatterplay.models.point import Point
from scatterplay.utils.config import Config
from scatterplay.utils.presets import PresetLibrary


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication(sys.argv)
    yield app


@pytest.fixture
def test_config(tmp_path):
    """Create a config stored in a temporary directory."""
    return Config(config_dir=tmp_path / "config")


@pytest.fixture
def presets(test_config):
    """Default presets written to the temporary config directory."""
    return PresetLibrary(test_config.presets_path)


@pytest.fixture
def make_points():
    """Build a list of points from (x, y) pairs."""
    def _make(*pairs):
        return [Point(x, y) for x, y in pairs]
    return _make
