"""
File: src/scatterplay/utils/config.py
"""

import json
from pathlib import Path
import sys
import logging

from .logger import LEVELS

CONFIG_FILE = "config.json"

DEFAULTS = {
    'log_level': "INFO",
    'log_to_file': False,
    'canvas_size': 600,
    'point_radius': 6,
    'presets_file': "presets.yaml",
}


class Config:
    """
    Application settings persisted as JSON.

    Attributes:
        log_level (str): Logging level name
        log_to_file (bool): Also write logs to a rotating file
        canvas_size (int): Side of the square plot in pixels
        point_radius (int): Marker radius in pixels, also the click tolerance
        presets_file (str): Preset file name inside the config directory
    """

    def __init__(self, config_dir=None):
        self._config_dir = Path(config_dir) if config_dir is not None else None
        self._log_level = DEFAULTS['log_level']
        self._log_to_file = DEFAULTS['log_to_file']
        self._canvas_size = DEFAULTS['canvas_size']
        self._point_radius = DEFAULTS['point_radius']
        self._presets_file = DEFAULTS['presets_file']
        self.load()

    @property
    def log_level(self) -> str:
        return self._log_level

    @log_level.setter
    def log_level(self, value: str):
        if not isinstance(value, str) or value.upper() not in LEVELS:
            raise ValueError(f"Invalid log level: {value}. "
                             f"Must be one of: {list(LEVELS)}")
        self._log_level = value.upper()

    @property
    def canvas_size(self) -> int:
        return self._canvas_size

    @canvas_size.setter
    def canvas_size(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Canvas size must be a positive integer, got: "
                             f"{value}")
        self._canvas_size = value

    @property
    def point_radius(self) -> int:
        return self._point_radius

    @point_radius.setter
    def point_radius(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"Point radius must be a positive integer, got: "
                             f"{value}")
        self._point_radius = value

    @property
    def log_to_file(self) -> bool:
        return self._log_to_file

    @log_to_file.setter
    def log_to_file(self, value: bool):
        if not isinstance(value, bool):
            raise ValueError(f"log_to_file must be true or false, got: "
                             f"{value!r}")
        self._log_to_file = value

    @property
    def presets_file(self) -> str:
        return self._presets_file

    @presets_file.setter
    def presets_file(self, value: str):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"Presets file must be a non-empty file name, "
                             f"got: {value!r}")
        self._presets_file = value

    def get_app_path(self):
        """Get the application base path."""
        if getattr(sys, 'frozen', False):
            # Running as compiled executable
            return Path(sys.executable).parent / 'Scatterplay'
        else:
            return Path.home() / '.scatterplay'

    def get_config_dir(self):
        """Get the configuration directory path."""
        config_dir = self._config_dir or self.get_app_path() / 'config'

        # Create the directory if it doesn't exist
        if not config_dir.exists():
            try:
                config_dir.mkdir(parents=True, exist_ok=True)
                logging.info(f"Created config directory: {config_dir}")
            except OSError as e:
                logging.error(f"Error creating config directory: {e}")

        return config_dir

    @property
    def config_path(self) -> Path:
        return self.get_config_dir() / CONFIG_FILE

    @property
    def presets_path(self) -> Path:
        return self.get_config_dir() / self.presets_file

    def to_dict(self) -> dict:
        return {
            'log_level': self.log_level,
            'log_to_file': self.log_to_file,
            'canvas_size': self.canvas_size,
            'point_radius': self.point_radius,
            'presets_file': self.presets_file,
        }

    def load(self):
        """Load configuration from file, writing defaults if it is missing."""
        config_path = self.config_path
        if not config_path.exists():
            self.save()
            return

        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logging.error(f"Error loading config: {e}")
            return

        if not isinstance(data, dict):
            logging.error(f"Ignoring config file {config_path}: "
                          f"expected an object")
            return

        for key, value in data.items():
            if key not in DEFAULTS:
                logging.warning(f"Unknown config key: {key}")
                continue
            try:
                setattr(self, key, value)
            except ValueError as e:
                logging.error(f"Invalid config value for {key}: {e}")

    def save(self):
        """Save configuration to file."""
        try:
            config_path = self.config_path
            with open(config_path, 'w') as f:
                json.dump(self.to_dict(), f, indent=4)
            logging.info(f"Saved configuration to {config_path}")
        except OSError as e:
            logging.error(f"Error saving config: {e}")
