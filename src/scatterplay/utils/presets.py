"""
File: presets.py
Description: Named teaching point sets stored in a YAML file
"""

import os
import logging
from typing import Dict, List

import yaml

from ..models.point import Point

DEFAULT_PRESETS = [
    {
        'name': "Perfect positive",
        'points': [[-6, -6], [-2, -2], [0, 0], [3, 3], [7, 7]],
    },
    {
        'name': "Perfect negative",
        'points': [[-6, 6], [-2, 2], [0, 0], [3, -3], [7, -7]],
    },
    {
        'name': "Constant y",
        'points': [[-5, 5], [0, 5], [5, 5]],
    },
    {
        'name': "Vertical x",
        'points': [[3, 1], [3, 4], [3, 9]],
    },
    {
        'name': "Noisy positive",
        'points': [[-8, -5.5], [-5, -4], [-2, -2.5], [0, 1],
                   [2, 0.5], [4, 3.5], [7, 4]],
    },
]


class PresetLibrary:
    """
    Loads named point sets from YAML.

    The file holds a top-level ``presets`` list; each entry has a ``name``
    and a ``points`` list of ``[x, y]`` pairs.
    """

    def __init__(self, presets_path):
        self.logger = logging.getLogger(__name__)
        self.presets_path = str(presets_path)
        self.presets = self._load_presets()

    def _write_defaults(self):
        directory = os.path.dirname(self.presets_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
        with open(self.presets_path, 'w') as f:
            yaml.dump({'presets': DEFAULT_PRESETS}, f,
                      default_flow_style=False, sort_keys=False)
        self.logger.info(f"Created default presets at {self.presets_path}")

    def _load_presets(self) -> Dict[str, List[Point]]:
        """
        Load presets from the YAML file, creating it with defaults if missing.
        """
        try:
            if not os.path.exists(self.presets_path):
                self._write_defaults()

            with open(self.presets_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Error loading presets: {e}")
            return {}

        entries = data.get('presets', []) if isinstance(data, dict) else []
        if not isinstance(entries, list):
            self.logger.warning(
                f"Ignoring presets in {self.presets_path}: expected a list")
            return {}

        presets = {}
        for entry in entries:
            if not isinstance(entry, dict) or 'name' not in entry:
                self.logger.warning(f"Skipping malformed preset: {entry}")
                continue
            raw_points = entry.get('points') or []
            if not isinstance(raw_points, list):
                self.logger.warning(
                    f"Skipping preset '{entry['name']}': points must be a list")
                continue
            presets[str(entry['name'])] = self._parse_points(
                entry['name'], raw_points)
        return presets

    def _parse_points(self, name, raw_points) -> List[Point]:
        points = []
        for raw in raw_points:
            try:
                x, y = raw
                points.append(Point(float(x), float(y)))
            except (TypeError, ValueError) as e:
                self.logger.warning(
                    f"Skipping point {raw} in preset '{name}': {e}")
        return points

    def names(self) -> List[str]:
        return list(self.presets)

    def get(self, name: str) -> List[Point]:
        """
        Get the points of a preset.

        Args:
            name: Preset name

        Returns:
            List of points, empty if the preset is not found
        """
        if name not in self.presets:
            self.logger.warning(f"No preset named: {name}")
            return []
        return list(self.presets[name])

    def reload(self):
        """Reload presets from file."""
        self.logger.info("Reloading presets...")
        self.presets = self._load_presets()
