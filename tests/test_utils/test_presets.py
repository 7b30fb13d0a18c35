"""
File: test_presets.py
Description: Tests for the YAML preset library
"""

import yaml

from scatterplay.models.point import Point
from scatterplay.utils.presets import PresetLibrary, DEFAULT_PRESETS


def test_defaults_written_when_missing(tmp_path):
    """Test that a missing presets file is created with defaults."""
    path = tmp_path / "config" / "presets.yaml"
    library = PresetLibrary(path)

    assert path.exists()
    assert library.names() == [entry['name'] for entry in DEFAULT_PRESETS]
    data = yaml.safe_load(path.read_text())
    assert len(data['presets']) == len(DEFAULT_PRESETS)


def test_get_preset(tmp_path):
    """Test getting the points of a preset."""
    library = PresetLibrary(tmp_path / "presets.yaml")
    points = library.get("Vertical x")
    assert points == [Point(3, 1), Point(3, 4), Point(3, 9)]


def test_get_returns_copy(tmp_path):
    """Test that callers cannot change the stored preset."""
    library = PresetLibrary(tmp_path / "presets.yaml")
    library.get("Constant y").clear()
    assert len(library.get("Constant y")) == 3


def test_unknown_preset(tmp_path):
    """Test that an unknown name returns no points."""
    library = PresetLibrary(tmp_path / "presets.yaml")
    assert library.get("Missing") == []


def test_custom_presets(tmp_path):
    """Test loading presets from an existing file."""
    path = tmp_path / "presets.yaml"
    path.write_text(
        "presets:\n"
        "  - name: Triangle\n"
        "    points:\n"
        "      - [0, 0]\n"
        "      - [1, 2.5]\n"
        "      - [2, 0]\n"
    )
    library = PresetLibrary(path)
    assert library.names() == ["Triangle"]
    assert library.get("Triangle") == [Point(0, 0), Point(1, 2.5), Point(2, 0)]


def test_invalid_entries_are_skipped(tmp_path):
    """Test that malformed presets and points are skipped."""
    path = tmp_path / "presets.yaml"
    path.write_text(
        "presets:\n"
        "  - just a string\n"
        "  - name: Mixed\n"
        "    points:\n"
        "      - [0, 0]\n"
        "      - [50, 1]\n"
        "      - [1]\n"
        "      - [a, b]\n"
        "      - [2, 2]\n"
    )
    library = PresetLibrary(path)
    assert library.names() == ["Mixed"]
    assert library.get("Mixed") == [Point(0, 0), Point(2, 2)]


def test_presets_not_a_list(tmp_path):
    """Test that a non-list presets value yields no presets."""
    path = tmp_path / "presets.yaml"
    path.write_text("presets: 5\n")
    library = PresetLibrary(path)
    assert library.names() == []


def test_points_not_a_list(tmp_path):
    """Test that a preset whose points are not a list is skipped."""
    path = tmp_path / "presets.yaml"
    path.write_text(
        "presets:\n"
        "  - name: Bad\n"
        "    points: 5\n"
        "  - name: Good\n"
        "    points: [[1, 1], [2, 2]]\n"
    )
    library = PresetLibrary(path)
    assert library.names() == ["Good"]
    assert library.get("Good") == [Point(1, 1), Point(2, 2)]


def test_top_level_list_is_ignored(tmp_path):
    """Test that a file without the presets mapping yields no presets."""
    path = tmp_path / "presets.yaml"
    path.write_text("- name: Bad\n  points: 5\n")
    library = PresetLibrary(path)
    assert library.names() == []


def test_invalid_yaml(tmp_path):
    """Test that an unreadable file yields no presets."""
    path = tmp_path / "presets.yaml"
    path.write_text("presets: [unclosed")
    library = PresetLibrary(path)
    assert library.names() == []


def test_reload(tmp_path):
    """Test reloading after the file changes."""
    path = tmp_path / "presets.yaml"
    library = PresetLibrary(path)
    path.write_text("presets:\n  - name: Only\n    points: [[1, 1]]\n")
    library.reload()
    assert library.names() == ["Only"]
