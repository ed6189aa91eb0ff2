"""
Shared fixtures for Seating Layout Builder tests.

Provides table footprints, a small populated layout, and layout JSON files.
"""
import sys
import os
import json
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))


# ── Sample layouts ──────────────────────────────────────────────────────

SAMPLE_LAYOUT = {
    'name': 'Main Hall',
    'resources': [
        {'id': 't1', 'name': 'Table 1', 'capacity': 4, 'shape': 'RECTANGLE',
         'shape_dim_x': 40, 'shape_dim_y': 40, 'center_x': 200, 'center_y': 200, 'rotation': 0},
        {'id': 't2', 'name': 'Table 2', 'capacity': 6, 'shape': 'ELLIPSE',
         'shape_dim_x': 60, 'shape_dim_y': 30, 'center_x': 600, 'center_y': 400, 'rotation': 30},
    ],
}

OUT_OF_BOUNDS_LAYOUT = {
    'resources': [
        {'id': 'edge', 'name': 'Edge', 'shape': 'RECTANGLE',
         'shape_dim_x': 50, 'shape_dim_y': 50, 'center_x': 1190, 'center_y': 400},
    ],
}


@pytest.fixture
def rect():
    """Factory for rectangle footprints"""
    from models.transform import ResourceBounds

    def _make(center_x=600, center_y=400, dim_x=50, dim_y=50, rotation=0.0):
        return ResourceBounds(center_x, center_y, dim_x, dim_y, rotation, 'RECTANGLE')
    return _make


@pytest.fixture
def ellipse():
    """Factory for ellipse footprints"""
    from models.transform import ResourceBounds

    def _make(center_x=600, center_y=400, dim_x=50, dim_y=50, rotation=0.0):
        return ResourceBounds(center_x, center_y, dim_x, dim_y, rotation, 'ELLIPSE')
    return _make


@pytest.fixture
def layout():
    """Layout with two tables and nothing selected"""
    from models.seating_layout import SeatingLayout
    return SeatingLayout.from_dict(SAMPLE_LAYOUT)


@pytest.fixture
def layout_file(tmp_path):
    """Path to a layout JSON file where every table fits"""
    path = tmp_path / 'layout.json'
    path.write_text(json.dumps(SAMPLE_LAYOUT), encoding='utf-8')
    return str(path)


@pytest.fixture
def out_of_bounds_file(tmp_path):
    """Path to a layout JSON file with a table hanging off the right edge"""
    path = tmp_path / 'out_of_bounds.json'
    path.write_text(json.dumps(OUT_OF_BOUNDS_LAYOUT), encoding='utf-8')
    return str(path)
