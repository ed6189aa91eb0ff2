"""
Seating Layout Builder - Constants and Configuration

This module contains all constant values used throughout the application:
- Canvas extent (layout units)
- Grid and snapping defaults
- Min/max table sizes
- Viewport zoom limits
- Transform handle appearance and hit testing

Layout units are independent of screen pixels; the viewport maps between
the two.
"""

import math

# ======================================================================
# CANVAS
# ======================================================================

# Canvas extent in layout units
# X-axis: 0 = left edge, CANVAS_WIDTH = right edge
# Y-axis: 0 = TOP edge, CANVAS_HEIGHT = bottom edge (Y-down)
CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 800

# ======================================================================
# SHAPES
# ======================================================================

SHAPE_RECTANGLE = 'RECTANGLE'
SHAPE_ELLIPSE = 'ELLIPSE'

# ======================================================================
# GRID
# ======================================================================

DEFAULT_GRID_SIZE = 20
DEFAULT_SNAP_TO_GRID = True

# Grid used when searching for a free spot for a quick-added table
QUICK_ADD_SEARCH_GRID = 100
QUICK_ADD_SEARCH_START_X = 200
QUICK_ADD_SEARCH_START_Y = 200
QUICK_ADD_SEARCH_MAX_RADIUS = 10

# ======================================================================
# TABLE SIZE CONSTRAINTS
# ======================================================================

# Half-extents (shapeDimX / shapeDimY), not full sizes
MIN_SHAPE_DIM = 20
QUICK_ADD_SIZE = 40  # 80x80 table
QUICK_ADD_CAPACITY = 4

# Largest full table dimension: a table this size still fits the canvas
# at any rotation
MAX_TABLE_DIM = round(1 / math.sqrt(2), 2) * min(CANVAS_WIDTH, CANVAS_HEIGHT)
MAX_SHAPE_DIM = MAX_TABLE_DIM / 2

# Iterations for the ellipse resize binary search
ELLIPSE_RESIZE_ITERATIONS = 20

# ======================================================================
# VIEWPORT
# ======================================================================

# Wheel zoom factors applied to the viewport extent
ZOOM_OUT_FACTOR = 1.1
ZOOM_IN_FACTOR = 0.9

# Smallest visible extent (layout units) on either axis
MIN_VIEWPORT_EXTENT = 100

# ======================================================================
# SELECTION
# ======================================================================

# Lasso movement (layout units) below which a background drag is a click
LASSO_CLICK_THRESHOLD = 2

# ======================================================================
# TRANSFORM WIDGET CONSTANTS
# ======================================================================

# Handle visual appearance
TRANSFORM_HANDLE_SIZE = 6  # Handle circle radius (layout units)
TRANSFORM_HIT_TOLERANCE = 4  # Extra units for handle hit detection

# Resize handle ids
CORNER_HANDLES = ('tl', 'tr', 'bl', 'br')
EDGE_HANDLES = ('t', 'r', 'b', 'l')
RESIZE_HANDLES = CORNER_HANDLES + EDGE_HANDLES

# ======================================================================
# CONFIG
# ======================================================================

CONFIG_DIR_NAME = '.seating_builder'
CONFIG_FILE_NAME = 'config.json'
