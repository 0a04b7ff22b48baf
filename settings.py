"""
Configuration constants for the spherical icosahedron globe.

Every public function takes these as keyword defaults, so a caller can
override any of them without editing this file.
"""

# ============================================================================
# SPHERE
# ============================================================================

RADIUS = 2.0
SPHERE_RESOLUTION = 64

# ============================================================================
# ICOSAHEDRON
# ============================================================================

# Latitude of the two pentagonal bands (atan(1/2) in degrees, rounded)
GOLDEN_LATITUDE = 26.57
BAND_SPACING = 72.0
BAND_OFFSET = 36.0

# Random perturbation applied to vertex latitude/longitude, in degrees
DISTORTION_FACTOR = 0.1

# Samples per great-circle edge (points = segments + 1)
ARC_SEGMENTS = 64

# ============================================================================
# GRID
# ============================================================================

GRID_LATITUDES = (-60, -30, 0, 30, 60)
GRID_LONGITUDES = tuple(range(0, 360, 30))
GRID_STEP = 10.0

# ============================================================================
# VISUALIZATION
# ============================================================================

WINDOW_SIZE = (1600, 1600)
BACKGROUND_COLOR = '#222222'
SPHERE_COLOR = 'lightgray'

GRID_COLOR = 'white'
GRID_LINE_WIDTH = 1.0

EDGE_COLOR = 'blue'
EDGE_LINE_WIDTH = 2.0

MARKER_RADIUS = 0.05
MARKER_COLOR = 'blue'
MARKER_RESOLUTION = 16

LABEL_OFFSET = 1.1  # Labels sit slightly outside their vertex
LABEL_FONT_SIZE = 0.3
LABEL_COLOR = 'white'
LABEL_PIXELS_PER_UNIT = 60  # PyVista label sizes are in pixels

AMBIENT_INTENSITY = 0.5
POINT_LIGHT_POSITION = (10.0, 10.0, 10.0)
POINT_LIGHT_INTENSITY = 1.0

CAMERA_POSITION = (0.0, 0.0, 5.0)
CAMERA_FOCAL_POINT = (0.0, 0.0, 0.0)
CAMERA_VIEW_UP = (0.0, 1.0, 0.0)  # y is north

# Static SVG snapshot
SVG_SIZE = 800
SVG_VIEW_LATITUDE = 20.0
SVG_VIEW_LONGITUDE = 30.0
