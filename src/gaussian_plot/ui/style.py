"""Central definition of the surface plot's fixed look."""

from __future__ import annotations

BACKGROUND_COLOR = "white"

# Chart ranges: x and z are the horizontal plot axes, y is the density axis.
X_RANGE = (-10.0, 10.0)
Z_RANGE = (-10.0, 10.0)
DENSITY_RANGE = (0.0, 1.2)

PROJECTION_SCALE = 0.7
# yaw=0 looks along the depth axis with x running left to right
AZIMUTH_OFFSET_DEG = -90.0

SURFACE_ANTIALIAS = False

GRID_COLOR = (0.0, 0.0, 0.0, 0.15)
GRID_LINEWIDTH = 0.8
MAX_LIGHT_LINES = 3

# Hue falls from 240° (blue) toward 0° (red) as density rises.
HUE_START = 240.0 / 360.0
SURFACE_SATURATION = 1.0
SURFACE_LIGHTNESS = 0.7

AXIS_LABELS = ("x", "y", "density")
AXIS_LABEL_FONTSIZE = 8.0
TICK_LABEL_FONTSIZE = 7.0

DEFAULT_DPI = 100.0
DEFAULT_EXPORT_SIZE = (800, 600)
