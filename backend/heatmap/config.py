"""
Heat map service configuration and constants.
"""

from enum import Enum


class AxisOrientation(str, Enum):
    BOTTOM = "bottom"
    LEFT = "left"


class TooltipPhase(str, Enum):
    HIDDEN = "HIDDEN"
    VISIBLE = "VISIBLE"


# Remote dataset: { baseTemperature, monthlyVariance: [{year, month, variance}] }
DATA_URL = (
    "https://raw.githubusercontent.com/freeCodeCamp/ProjectReferenceData/"
    "master/global-temperature.json"
)
HTTP_USER_AGENT = "HeatMap/0.1 (temperature-variance-heatmap)"

# Display surface text
TITLE = "Heat Map by Eward"
DESCRIPTION = "Heat Map of temperature"

# Plot area (pixels) and the margin around it inside the SVG
MAP_WIDTH = 1400
MAP_HEIGHT = 400
MAP_MARGIN = {
    "top": 40,
    "bottom": 40,
    "left": 60,
    "right": 40,
}

# Outer margin of the SVG element on the page
SVG_CLASS = "svgHeatMap"
SVG_MARGIN = {
    "top": 110,
    "bottom": 0,
    "left": 0,
    "right": 0,
}

# Axes
X_TICK_EVERY = 5  # label every 5th distinct year
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Matplotlib colormap used as the sequential interpolator
COLOR_INTERPOLATOR = "cividis"

# Legend strip
LEGEND_WIDTH = 600
LEGEND_HEIGHT = 50
LEGEND_SAMPLES = 11  # t = 0.0, 0.1, ... 1.0
LEGEND_STRIP_X = 100.0
LEGEND_STRIP_WIDTH = 400.0
LEGEND_LABELS = [
    # (x, y, text)
    (50.0, 30.0, "Min Value"),
    (550.0, 30.0, "Max Value"),
]

# Tooltip
TOOLTIP_OFFSET_PX = 20
TOOLTIP_FADE_IN_MS = 500
TOOLTIP_OPACITY = 0.8
