# config.py
"""
Configurations for the raincast nowcast summariser.

This module contains the tunable defaults shared across the package: the
bucketing window, intensity thresholds, display tokens and the settings of
the upstream forecast feed.
"""

# Bucketing window
DEFAULT_HORIZON_MINUTES = 90
DEFAULT_BUCKET_MINUTES = 5
DEFAULT_RAIN_THRESHOLD = 0.0

# Peak intensity thresholds in mm/h (lower bounds, inclusive)
HEAVY_MM_PER_HOUR = 4.0
MODERATE_MM_PER_HOUR = 1.0
LIGHT_MM_PER_HOUR = 0.1

# rate = 10 ** ((value - OFFSET) / SCALE) when the feed only reports a signal
REFLECTIVITY_OFFSET = 109.0
REFLECTIVITY_SCALE = 32.0

# Copy
SHOWER_MAX_MINUTES = 15
MIN_DISPLAY_MINUTES = 1

INTENSITY_LABELS = {
    "trace": "Drizzle",
    "light": "Light",
    "moderate": "Moderate",
    "heavy": "Heavy",
}

ICON_DRY = "cloud.sun.fill"
ICON_RAIN = "cloud.rain.fill"
ICON_ERROR = "exclamationmark.triangle"
ICON_LOCATION_OFF = "location.slash"

# Upstream feed (graphdata Rain3Hour payload)
FEED_TIMEZONE = "Europe/Amsterdam"

# Menu bar sparkline: one hour of 5-minute samples
SPARKLINE_MAX_POINTS = 12
