"""Color palette constants for dark theme."""

# Base theme colors
BACKGROUND = "#0F172A"
PANEL_BG = "#1E293B"
BORDER = "#475569"

# Experiment canvas
CANVAS_BG = "#060606"
FOIL = "#FFD700"
NUCLEUS_FILL = "#FFCF4D"
NUCLEUS_OUTLINE = "#FFAA00"
DETECTOR_RING = "#6EB5FF"
DETECTOR_RING_ALPHA = 0.25

# Particle display tags
SMALL_ANGLE_COLOR = "#6EB5FF"
LARGE_ANGLE_COLOR = "#FF6B6B"

# Histogram
SIMULATED_BAR = "#94A3B8"
THEORY_CURVE = "#FF8B3A"

# Text colors
TEXT_PRIMARY = "#F8FAFC"
TEXT_SECONDARY = "#B0BEC5"
