"""Shared thresholds for handwriting sample extraction.

All distances are in canvas pixels. These values are used as constructor
defaults by the analysis classes:
    - analysis/strokes.py (pen-lift detection)
    - analysis/bounds.py (grouping, split and merge)
    - analysis/isolation.py (connector removal, normalization)
"""

# Consecutive points further apart than this start a new stroke
PEN_LIFT_DISTANCE = 15.0

# Strokes need at least this many points; shorter runs are noise
MIN_STROKE_POINTS = 3

# Strokes join a group when closer than this horizontally...
GROUP_MAX_HORIZONTAL_GAP = 30.0

# ...and sharing more than this fraction of the taller stroke's height
GROUP_MIN_VERTICAL_OVERLAP = 0.3

# Groups narrower than this are assumed to be a single character
SPLIT_MIN_WIDTH = 50.0

# Average character width used to estimate how many letters a group holds
ESTIMATED_CHAR_WIDTH = 30.0

# A stroke wider than CONNECTOR_ASPECT * height and shorter than
# CONNECTOR_MAX_HEIGHT is treated as a line joining two letters
CONNECTOR_ASPECT = 4.0
CONNECTOR_MAX_HEIGHT = 20.0

# Normalized samples fill this fraction of the canvas
NORMALIZE_FILL = 0.8
