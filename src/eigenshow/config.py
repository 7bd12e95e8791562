"""
Configuration & Constants
=========================
This module serves as the central registry for the numeric constants and
user-facing strings of the demonstrator.

Why is this file needed?
------------------------
1. Abstraction: The interactive radius, the axis bounds and the random
   matrix distribution are shared by the model, the router and the canvas.
   Keeping them here prevents magic numbers scattered throughout the code.
2. Consistency: The canvas limits and the pointer threshold must agree,
   otherwise the user could move the pointer outside the visible region
   and still drag the vector.

Exports:
    PROXIMITY_RADIUS (float): Pointer positions at or beyond this norm are ignored.
    AXIS_LIMIT (float): Half-width of the visible square canvas.
    RANDOM_SIGMA (float): Standard deviation of the random matrix entries.
    DEFAULT_PRESET_INDEX (int): Preset selected at startup.
"""
from typing import Final

# Interaction
PROXIMITY_RADIUS: Final[float] = 1.5
AXIS_LIMIT: Final[float] = 1.6

# Random matrix distribution: entries ~ N(0, RANDOM_SIGMA^2)
RANDOM_SIGMA: Final[float] = 0.75

# "[1 3;4 2]/4"
DEFAULT_PRESET_INDEX: Final[int] = 5

# Initial primary vector
DEFAULT_VECTOR: Final[tuple[float, float]] = (1.0, 0.0)

# Text labels are placed at LABEL_SCALE * tip + LABEL_OFFSET
LABEL_SCALE: Final[float] = 1.08
LABEL_OFFSET: Final[tuple[float, float]] = (0.05, 0.05)

# Window
WINDOW_SIZE: Final[tuple[int, int]] = (1200, 800)

# Mode captions
TITLE_SINGLE: Final[str] = "Make Ax parallel to x"
TITLE_PAIRED: Final[str] = "Make Ax perpendicular to Ay"
CAPTION_SINGLE: Final[str] = "eigen"
CAPTION_PAIRED: Final[str] = "svd"
