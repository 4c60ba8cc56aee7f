# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Arena dimensions
WIDTH = 600  # Pixels
HEIGHT = 400  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
WHITE = (255, 255, 255)
BACKGROUND = (18, 18, 24)

# Window Title
TITLE = "Bouncing Balls"

# Name of the application's dedicated logger
LOGGER_NAME = "bounce_sim"

# Default simulation values.
# Used when a key is absent from the 'simulation' section of config.json.
DEFAULT_PARTICLE_COUNT = 10
DEFAULT_MIN_RADIUS = 8.0    # Pixels
DEFAULT_MAX_RADIUS = 18.0   # Pixels
DEFAULT_MAX_INITIAL_SPEED = 1.0  # Pixels per tick, per axis
WALL_DAMPING = 0.98         # Fraction of normal speed kept after a wall hit
PICK_TOLERANCE = 15.0       # Pixels beyond the radius that still select a ball
SPRING_CONSTANT = 0.05      # Pull toward the pointer per pixel of displacement
DRAG_FRICTION = 0.95        # Per-tick velocity scale for the dragged ball
MASS_SCALE = 100.0          # mass = pi * r^3 / MASS_SCALE
MAX_PLACEMENT_ATTEMPTS = 1000  # Rejection-sampling tries per ball
LOG_INTERVAL = 100          # Ticks between diagnostic log lines

# Ball colour (HSL percentages, hue is random)
BALL_SATURATION = 50
BALL_LIGHTNESS = 50
