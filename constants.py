# constants.py

"""
Application Constants

This module defines static configuration values for the fireworks sketch.
These are not expected to change between runs; per-run tunables (launch
intervals, hue speed, explosion size) live in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

import math

# Screen dimensions, used when the desktop size cannot be queried
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Fireworks"

# Compositing modes understood by the canvas.
COMPOSITE_SOURCE_OVER = "source-over"
COMPOSITE_DESTINATION_OUT = "destination-out"  # Subtractive: erases what is underneath.
COMPOSITE_LIGHTER = "lighter"  # Additive: overlapping strokes intensify.
COMPOSITE_MODES = (COMPOSITE_SOURCE_OVER, COMPOSITE_DESTINATION_OUT, COMPOSITE_LIGHTER)

# All strokes use fully saturated colors.
SATURATION = 100  # Percent

# --- Firework (the rising shell) ---
FIREWORK_TRAIL_LENGTH = 3  # Positions kept for the trail
FIREWORK_INITIAL_SPEED = 2.0  # Pixels per tick
FIREWORK_ACCELERATION = 1.05  # Speed multiplier per tick
FIREWORK_BRIGHTNESS_RANGE = (50, 70)  # Lightness percent
TARGET_RADIUS_MIN = 1.0  # Pixels
TARGET_RADIUS_MAX = 8.0  # Pixels
TARGET_RADIUS_STEP = 0.3  # Pixels per tick

# --- Particle (a spark of the explosion) ---
PARTICLE_TRAIL_LENGTH = 5  # Positions kept for the trail
PARTICLE_ANGLE_RANGE = (0.0, 2 * math.pi)  # Radians
PARTICLE_SPEED_RANGE = (1, 10)  # Pixels per tick
PARTICLE_FRICTION = 0.95  # Speed multiplier per tick
PARTICLE_GRAVITY = 1.0  # Pixels per tick, added to the vertical motion
PARTICLE_HUE_JITTER = 20  # Degrees either side of the global hue
PARTICLE_BRIGHTNESS_RANGE = (50, 80)  # Lightness percent
PARTICLE_DECAY_RANGE = (0.015, 0.03)  # Alpha lost per tick

# Status logging cadence for the running loop.
LOG_EVERY_N_TICKS = 100
