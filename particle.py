# particle.py

import logging
import math
from collections import deque

import numpy as np

import constants
from canvas import hsl_color
from random_utils import random_range

logger = logging.getLogger("fireworks")


class Particle:
    """
    A single spark of an explosion: it flies out, slows down, falls and fades.

    Speed is damped by friction every tick while gravity is added straight to
    the vertical displacement, so the fall never slows down. The particle
    reports itself expired as soon as its alpha is at or below its own decay
    rate, one tick before it would become fully transparent.
    """
    def __init__(self, origin, base_hue: float, rng: np.random.Generator):
        self.x, self.y = float(origin[0]), float(origin[1])
        self.trail = deque([(self.x, self.y)] * constants.PARTICLE_TRAIL_LENGTH,
                           maxlen=constants.PARTICLE_TRAIL_LENGTH)

        self.angle = random_range(rng, *constants.PARTICLE_ANGLE_RANGE)
        self.speed = random_range(rng, *constants.PARTICLE_SPEED_RANGE)
        self.friction = constants.PARTICLE_FRICTION
        self.gravity = constants.PARTICLE_GRAVITY
        self.hue = random_range(rng, base_hue - constants.PARTICLE_HUE_JITTER,
                                base_hue + constants.PARTICLE_HUE_JITTER)
        self.brightness = random_range(rng, *constants.PARTICLE_BRIGHTNESS_RANGE)
        self.alpha = 1.0
        self.decay = random_range(rng, *constants.PARTICLE_DECAY_RANGE)

        logger.debug(f"Particle created: origin=({self.x:.1f}, {self.y:.1f}), "
                     f"speed={self.speed:.2f}, hue={self.hue:.1f}, decay={self.decay:.4f}")

    @property
    def position(self):
        return (self.x, self.y)

    def update(self) -> bool:
        """
        Moves the particle one tick and fades it.
        Returns True when the particle has expired and should be removed.
        """
        self.trail.appendleft(self.position)
        self.speed *= self.friction
        self.x += math.cos(self.angle) * self.speed
        self.y += math.sin(self.angle) * self.speed + self.gravity
        self.alpha -= self.decay
        return self.alpha <= self.decay

    def draw(self, canvas):
        color = hsl_color(self.hue, constants.SATURATION, self.brightness, self.alpha)
        canvas.stroke_line(self.trail[-1], self.position, color)
