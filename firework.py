# firework.py

import logging
import math
from collections import deque

import numpy as np

import constants
from canvas import hsl_color
from random_utils import distance, random_range

logger = logging.getLogger("fireworks")


class Firework:
    """
    A shell travelling in a straight line from its launch point to its target.

    Data Contract:
    - Inputs:
        - start (tuple): (x, y) launch point.
        - target (tuple): (x, y) point where the shell bursts.
        - rng (np.random.Generator): source for the shell's brightness.
    - Outputs: `update()` returns True on the tick the target is reached.
    - Invariants:
        - The trail always holds FIREWORK_TRAIL_LENGTH points, newest first.
        - `distance_traveled` never decreases; `speed` grows every tick.
        - Once `update()` has returned True the position is left untouched.
    """
    def __init__(self, start, target, rng: np.random.Generator):
        self.x, self.y = float(start[0]), float(start[1])
        self.start = (self.x, self.y)
        self.target = (float(target[0]), float(target[1]))
        self.distance_to_target = distance(self.start, self.target)
        self.distance_traveled = 0.0

        self.trail = deque([self.start] * constants.FIREWORK_TRAIL_LENGTH,
                           maxlen=constants.FIREWORK_TRAIL_LENGTH)

        self.angle = math.atan2(self.target[1] - self.y, self.target[0] - self.x)
        self.speed = constants.FIREWORK_INITIAL_SPEED
        self.acceleration = constants.FIREWORK_ACCELERATION
        self.brightness = random_range(rng, *constants.FIREWORK_BRIGHTNESS_RANGE)
        self.target_radius = constants.TARGET_RADIUS_MIN

        logger.debug(f"Firework created: start={self.start}, target={self.target}, "
                     f"distance={self.distance_to_target:.1f}")

    @property
    def position(self):
        return (self.x, self.y)

    def update(self) -> bool:
        """
        Advances the shell by one tick.

        The distance check is measured from the launch point to where the
        shell would be after this tick. If that reaches the target distance
        the shell is not moved and True is returned.
        """
        # appendleft on a full deque drops the oldest point from the right.
        self.trail.appendleft(self.position)

        # Sawtooth pulse for the target marker.
        if self.target_radius < constants.TARGET_RADIUS_MAX:
            self.target_radius += constants.TARGET_RADIUS_STEP
        else:
            self.target_radius = constants.TARGET_RADIUS_MIN

        self.speed *= self.acceleration

        vx = math.cos(self.angle) * self.speed
        vy = math.sin(self.angle) * self.speed

        self.distance_traveled = distance(self.start, (self.x + vx, self.y + vy))

        if self.distance_traveled >= self.distance_to_target:
            return True

        self.x += vx
        self.y += vy
        return False

    def draw(self, canvas, hue: float):
        color = hsl_color(hue, constants.SATURATION, self.brightness)
        canvas.stroke_line(self.trail[-1], self.position, color)
        canvas.stroke_circle(self.target, self.target_radius, color)
