# simulation.py

import logging

import numpy as np

from firework import Firework
from particle import Particle
from random_utils import random_range

logger = logging.getLogger("fireworks")


class SimulationState:
    """
    Owns everything that changes from frame to frame: the live fireworks and
    particles, the shared hue, and the two launch counters.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of the config file.
        - rng (np.random.Generator): The master seeded random number generator.
        - bounds (tuple): The (width, height) of the drawing surface.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Creates and owns every Firework and Particle.
    - Invariants:
        - Entities live only in `fireworks` / `particles`; nothing else holds them.
        - `hue` only grows; colors treat it as an angle.
        - Each launch counter stays within [0, its interval].
    """
    def __init__(self, config: dict, rng: np.random.Generator, bounds: tuple):
        self.config = config
        self.rng = rng
        self.width, self.height = bounds
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Bounds must be positive, got {bounds}")

        self.hue = float(config.get('initial_hue', 120))
        self.hue_increment = config.get('hue_increment', 0.5)
        self.timer_total = config.get('auto_launch_interval', 80)
        self.limiter_total = config.get('manual_launch_interval', 5)
        self.explosion_size = config.get('explosion_particle_count', 30)
        self.fade_alpha = config.get('fade_alpha', 0.5)

        if self.hue_increment < 0:
            raise ValueError(f"hue_increment must not be negative, got {self.hue_increment}")
        if self.timer_total <= 0:
            raise ValueError(f"auto_launch_interval must be positive, got {self.timer_total}")
        if self.limiter_total <= 0:
            raise ValueError(f"manual_launch_interval must be positive, got {self.limiter_total}")
        if self.explosion_size <= 0:
            raise ValueError(f"explosion_particle_count must be positive, got {self.explosion_size}")
        if not 0.0 <= self.fade_alpha <= 1.0:
            raise ValueError(f"fade_alpha must be within [0, 1], got {self.fade_alpha}")

        self.fireworks = []
        self.particles = []
        self.timer_tick = 0
        self.limiter_tick = 0
        self.launch_count = 0
        self.explosion_count = 0

        logger.info(f"SimulationState created for a {self.width}x{self.height} surface.")
        logger.info(f"Automatic launch every {self.timer_total} ticks, "
                    f"manual launch every {self.limiter_total} ticks while held.")

    @property
    def launch_origin(self):
        """Every shell leaves from the bottom-centre of the surface."""
        return (self.width / 2, self.height)

    def advance_hue(self):
        self.hue += self.hue_increment

    def launch_firework(self, target) -> Firework:
        firework = Firework(self.launch_origin, target, self.rng)
        self.fireworks.append(firework)
        self.launch_count += 1
        return firework

    def random_target(self):
        """A point anywhere across the width, in the top half of the surface."""
        return (random_range(self.rng, 0, self.width), random_range(self.rng, 0, self.height / 2))

    def spawn_explosion(self, point):
        """Appends a burst of particles centred on `point`, colored around the current hue."""
        for _ in range(self.explosion_size):
            self.particles.append(Particle(point, self.hue, self.rng))
        self.explosion_count += 1
        logger.debug(f"Explosion at ({point[0]:.1f}, {point[1]:.1f}): "
                     f"{self.explosion_size} particles.")

    def apply_launch_policies(self, pointer) -> int:
        """
        Runs the automatic timer and the manual limiter for one tick.

        Each counter climbs by one per tick until it reaches its interval and
        then waits there. The automatic timer fires only while the launch
        input is released; the manual limiter fires only while it is held,
        aiming at the pointer. Returns the number of shells launched.
        """
        launched = 0

        if self.timer_tick < self.timer_total:
            self.timer_tick += 1
        if self.timer_tick >= self.timer_total and not pointer.held:
            firework = self.launch_firework(self.random_target())
            self.timer_tick = 0
            launched += 1
            logger.debug(f"Automatic launch towards {firework.target}.")

        if self.limiter_tick < self.limiter_total:
            self.limiter_tick += 1
        if self.limiter_tick >= self.limiter_total and pointer.held:
            firework = self.launch_firework(pointer.position)
            self.limiter_tick = 0
            launched += 1
            logger.debug(f"Manual launch towards {firework.target}.")

        return launched
