# random_utils.py

import math

import numpy as np


def random_range(rng: np.random.Generator, low: float, high: float) -> float:
    """
    Returns a uniformly distributed float in [low, high).

    The range is scaled by hand rather than through rng.uniform so that
    low > high simply yields a value in (high, low].
    """
    return float(rng.random() * (high - low) + low)


def distance(p1, p2) -> float:
    """Euclidean distance between two (x, y) points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])
