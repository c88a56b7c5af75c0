import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from simulation import SimulationState


class RecordingCanvas:
    """Stands in for the pygame canvas and records every call in order."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []
        self.presented = 0

    def set_composite(self, mode):
        self.calls.append(("composite", mode))

    def fill_rect(self, rect, color):
        self.calls.append(("fill", tuple(rect), tuple(color)))

    def stroke_line(self, start, end, color):
        self.calls.append(("line", tuple(start), tuple(end), color))

    def stroke_circle(self, center, radius, color):
        self.calls.append(("circle", tuple(center), radius, color))

    def present(self):
        self.presented += 1

    def strokes(self):
        return [c for c in self.calls if c[0] in ("line", "circle")]


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def state(rng, canvas):
    return SimulationState(config={}, rng=rng, bounds=(canvas.width, canvas.height))
