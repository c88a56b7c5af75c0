# canvas.py

import math

import pygame

import constants


def hsl_color(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> pygame.Color:
    """
    Builds a pygame.Color from HSL(A) components.

    The hue is an angle in degrees and wraps, so the ever-increasing global
    hue cycles through the spectrum. Saturation and lightness are percents,
    alpha is in [0, 1].
    """
    color = pygame.Color(0, 0, 0)
    color.hsla = (
        hue % 360,
        min(max(saturation, 0), 100),
        min(max(lightness, 0), 100),
        min(max(alpha, 0.0), 1.0) * 100,
    )
    return color


def _premultiply(color: pygame.Color) -> tuple:
    """Scales RGB by alpha; the light layer is additive and has no alpha channel."""
    a = color.a / 255
    return (int(color.r * a), int(color.g * a), int(color.b * a))


class PygameCanvas:
    """
    Drawing surface used by the simulation, backed by a pygame display surface.

    Data Contract:
    - Inputs: screen (pygame.Surface) - the surface that is presented each frame.
    - Outputs: None. All methods draw onto the screen or the light layer.
    - Side Effects: Mutates pixels of `screen`; `present()` flips the display.
    - Invariants:
        - Strokes issued in "lighter" mode are accumulated on a separate
          RGB layer, each stroke added onto it so overlaps sum, and the
          layer is added onto the screen with BLEND_RGB_ADD when the mode
          changes or the frame is presented.
        - A "destination-out" fill with alpha `a` scales every covered
          pixel by (1 - a), which is what produces the fading trails.
    """
    def __init__(self, screen: pygame.Surface, present_display: bool = True):
        self.screen = screen
        self.width, self.height = screen.get_size()
        self.present_display = present_display
        self.composite = constants.COMPOSITE_SOURCE_OVER

        self._light_layer = pygame.Surface((self.width, self.height))
        self._light_layer.fill(constants.BLACK)
        self._light_dirty = False

    def set_composite(self, mode: str):
        if mode not in constants.COMPOSITE_MODES:
            raise ValueError(f"Unknown compositing mode: {mode!r}")
        if self.composite == constants.COMPOSITE_LIGHTER and mode != constants.COMPOSITE_LIGHTER:
            self._flush_light_layer()
        self.composite = mode

    def _flush_light_layer(self):
        if self._light_dirty:
            self.screen.blit(self._light_layer, (0, 0), special_flags=pygame.BLEND_RGB_ADD)
            self._light_layer.fill(constants.BLACK)
            self._light_dirty = False

    def _add_to_light_layer(self, bounds: pygame.Rect, draw):
        """
        Draws one stroke on a black scratch surface covering `bounds` and adds it
        onto the light layer, so overlapping strokes sum instead of overwriting.
        `draw` receives the scratch surface and the (dx, dy) offset to apply.
        """
        scratch = pygame.Surface(bounds.size)
        scratch.fill(constants.BLACK)
        draw(scratch, (-bounds.x, -bounds.y))
        self._light_layer.blit(scratch, bounds.topleft, special_flags=pygame.BLEND_RGB_ADD)
        self._light_dirty = True

    def fill_rect(self, rect, color):
        color = pygame.Color(color)
        rect = pygame.Rect(rect)
        if self.composite == constants.COMPOSITE_DESTINATION_OUT:
            keep = 255 - color.a
            self.screen.fill((keep, keep, keep), rect, special_flags=pygame.BLEND_RGB_MULT)
        elif self.composite == constants.COMPOSITE_LIGHTER:
            self._light_dirty = True
            self._light_layer.fill(_premultiply(color), rect, special_flags=pygame.BLEND_RGB_ADD)
        else:
            self.screen.fill(color, rect)

    def stroke_line(self, start, end, color, width: int = 1):
        color = pygame.Color(color)
        if self.composite != constants.COMPOSITE_LIGHTER:
            pygame.draw.line(self.screen, color, start, end, width)
            return
        pad = width + 1
        left = math.floor(min(start[0], end[0])) - pad
        top = math.floor(min(start[1], end[1])) - pad
        right = math.ceil(max(start[0], end[0])) + pad
        bottom = math.ceil(max(start[1], end[1])) + pad
        bounds = pygame.Rect(left, top, right - left, bottom - top)

        def draw(surface, offset):
            dx, dy = offset
            pygame.draw.line(surface, _premultiply(color),
                             (start[0] + dx, start[1] + dy), (end[0] + dx, end[1] + dy), width)
        self._add_to_light_layer(bounds, draw)

    def stroke_circle(self, center, radius: float, color, width: int = 1):
        color = pygame.Color(color)
        if self.composite != constants.COMPOSITE_LIGHTER:
            pygame.draw.circle(self.screen, color, center, radius, width)
            return
        extent = math.ceil(radius) + width + 1
        left = math.floor(center[0]) - extent
        top = math.floor(center[1]) - extent
        bounds = pygame.Rect(left, top, 2 * extent + 1, 2 * extent + 1)

        def draw(surface, offset):
            dx, dy = offset
            pygame.draw.circle(surface, _premultiply(color), (center[0] + dx, center[1] + dy), radius, width)
        self._add_to_light_layer(bounds, draw)

    def present(self):
        """Composites any pending additive strokes and flips the display."""
        self._flush_light_layer()
        if self.present_display:
            pygame.display.flip()
