# pointer.py

import pygame


class PointerState:
    """
    Latest pointer position and whether the launch button is held.

    Only the event handler writes here; the frame loop reads it once per tick.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, held: bool = False):
        self.x = x
        self.y = y
        self.held = held

    @property
    def position(self):
        return (self.x, self.y)

    def handle_event(self, event) -> bool:
        """Updates from a pygame event. Returns True if the event was a pointer event."""
        if event.type == pygame.MOUSEMOTION:
            self.x, self.y = event.pos
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.x, self.y = event.pos
            self.held = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.x, self.y = event.pos
            self.held = False
        else:
            return False
        return True
