import pygame

from pointer import PointerState


def test_button_press_and_release_toggle_hold():
    pointer = PointerState()

    assert pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(30, 40), button=1))
    assert pointer.held is True
    assert pointer.position == (30, 40)

    assert pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(31, 41), button=1))
    assert pointer.held is False
    assert pointer.position == (31, 41)


def test_motion_updates_position_without_changing_hold():
    pointer = PointerState(held=True)
    pointer.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(1, 1), buttons=(1, 0, 0)))
    assert pointer.position == (5, 6)
    assert pointer.held is True


def test_other_buttons_and_events_are_ignored():
    pointer = PointerState()
    assert not pointer.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=3))
    assert not pointer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert pointer.held is False
    assert pointer.position == (0.0, 0.0)
