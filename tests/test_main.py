# test_main.py

import numpy as np
import pygame

from ball import Ball
from main import handle_event
from world import World


def make_world():
    balls = [Ball(100, 100, 10), Ball(300, 200, 12)]
    return World({}, np.random.default_rng(0), bounds=(600, 400), balls=balls)


def test_mouse_events_drive_controller():
    world = make_world()
    assert handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(305, 200), button=1), world)
    assert world.interaction.selected is world.balls[1]

    assert handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(320, 210), rel=(15, 10), buttons=(1, 0, 0)), world)
    np.testing.assert_allclose(world.interaction.pointer_position, [320, 210])

    assert handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=(320, 210), button=1), world)
    assert world.interaction.selected is None


def test_right_button_is_ignored():
    world = make_world()
    handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 100), button=3), world)
    assert not world.interaction.is_dragging


def test_quit_and_escape_stop_the_loop():
    world = make_world()
    assert handle_event(pygame.event.Event(pygame.QUIT), world) is False
    assert handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE), world) is False
    assert handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE), world) is True
