"""
test_draw_manager.py
--------------------
Tests for DrawManager layered queueing and rendering.
"""

import pygame
import pytest

from orbiter.graphics.draw_manager import DrawManager


@pytest.fixture
def draw_manager():
    return DrawManager(background_color=(0, 0, 0))


@pytest.fixture
def target():
    return pygame.Surface((100, 100))


def test_queue_and_clear(draw_manager):
    draw_manager.queue_shape("circle", pygame.Rect(0, 0, 10, 10), (255, 0, 0), layer=2)
    draw_manager.queue_draw(pygame.Surface((4, 4)), pygame.Rect(0, 0, 4, 4), layer=1)
    assert draw_manager.queued_count() == 2

    draw_manager.clear()
    assert draw_manager.queued_count() == 0


def test_invalid_draw_call_is_skipped(draw_manager):
    draw_manager.queue_draw(None, pygame.Rect(0, 0, 1, 1))
    assert draw_manager.queued_count() == 0


def test_render_fills_background_and_draws_shapes(draw_manager, target):
    draw_manager.queue_shape("circle", pygame.Rect(40, 40, 20, 20), (255, 0, 0))
    draw_manager.render(target)

    assert target.get_at((50, 50))[:3] == (255, 0, 0)
    assert target.get_at((5, 5))[:3] == (0, 0, 0)


def test_higher_layers_draw_on_top(draw_manager, target):
    rect = pygame.Rect(40, 40, 20, 20)
    draw_manager.queue_shape("circle", rect, (0, 0, 255), layer=5)
    draw_manager.queue_shape("circle", rect, (0, 255, 0), layer=1)
    draw_manager.render(target)

    assert target.get_at((50, 50))[:3] == (0, 0, 255)


def test_line_shape(draw_manager, target):
    draw_manager.queue_shape("line", None, (255, 255, 255), start_pos=(0, 50), end_pos=(99, 50), width=3)
    draw_manager.render(target)

    assert target.get_at((50, 50))[:3] == (255, 255, 255)


def test_prebake_shape_is_cached(draw_manager):
    a = draw_manager.prebake_shape("triangle", (16, 16), (255, 255, 255))
    b = draw_manager.prebake_shape("triangle", (16, 16), (255, 255, 255))
    assert a is b
    assert a.get_size() == (16, 16)


def test_unsupported_shape_is_skipped(draw_manager, target):
    draw_manager.queue_shape("rect", pygame.Rect(40, 40, 20, 20), (255, 0, 0))
    draw_manager.render(target)

    assert target.get_at((50, 50))[:3] == (0, 0, 0)
