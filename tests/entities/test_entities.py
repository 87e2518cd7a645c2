"""
test_entities.py
----------------
Tests for Transform, BaseEntity components, CenterBody and Orbiter.
"""

import pygame
import pytest

from orbiter.core.runtime.game_settings import Display
from orbiter.entities.base_entity import BaseEntity, world_to_screen
from orbiter.entities.center_body import CenterBody
from orbiter.entities.orbit.orbit_config import OrbitConfig
from orbiter.entities.orbit.orbit_state import ButtonSignal
from orbiter.entities.orbiter import Orbiter
from orbiter.entities.transform import Transform
from orbiter.graphics.draw_manager import DrawManager
from orbiter.graphics.trail_renderer import TrailRenderer


# ===========================================================
# Transform
# ===========================================================

class TestTransform:

    def test_set_position_keeps_depth(self):
        t = Transform(1, 2, z=-3)
        t.set_position((5, 6))
        assert (t.pos.x, t.pos.y, t.z) == (5, 6, -3)

    def test_rotate_composes(self):
        t = Transform(rotation=350)
        t.rotate(20)
        t.rotate(-5)
        assert t.rotation == pytest.approx(365)

    def test_set_position_accepts_vector(self):
        t = Transform()
        t.set_position(pygame.Vector2(1.5, -2.5))
        assert t.pos == pygame.Vector2(1.5, -2.5)


# ===========================================================
# BaseEntity
# ===========================================================

class TestBaseEntity:

    def test_get_component_by_type(self):
        entity = BaseEntity()
        trail = entity.add_component(TrailRenderer())
        assert entity.get_component(TrailRenderer) is trail

    def test_get_component_missing_returns_none(self):
        assert BaseEntity().get_component(TrailRenderer) is None

    def test_pos_is_transform_position(self):
        entity = BaseEntity(1, 2)
        entity.transform.set_position((3, 4))
        assert entity.pos == pygame.Vector2(3, 4)

    def test_world_to_screen_flips_y_around_screen_center(self):
        screen = world_to_screen((1, 1))
        assert screen.x == pytest.approx(Display.WIDTH / 2 + Display.PIXELS_PER_UNIT)
        assert screen.y == pytest.approx(Display.HEIGHT / 2 - Display.PIXELS_PER_UNIT)


# ===========================================================
# CenterBody
# ===========================================================

class TestCenterBody:

    def test_static_without_drift(self):
        body = CenterBody(1, 1)
        body.update(1.0)
        assert body.pos == pygame.Vector2(1, 1)

    def test_drift_stays_within_radius(self):
        body = CenterBody(drift_radius=0.5, drift_speed=1.0)
        for _ in range(100):
            body.update(0.037)
            assert body.pos.distance_to(body.anchor) <= 0.5 * 1.2 + 1e-9

    def test_drift_moves_center(self):
        body = CenterBody(drift_radius=0.5, drift_speed=1.0)
        body.update(0.125)
        assert body.pos != body.anchor

    def test_from_config(self):
        body = CenterBody.from_config({"radius": 1.0, "color": [1, 2, 3]})
        assert body.radius == 1.0
        assert body.color == (1, 2, 3)

    def test_draw_queues_circle(self, mock_draw_manager):
        CenterBody().draw(mock_draw_manager)
        args = mock_draw_manager.queue_shape.call_args[0]
        assert args[0] == "circle"


# ===========================================================
# Orbiter
# ===========================================================

class TestOrbiter:

    def test_controller_finds_attached_trail(self):
        trail = TrailRenderer()
        orbiter = Orbiter(CenterBody(), trail=trail)
        assert orbiter.trail is trail

    def test_runs_without_trail(self):
        orbiter = Orbiter(CenterBody())
        orbiter.update(0.1)
        assert orbiter.trail is None
        assert orbiter.pos.length() == pytest.approx(2.0)

    def test_update_moves_entity_and_records_trail(self):
        orbiter = Orbiter(CenterBody(), config=OrbitConfig(orbit_radius=1.0), trail=TrailRenderer())
        for _ in range(10):
            orbiter.update(0.05)

        assert orbiter.pos.length() == pytest.approx(1.0)
        assert orbiter.trail.emitting is True
        assert len(orbiter.trail) > 1

    def test_tap_reverses_through_entity(self):
        orbiter = Orbiter(CenterBody())
        orbiter.update(0.05, ButtonSignal.PRESS)
        orbiter.update(0.05, ButtonSignal.RELEASE)
        assert orbiter.controller.direction == -1

    def test_draw_queues_sprite_and_trail(self):
        draw_manager = DrawManager()
        orbiter = Orbiter(CenterBody(), trail=TrailRenderer(min_vertex_distance=0.0))
        for _ in range(3):
            orbiter.update(0.1)

        orbiter.draw(draw_manager)

        assert len(draw_manager.surface_layers[orbiter.layer]) == 1
        assert len(draw_manager.shape_layers[orbiter.trail.layer]) == 2

    def test_rotation_cache_reused_per_step(self):
        draw_manager = DrawManager()
        orbiter = Orbiter(CenterBody())
        first = orbiter._get_rotated_surface(draw_manager)
        orbiter.transform.rotate(1.0)  # below one 5° step
        assert orbiter._get_rotated_surface(draw_manager) is first
