"""
test_orbit_motion.py
--------------------
Tests for the stateless orbit math helpers.
"""

import math

import pygame
import pytest

from orbiter.entities.orbit.orbit_motion import (
    boost_speed,
    jump_offset,
    jump_progress,
    orbit_position,
)


class TestBoostSpeed:

    @pytest.mark.parametrize("timer, expected", [
        (0.0, 50.0),
        (0.75, 87.5),
        (3.0, 200.0),
        (10.0, 200.0),
        (-1.0, 50.0),
    ])
    def test_linear_and_clamped(self, timer, expected):
        assert boost_speed(50.0, 200.0, timer, 3.0) == pytest.approx(expected)

    def test_non_positive_boost_time_is_instant(self):
        assert boost_speed(50.0, 200.0, 0.0, 0.0) == pytest.approx(200.0)
        assert boost_speed(50.0, 200.0, 0.0, -1.0) == pytest.approx(200.0)


class TestJumpShape:

    def test_progress(self):
        assert jump_progress(0.25, 0.5) == pytest.approx(0.5)

    def test_zero_duration_is_finished(self):
        assert jump_progress(0.0, 0.0) == 1.0

    def test_offset_is_zero_at_ends_and_one_midway(self):
        assert jump_offset(0.0) == pytest.approx(0.0)
        assert jump_offset(0.5) == pytest.approx(1.0)
        assert jump_offset(1.0) == pytest.approx(0.0, abs=1e-12)

    def test_offset_is_symmetric(self):
        assert jump_offset(0.2) == pytest.approx(jump_offset(0.8))


class TestOrbitPosition:

    def test_angle_zero_is_on_positive_x(self):
        pos = orbit_position((1.0, 1.0), 2.0, 0.0)
        assert (pos.x, pos.y) == pytest.approx((3.0, 1.0))

    def test_quarter_turn_is_on_positive_y(self):
        pos = orbit_position(pygame.Vector2(0, 0), 2.0, 90.0)
        assert (pos.x, pos.y) == pytest.approx((0.0, 2.0), abs=1e-9)

    def test_angle_in_degrees(self):
        pos = orbit_position((0, 0), 2.0, 50.0)
        assert pos.x == pytest.approx(2 * math.cos(math.radians(50)))
        assert pos.y == pytest.approx(2 * math.sin(math.radians(50)))

    def test_unwrapped_angle_matches_wrapped(self):
        a = orbit_position((0, 0), 1.0, 770.0)
        b = orbit_position((0, 0), 1.0, 50.0)
        assert a.distance_to(b) == pytest.approx(0.0, abs=1e-9)
