"""
orbit_motion.py
---------------
Stateless math for orbit movement.

Responsibilities
----------------
- Interpolate boost speed from how long the button has been held.
- Shape the jump as a half-sine bump on the orbit radius.
- Place a point on the orbit circle around a center.
"""

import math

import pygame


def boost_speed(base_speed, max_speed, boost_timer, boost_time):
    """
    Linear boost from base_speed to max_speed over boost_time seconds.

    A non-positive boost_time saturates immediately.
    """
    if boost_time <= 0:
        t = 1.0
    else:
        t = max(0.0, min(boost_timer / boost_time, 1.0))
    return base_speed + (max_speed - base_speed) * t


def jump_progress(jump_timer, jump_duration):
    """Normalized jump time. A non-positive duration counts as finished."""
    if jump_duration <= 0:
        return 1.0
    return jump_timer / jump_duration


def jump_offset(progress):
    """Half-sine bump: 0 at the start, 1 halfway, 0 at the end."""
    return math.sin(progress * math.pi)


def orbit_position(center, radius, angle_deg):
    """
    Point on the circle of the given radius around center.

    Args:
        center: (x, y) or pygame.Vector2
        radius: Orbit radius
        angle_deg: Angle in degrees, counter-clockwise from +x

    Returns:
        pygame.Vector2
    """
    angle_rad = math.radians(angle_deg)
    return pygame.Vector2(
        center[0] + math.cos(angle_rad) * radius,
        center[1] + math.sin(angle_rad) * radius,
    )
