"""
trail_renderer.py
-----------------
Fading trail left behind a moving entity.

Usage:
    trail = orbiter.add_component(TrailRenderer(time=0.5))
    trail.emitting = True
    trail.update(dt, orbiter.pos)
    trail.draw(draw_manager)

Points are recorded in world units while emitting and age out after
`time` seconds whether or not emission continues.
"""

import pygame

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.core.runtime.game_settings import Layers


class TrailPoint:
    """Single recorded trail position with its age in seconds."""

    __slots__ = ("pos", "age")

    def __init__(self, pos, age=0.0):
        self.pos = pygame.Vector2(pos)
        self.age = age


class TrailRenderer:
    """
    Records recent positions and draws them as a tapering line.

    Attributes:
        emitting: New points are recorded only while True
        time: Point lifetime in seconds
        min_vertex_distance: Minimum spacing between recorded points (world units)
    """

    def __init__(self, time=0.5, min_vertex_distance=0.1, width=6, color=(120, 200, 255),
                 layer=Layers.TRAIL):
        self.emitting = False
        self.time = time
        self.min_vertex_distance = min_vertex_distance
        self.width = width
        self.color = tuple(color)
        self.layer = layer
        self.points = []

    @classmethod
    def from_config(cls, cfg: dict) -> "TrailRenderer":
        """Build from the "trail" section of orbit.json."""
        return cls(
            time=cfg.get("time", 0.5),
            min_vertex_distance=cfg.get("min_vertex_distance", 0.1),
            width=cfg.get("width", 6),
            color=cfg.get("color", (120, 200, 255)),
        )

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt, position):
        """
        Age existing points and record the current position.

        Args:
            dt: Seconds since last frame
            position: Current world position of the owner
        """
        for point in self.points:
            point.age += dt
        self.points = [p for p in self.points if p.age < self.time]

        if not self.emitting:
            return

        if self.points:
            last = self.points[-1].pos
            if last.distance_squared_to(position) < self.min_vertex_distance ** 2:
                return

        self.points.append(TrailPoint(position))

    def clear(self):
        """Drop all recorded points."""
        self.points.clear()
        DebugLogger.trace("Trail cleared", category="trail")

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager, to_screen):
        """
        Queue trail segments, oldest thinnest and darkest.

        Args:
            draw_manager: DrawManager receiving line shapes
            to_screen: Callable mapping world position to pixel position
        """
        if len(self.points) < 2 or self.time <= 0:
            return

        for older, newer in zip(self.points, self.points[1:]):
            fade = max(0.0, 1.0 - newer.age / self.time)
            color = tuple(int(c * fade) for c in self.color)
            width = max(1, int(self.width * fade))
            draw_manager.queue_shape(
                "line", None, color, layer=self.layer,
                start_pos=to_screen(older.pos), end_pos=to_screen(newer.pos), width=width,
            )

    def __len__(self):
        return len(self.points)
