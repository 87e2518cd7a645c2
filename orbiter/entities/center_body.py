"""
center_body.py
--------------
The body an Orbiter circles around.

Sits at its anchor, or drifts along a figure-eight around it when
drift_radius > 0, so the orbit focus can move between frames.
"""

import math

import pygame

from orbiter.core.runtime.game_settings import Display, Layers
from orbiter.entities.base_entity import BaseEntity, world_to_screen


class CenterBody(BaseEntity):
    """Orbit focus exposing .pos to the OrbitController."""

    def __init__(self, x=0.0, y=0.0, radius=0.35, color=(255, 200, 80),
                 drift_radius=0.0, drift_speed=0.5):
        super().__init__(x, y, layer=Layers.CENTER)
        self.anchor = pygame.Vector2(x, y)
        self.radius = radius
        self.color = tuple(color)
        self.drift_radius = drift_radius
        self.drift_speed = drift_speed
        self.elapsed = 0.0

    @classmethod
    def from_config(cls, cfg: dict, x=0.0, y=0.0) -> "CenterBody":
        return cls(
            x, y,
            radius=cfg.get("radius", 0.35),
            color=cfg.get("color", (255, 200, 80)),
            drift_radius=cfg.get("drift_radius", 0.0),
            drift_speed=cfg.get("drift_speed", 0.5),
        )

    def update(self, dt: float):
        if self.drift_radius <= 0:
            return

        self.elapsed += dt
        phase = self.elapsed * self.drift_speed * math.tau
        self.transform.set_position((
            self.anchor.x + self.drift_radius * math.sin(phase),
            self.anchor.y + self.drift_radius * 0.5 * math.sin(2 * phase),
        ))

    def draw(self, draw_manager):
        size = max(2, int(self.radius * 2 * Display.PIXELS_PER_UNIT))
        rect = pygame.Rect(0, 0, size, size)
        rect.center = world_to_screen(self.pos)
        draw_manager.queue_shape("circle", rect, self.color, layer=self.layer)
