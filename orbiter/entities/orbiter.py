"""
orbiter.py
----------
The player-controlled entity that circles a CenterBody.

Wires together:
- OrbitController (motion from the single button)
- TrailRenderer (optional, found by the controller at start)
- A prebaked triangle sprite spun by the transform's rotation
"""

import pygame

from orbiter.core.runtime.game_settings import Display, Layers
from orbiter.entities.base_entity import BaseEntity, world_to_screen
from orbiter.entities.orbit.orbit_config import OrbitConfig
from orbiter.entities.orbit.orbit_controller import OrbitController
from orbiter.entities.orbit.orbit_state import ButtonSignal
from orbiter.graphics.trail_renderer import TrailRenderer


class Orbiter(BaseEntity):
    """Orbiting entity driven by an OrbitController."""

    # 72 steps = 5° per step
    ROTATION_STEPS = 72
    ROTATION_INCREMENT = 360 / ROTATION_STEPS

    def __init__(self, center, config: OrbitConfig = None, trail: TrailRenderer = None,
                 size=0.3, color=(240, 240, 255)):
        """
        Args:
            center: Orbit focus (CenterBody or anything with .pos)
            config: Orbit tunables
            trail: Trail to attach; the orbiter runs without one if None
            size: Sprite size in world units
            color: Sprite color
        """
        super().__init__(layer=Layers.ORBITER)
        self.size = size
        self.color = tuple(color)

        if trail is not None:
            self.add_component(trail)

        self.controller = self.add_component(OrbitController(config, center=center))
        self.controller.start(owner=self)

        self._base_image = None
        self._rotation_cache = {}

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def trail(self):
        return self.controller.trail

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, dt: float, signal: ButtonSignal = ButtonSignal.IDLE):
        """Advance orbit motion, then feed the trail the new position."""
        self.controller.update(dt, signal)

        if self.trail is not None:
            self.trail.update(dt, self.pos)

    # ===================================================================
    # Rendering
    # ===================================================================

    def draw(self, draw_manager):
        if self.trail is not None:
            self.trail.draw(draw_manager, world_to_screen)

        image = self._get_rotated_surface(draw_manager)
        rect = image.get_rect(center=world_to_screen(self.pos))
        draw_manager.queue_draw(image, rect, self.layer)

    def _get_rotated_surface(self, draw_manager) -> pygame.Surface:
        """Snap rotation to the nearest step and reuse cached surfaces."""
        if self._base_image is None:
            px = max(4, int(self.size * Display.PIXELS_PER_UNIT))
            self._base_image = draw_manager.prebake_shape("triangle", (px, px), self.color)

        index = int(round(self.transform.rotation / self.ROTATION_INCREMENT)) % self.ROTATION_STEPS
        if index not in self._rotation_cache:
            self._rotation_cache[index] = pygame.transform.rotate(
                self._base_image, index * self.ROTATION_INCREMENT
            )
        return self._rotation_cache[index]
