"""
orbit_scene.py
--------------
The single gameplay scene: one Orbiter circling one CenterBody.

Responsibilities
----------------
- Build entities from orbit.json
- Turn the InputManager's "orbit" action into a ButtonSignal each frame
- Update center first so the orbiter follows its current position
- Draw entities and the optional debug overlay
"""

import pygame

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.core.runtime.game_settings import Debug, Input, Layers
from orbiter.core.services.config_manager import load_config
from orbiter.entities.center_body import CenterBody
from orbiter.entities.orbit.orbit_config import ORBIT_CONFIG_FILE, OrbitConfig
from orbiter.entities.orbit.orbit_state import ButtonSignal
from orbiter.entities.orbiter import Orbiter
from orbiter.graphics.trail_renderer import TrailRenderer
from orbiter.scenes.base_scene import BaseScene


class OrbitScene(BaseScene):
    """Hosts the orbit game loop for one orbiter."""

    def __init__(self, input_manager, config_file=ORBIT_CONFIG_FILE):
        super().__init__(input_manager)

        cfg = load_config(config_file, default_dict={
            "orbit": OrbitConfig().to_dict(),
            "trail": {},
            "center": {},
            "orbiter": {},
        })

        self.center = CenterBody.from_config(cfg["center"])
        self.orbiter = Orbiter(
            self.center,
            config=OrbitConfig.from_dict(cfg["orbit"]),
            trail=TrailRenderer.from_config(cfg["trail"]),
            size=cfg["orbiter"].get("size", 0.3),
            color=cfg["orbiter"].get("color", (240, 240, 255)),
        )

        self.show_overlay = Debug.SHOW_OVERLAY
        self._font = None

        DebugLogger.init_entry("OrbitScene")
        DebugLogger.init_sub(f"Config: {config_file}")

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt: float):
        signal = ButtonSignal.from_input(self.input_manager, Input.ACTION)
        self.center.update(dt)
        self.orbiter.update(dt, signal)

    def handle_event(self, event) -> bool:
        self.input_manager.handle_event(event)
        return False

    def toggle_overlay(self):
        self.show_overlay = not self.show_overlay
        DebugLogger.state(f"Debug overlay {'on' if self.show_overlay else 'off'}", category="scene")

    # ===========================================================
    # Rendering
    # ===========================================================

    def draw(self, draw_manager):
        self.center.draw(draw_manager)
        self.orbiter.draw(draw_manager)

        if self.show_overlay:
            self._draw_overlay(draw_manager)

    def overlay_lines(self):
        """Text rows for the debug overlay."""
        c = self.orbiter.controller
        return [
            f"angle  {c.angle:8.1f}",
            f"speed  {c.current_speed:8.1f}",
            f"radius {c.current_radius:8.2f}",
            f"dir    {c.direction:+d}",
            f"hold   {c.is_holding}  jump {c.is_jumping}",
            f"trail  {len(self.orbiter.trail) if self.orbiter.trail else 0}",
        ]

    def _draw_overlay(self, draw_manager):
        if self._font is None:
            self._font = pygame.font.Font(None, Debug.OVERLAY_FONT_SIZE)

        y = 8
        for line in self.overlay_lines():
            surface = self._font.render(line, True, Debug.OVERLAY_COLOR)
            draw_manager.queue_draw(surface, surface.get_rect(topleft=(8, y)), Layers.DEBUG)
            y += surface.get_height() + 2
