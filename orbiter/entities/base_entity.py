"""
base_entity.py
--------------
Foundational class for in-game entities (Orbiter, CenterBody).

Coordinate System
-----------------
Entities live in world units, center-based:
- self.transform.pos is the entity's center
- Screen placement is derived at draw time via world_to_screen()

Components
----------
Entities carry optional attached parts (trail renderers, controllers)
that other parts may look up by type with get_component().
"""

import pygame

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.core.runtime.game_settings import Display, Layers
from orbiter.entities.transform import Transform


def world_to_screen(pos) -> pygame.Vector2:
    """Map a world position (y up, origin at screen center) to pixels."""
    return pygame.Vector2(
        Display.WIDTH * 0.5 + pos[0] * Display.PIXELS_PER_UNIT,
        Display.HEIGHT * 0.5 - pos[1] * Display.PIXELS_PER_UNIT,
    )


class BaseEntity:
    """
    Base class for game entities.

    Subclassed by Orbiter and CenterBody.
    """

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float = 0.0, y: float = 0.0, layer: int = Layers.ORBITER):
        """
        Initialize entity with a transform.

        Args:
            x: Center X position (world units)
            y: Center Y position (world units)
            layer: Render layer
        """
        self.transform = Transform(x, y)
        self.layer = layer
        self._components = []

    # ===================================================================
    # Properties
    # ===================================================================

    @property
    def pos(self) -> pygame.Vector2:
        """Current plane position (shared with the transform)."""
        return self.transform.pos

    # ===================================================================
    # Components
    # ===================================================================

    def add_component(self, component):
        """Attach a component and return it."""
        self._components.append(component)
        DebugLogger.trace(
            f"[{type(self).__name__}] +{type(component).__name__}", category="scene"
        )
        return component

    def get_component(self, component_type):
        """Return the first attached component of the given type, or None."""
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, dt: float):
        """
        Per-frame update. Override in subclasses.

        Args:
            dt: Delta time in seconds
        """
        pass

    def draw(self, draw_manager):
        """Queue entity for rendering. Override in subclasses."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} pos=({self.pos.x:.2f}, {self.pos.y:.2f})>"
