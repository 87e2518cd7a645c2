"""
draw_manager.py
---------------
Centralized rendering manager for layered draw calls.

Responsibilities:
- Maintain layered draw queue
- Render queued surfaces and shapes
- Cache prebaked shape surfaces
"""

import pygame

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.core.runtime.game_settings import Display


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, background_color=Display.BACKGROUND_COLOR):
        """Initialize draw manager with empty queues."""
        self.images = {}

        # Layer queues
        self.surface_layers = {}  # {layer: [(surface, rect), ...]}
        self.shape_layers = {}    # {layer: [(shape_type, rect, color, kwargs), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        self.background_color = background_color

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()
        for layer_items in self.shape_layers.values():
            layer_items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            rect: Position rectangle
            layer: Render layer (lower = first)
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}", category="render")
            return

        if layer not in self.surface_layers:
            self.surface_layers[layer] = []
            self._layers_dirty = True

        self.surface_layers[layer].append((surface, rect))

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """
        Queue a primitive shape.

        Args:
            shape_type: "triangle", "circle" or "line"
            rect: Position and dimensions (None for lines)
            color: RGB tuple
            layer: Render layer
            **kwargs: Shape-specific params
        """
        if layer not in self.shape_layers:
            self.shape_layers[layer] = []
            self._layers_dirty = True

        self.shape_layers[layer].append((shape_type, rect, color, kwargs))

    def queued_count(self) -> int:
        """Total surfaces and shapes waiting for the next render."""
        return (
            sum(len(items) for items in self.surface_layers.values())
            + sum(len(items) for items in self.shape_layers.values())
        )

    # ===========================================================
    # Shape Helpers
    # ===========================================================

    def prebake_shape(self, shape_type, size, color, **kwargs):
        """
        Pre-render shape into a reusable, square-padded surface.

        Returns:
            pygame.Surface: Pre-rendered shape
        """
        cache_key = f"shape_{shape_type}_{size}_{color}_{tuple(sorted(kwargs.items()))}"
        if cache_key in self.images:
            return self.images[cache_key]

        # Square-pad for rotation
        max_dim = max(size)
        square_surface = pygame.Surface((max_dim, max_dim), pygame.SRCALPHA)

        offset_x = (max_dim - size[0]) // 2
        offset_y = (max_dim - size[1]) // 2
        temp_rect = pygame.Rect(offset_x, offset_y, size[0], size[1])

        self._draw_shape(square_surface, shape_type, temp_rect, color, **kwargs)

        self.images[cache_key] = square_surface
        return square_surface

    def _draw_shape(self, surface, shape_type, rect, color, **kwargs):
        """Draw primitive shape on surface."""
        width = kwargs.get("width", 0)

        if shape_type == "triangle":
            points = [(rect.centerx, rect.top), (rect.left, rect.bottom), (rect.right, rect.bottom)]
            pygame.draw.polygon(surface, color, points, width)
        elif shape_type == "circle":
            pygame.draw.circle(surface, color, rect.center, rect.width // 2, width)
        elif shape_type == "line":
            start = kwargs.get("start_pos")
            end = kwargs.get("end_pos")
            if start is not None and end is not None:
                pygame.draw.line(surface, color, start, end, max(1, width))
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}", category="render")

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """
        Render all queued items to target surface.

        Args:
            target_surface: Main display surface
        """
        target_surface.fill(self.background_color)

        if self._layers_dirty:
            all_layers = set(self.surface_layers.keys()) | set(self.shape_layers.keys())
            self._layer_keys_cache = sorted(all_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            if self.surface_layers.get(layer):
                target_surface.blits(self.surface_layers[layer])

            for shape_type, rect, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, rect, color, **kwargs)
