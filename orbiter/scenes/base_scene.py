"""
base_scene.py
-------------
Abstract base class for scenes.
Defines the interface and common lifecycle hooks.
"""

from abc import ABC, abstractmethod


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        input_manager: Shared InputManager polled by the main loop
    """

    def __init__(self, input_manager):
        self.input_manager = input_manager

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before the scene is torn down."""
        pass

    # ===========================================================
    # Standard Methods (Must implement in subclasses)
    # ===========================================================

    @abstractmethod
    def update(self, dt: float):
        """Update scene logic."""
        pass

    @abstractmethod
    def draw(self, draw_manager):
        """Render the scene."""
        pass

    def handle_event(self, event) -> bool:
        """Handle a pygame event. Return True if consumed."""
        return False
