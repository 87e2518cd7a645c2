"""
input_manager.py
----------------
Single-button input system with edge detection.

Provides:
- One logical "orbit" action fed by keyboard, mouse and touch
- Edge detection (pressed, held, released)
- System hotkeys (quit, debug overlay)
"""

import pygame

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.core.runtime.game_settings import Input


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "gameplay": {
        "orbit": [pygame.K_SPACE],
    },
    "system": {
        "quit": [pygame.K_ESCAPE],
        "toggle_debug": [pygame.K_F3],
    },
}


class InputManager:
    """
    Single-button input system.

    Keyboard keys are polled each frame. Mouse buttons and touch fingers
    are tracked from events; their down/up edges are latched until the
    next update(), so short clicks are never lost between polls.

    Usage:
        if input_manager.action_pressed("orbit"):   # Rising edge
            ...

        if input_manager.action_held("orbit"):      # Continuous
            ...

        if input_manager.action_released("orbit"):  # Falling edge
            ...
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, key_bindings=None, mouse_button=Input.MOUSE_BUTTON):
        """
        Initialize input system.

        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
            mouse_button: Mouse button index that drives the gameplay action
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.mouse_button = mouse_button

        self._pointer_down = False
        self._fingers = set()

        self._init_action_registry()

    def _init_action_registry(self):
        """Initialize state tracking for all gameplay actions."""
        self._actions = {}
        for action_name in self.key_bindings["gameplay"]:
            self._actions[action_name] = {
                "pressed": False,
                "held": False,
                "released": False,
                "prev_held": False,
                "press_latched": False,
                "release_latched": False,
            }

    # ===========================================================
    # Public API: Action Queries
    # ===========================================================

    def action_pressed(self, action: str) -> bool:
        """Check if action was just pressed this frame (rising edge)."""
        state = self._actions.get(action)
        return state["pressed"] if state else False

    def action_held(self, action: str) -> bool:
        """Check if action is currently held down."""
        state = self._actions.get(action)
        return state["held"] if state else False

    def action_released(self, action: str) -> bool:
        """Check if action was just released this frame (falling edge)."""
        state = self._actions.get(action)
        return state["released"] if state else False

    # ===========================================================
    # Event Tracking
    # ===========================================================

    def handle_event(self, event):
        """
        Track pointer and touch state from pygame events.

        Down/up events also latch a pending edge, so a click that starts and
        ends before the next update() still reaches the action state.
        """
        was_active = self._pointer_active()

        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            # Touch input also synthesizes mouse events
            if event.button != self.mouse_button or getattr(event, "touch", False):
                return
            self._pointer_down = event.type == pygame.MOUSEBUTTONDOWN
        elif event.type == pygame.FINGERDOWN:
            self._fingers.add(event.finger_id)
        elif event.type == pygame.FINGERUP:
            self._fingers.discard(event.finger_id)
        else:
            return

        is_active = self._pointer_active()
        if is_active and not was_active:
            self._latch("press_latched")
        elif was_active and not is_active:
            self._latch("release_latched")

    def _pointer_active(self) -> bool:
        return self._pointer_down or bool(self._fingers)

    def _latch(self, edge: str):
        for state in self._actions.values():
            state[edge] = True

    def handle_system_input(self, event):
        """
        Map a key event to a system action.

        Returns:
            str or None: "quit", "toggle_debug", or None
        """
        if event.type != pygame.KEYDOWN:
            return None

        for action, keys in self.key_bindings["system"].items():
            if event.key in keys:
                DebugLogger.action(f"System input: {action}", category="input")
                return action
        return None

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, keys=None):
        """
        Poll input sources. Call once per frame.

        Args:
            keys: Key state sequence (defaults to pygame.key.get_pressed())
        """
        if keys is None:
            keys = pygame.key.get_pressed()

        for action in self._actions:
            self._update_action_state(action, keys)

    def _update_action_state(self, action: str, keys):
        """
        Update action state with edge detection.

        Compares current frame to previous frame to detect:
        - pressed: False -> True (rising edge)
        - released: True -> False (falling edge)
        - held: current state

        Latched pointer edges win over the polled level, one edge per
        update: a click finished between two updates reports pressed now
        and released on the next update.
        """
        state = self._actions[action]
        prev_held = state["prev_held"]
        keys_held = any(keys[k] for k in self.key_bindings["gameplay"][action])
        current_held = keys_held or self._pointer_active()

        if prev_held and state["release_latched"]:
            state["release_latched"] = False
            if not keys_held:
                current_held = False
        elif not prev_held and state["press_latched"]:
            state["press_latched"] = False
            current_held = True
        else:
            # Edge already visible in the polled level
            state["press_latched"] = False
            state["release_latched"] = False

        state["pressed"] = current_held and not prev_held
        state["released"] = not current_held and prev_held
        state["held"] = current_held
        state["prev_held"] = current_held

        if state["pressed"]:
            DebugLogger.trace(f"[{action}] pressed", category="input")
        elif state["released"]:
            DebugLogger.trace(f"[{action}] released", category="input")
