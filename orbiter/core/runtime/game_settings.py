"""
game_settings.py
----------------
Centralized constants for all game systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 720
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Orbiter"
    BACKGROUND_COLOR = (12, 12, 30)

    # World units (orbit radius etc.) to screen pixels
    PIXELS_PER_UNIT: float = 80.0


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Input Configuration
# ===========================================================

class Input:
    """Single-button input configuration."""
    ACTION: str = "orbit"
    MOUSE_BUTTON: int = 1  # left button


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    TRAIL: int = 200
    CENTER: int = 300
    ORBITER: int = 400
    DEBUG: int = 900


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    SHOW_OVERLAY: bool = False
    OVERLAY_COLOR = (200, 200, 200)
    OVERLAY_FONT_SIZE: int = 20
