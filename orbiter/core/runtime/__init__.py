"""
Runtime configuration exports.

Provides game-wide constants. All exports are lightweight class
constants with no initialization overhead.
"""

from orbiter.core.runtime.game_settings import (
    Display,
    Physics,
    Input,
    Layers,
    Debug,
)

__all__ = [
    'Display',
    'Physics',
    'Input',
    'Layers',
    'Debug',
]
