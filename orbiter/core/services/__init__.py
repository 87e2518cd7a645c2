"""
Core services exports.

Provides configuration loading and input handling.
"""

from orbiter.core.services.config_manager import load_config
from orbiter.core.services.input_manager import InputManager

__all__ = [
    'load_config',
    'InputManager',
]
