"""
Orbit motion exports.
"""

from orbiter.entities.orbit.orbit_config import OrbitConfig, load_orbit_config
from orbiter.entities.orbit.orbit_controller import OrbitController
from orbiter.entities.orbit.orbit_state import ButtonSignal

__all__ = [
    'OrbitConfig',
    'load_orbit_config',
    'OrbitController',
    'ButtonSignal',
]
