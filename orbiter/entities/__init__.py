"""
Entity exports.
"""

from orbiter.entities.base_entity import BaseEntity
from orbiter.entities.center_body import CenterBody
from orbiter.entities.orbiter import Orbiter
from orbiter.entities.transform import Transform

__all__ = [
    'BaseEntity',
    'CenterBody',
    'Orbiter',
    'Transform',
]
