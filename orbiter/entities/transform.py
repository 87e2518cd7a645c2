"""
transform.py
------------
Position and orientation of a single entity.

Coordinate System
-----------------
- pos is the 2D plane position in world units (center-based)
- z is the depth coordinate; plane updates never touch it
- rotation is the accumulated spin about the depth axis, in degrees
"""

import pygame


class Transform:
    """Mutable world transform owned by one entity."""

    __slots__ = ("pos", "z", "rotation")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, rotation: float = 0.0):
        self.pos = pygame.Vector2(x, y)
        self.z = z
        self.rotation = rotation

    def set_position(self, xy):
        """Assign the plane position. Depth is left as is."""
        self.pos.update(xy[0], xy[1])

    def rotate(self, degrees: float):
        """Compose an incremental rotation about the depth axis."""
        self.rotation += degrees

    def __repr__(self) -> str:
        return (
            f"<Transform pos=({self.pos.x:.2f}, {self.pos.y:.2f}) "
            f"z={self.z:.2f} rot={self.rotation:.1f}>"
        )
