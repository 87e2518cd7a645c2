"""
orbit_controller.py
-------------------
One-button orbit motion for a single entity.

Responsibilities
----------------
- Tap (short press) flips the orbit direction.
- Hold ramps orbit speed from orbit_speed up to max_boost_speed.
- Releasing a hold starts a jump: the radius swells along a half-sine
  and settles back over jump_duration.
- Place the entity on its orbit, spin it about the depth axis and keep
  its trail emitting.

The controller reads nothing global. The host passes dt and the frame's
ButtonSignal to update(), along with the center provider and transform
when they differ from the ones bound at construction/start.
"""

import math

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.entities.orbit.orbit_config import OrbitConfig
from orbiter.entities.orbit.orbit_motion import (
    boost_speed,
    jump_offset,
    jump_progress,
    orbit_position,
)
from orbiter.entities.orbit.orbit_state import ButtonSignal
from orbiter.graphics.trail_renderer import TrailRenderer


class OrbitController:
    """
    Orbits an entity around a center under single-button input.

    Attributes:
        angle: Orbit angle in degrees, accumulated without wrapping
        direction: +1 counter-clockwise, -1 clockwise
        current_speed: Angular speed this frame (deg/s)
        current_radius: Radius used for the last placement
        is_holding: Button currently down
        is_jumping: Jump in progress
    """

    def __init__(self, config: OrbitConfig = None, center=None, trail=None, transform=None):
        """
        Args:
            config: Orbit tunables (defaults to OrbitConfig())
            center: Orbit focus, anything exposing .pos
            trail: Trail sink exposing .emitting; looked up on the owner at start() if None
            transform: Transform sink; taken from the owner at start() if None
        """
        config = config or OrbitConfig()

        self.center = center
        self.trail = trail
        self.transform = transform

        # Configuration
        self.orbit_radius = config.orbit_radius
        self.orbit_speed = config.orbit_speed
        self.max_boost_speed = config.max_boost_speed
        self.boost_time = config.boost_time
        self.jump_radius_increase = config.jump_radius_increase
        self.jump_duration = config.jump_duration
        self.rotation_multiplier = config.rotation_multiplier
        self.tap_threshold = config.tap_threshold

        # Motion state
        self.angle = 0.0
        self.direction = 1
        self.current_speed = self.orbit_speed
        self.current_radius = self.orbit_radius

        # Timers
        self.boost_timer = 0.0
        self.hold_time = 0.0
        self.jump_timer = 0.0

        # Flags
        self.is_holding = False
        self.is_jumping = False

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def start(self, owner=None):
        """
        Prepare for the first update.

        Resets speed to orbit_speed and, when an owner entity is given,
        binds its transform and trail renderer if none were supplied.
        A missing trail is not an error.
        """
        self.current_speed = self.orbit_speed

        if owner is None:
            return

        if self.transform is None:
            self.transform = owner.transform

        if self.trail is None:
            self.trail = owner.get_component(TrailRenderer)
            if self.trail is None:
                DebugLogger.state(
                    f"No TrailRenderer on {type(owner).__name__}, trail disabled",
                    category="orbit",
                )

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self, dt: float, signal: ButtonSignal = ButtonSignal.IDLE, center=None, transform=None):
        """
        Advance orbit motion by one frame.

        Args:
            dt: Seconds since the last frame
            signal: Button edges and level for this frame
            center: Orbit focus for this frame (defaults to self.center)
            transform: Transform to write (defaults to self.transform)

        Returns:
            pygame.Vector2 or None: New position, None if the frame was skipped
        """
        center = center if center is not None else self.center
        if center is None:
            DebugLogger.warn("Center object is not assigned!")
            return None

        transform = transform if transform is not None else self.transform

        self._handle_input(dt, signal)

        self.angle += self.direction * self.current_speed * dt
        self.current_radius = self._update_jump(dt)

        position = orbit_position(center.pos, self.current_radius, self.angle)

        if transform is not None:
            transform.set_position(position)
            transform.rotate(self.direction * self.current_speed * self.rotation_multiplier * dt)

        if self.trail is not None:
            self.trail.emitting = True

        return position

    # ===========================================================
    # Input Handling
    # ===========================================================

    def _handle_input(self, dt, signal):
        """Apply press, hold and release for this frame, in that order."""
        if signal.pressed:
            self.is_holding = True
            self.hold_time = 0.0

        if signal.held:
            self.hold_time += dt
            self.boost_timer += dt
            self.current_speed = boost_speed(
                self.orbit_speed, self.max_boost_speed, self.boost_timer, self.boost_time
            )

        if signal.released:
            self.is_holding = False
            self.boost_timer = 0.0
            self.current_speed = self.orbit_speed

            if self.hold_time <= self.tap_threshold:
                self.direction *= -1
                DebugLogger.state(f"Tap -> direction {self.direction:+d}", category="orbit")
            elif not self.is_jumping:
                self.is_jumping = True
                self.jump_timer = 0.0
                DebugLogger.state(f"Hold {self.hold_time:.2f}s -> jump", category="orbit")

    # ===========================================================
    # Jump
    # ===========================================================

    def _update_jump(self, dt):
        """Advance the jump timer and return this frame's radius."""
        if not self.is_jumping:
            return self.orbit_radius

        self.jump_timer += dt
        progress = jump_progress(self.jump_timer, self.jump_duration)

        if progress >= 1.0:
            self.is_jumping = False
            DebugLogger.state("Jump finished", category="orbit")
            return self.orbit_radius

        return self.orbit_radius + self.jump_radius_increase * jump_offset(progress)

    # ===========================================================
    # Utilities
    # ===========================================================

    @property
    def angle_radians(self) -> float:
        return math.radians(self.angle)

    def __repr__(self) -> str:
        return (
            f"<OrbitController angle={self.angle:.1f} dir={self.direction:+d} "
            f"speed={self.current_speed:.1f} radius={self.current_radius:.2f} "
            f"holding={self.is_holding} jumping={self.is_jumping}>"
        )
