"""
orbit_config.py
---------------
Tunables for orbit motion, loaded from orbit.json.

Distances are world units, speeds are degrees per second, durations are
seconds.
"""

from dataclasses import dataclass, fields, asdict

from orbiter.core.debug.debug_logger import DebugLogger
from orbiter.core.services.config_manager import load_config


ORBIT_CONFIG_FILE = "orbit.json"


@dataclass
class OrbitConfig:
    """Orbit, boost, jump and spin settings for one OrbitController."""

    # Orbit
    orbit_radius: float = 2.0
    orbit_speed: float = 50.0
    max_boost_speed: float = 200.0
    boost_time: float = 3.0

    # Jump
    jump_radius_increase: float = 1.0
    jump_duration: float = 0.5

    # Rotation
    rotation_multiplier: float = 1.0

    # Max press duration still counted as a tap
    tap_threshold: float = 0.2

    @classmethod
    def from_dict(cls, data: dict) -> "OrbitConfig":
        """
        Build a config from a plain dict.

        Unknown keys are reported and ignored. Values must be numeric.

        Raises:
            ValueError: If a known key holds a non-numeric value.
        """
        known = {f.name for f in fields(cls)}
        values = {}

        for key, value in data.items():
            if key == "_notes":
                continue
            if key not in known:
                DebugLogger.warn(f"Unknown orbit setting '{key}' ignored", category="loading")
                continue
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Orbit setting '{key}' must be a number, got {value!r}")
            values[key] = float(value)

        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


def load_orbit_config(filename: str = ORBIT_CONFIG_FILE, strict: bool = False) -> OrbitConfig:
    """Load the "orbit" section of a config file merged over defaults."""
    data = load_config(filename, default_dict={"orbit": OrbitConfig().to_dict()}, strict=strict)
    return OrbitConfig.from_dict(data.get("orbit", {}))
