"""
conftest.py
-----------
Shared pytest configuration and fixtures for Orbiter tests.

Contains:
- Headless SDL setup so pygame runs without a window
- Common fixtures used across multiple test modules
- Pytest marker configuration
"""

import os
import sys
from unittest.mock import MagicMock

# Headless pygame, must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Project root on path so tests run without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame  # noqa: E402
import pytest  # noqa: E402

from orbiter.entities.orbit.orbit_config import OrbitConfig  # noqa: E402
from orbiter.entities.orbit.orbit_controller import OrbitController  # noqa: E402
from orbiter.entities.transform import Transform  # noqa: E402


class StubCenter:
    """Minimal center provider: anything with a .pos works."""

    def __init__(self, x=0.0, y=0.0):
        self.pos = pygame.Vector2(x, y)


class StubTrail:
    """Minimal trail sink: only the emitting flag matters."""

    def __init__(self):
        self.emitting = False


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def orbit_config():
    """Default tunables: radius 2, speed 50, boost 200 over 3s, jump +1 over 0.5s."""
    return OrbitConfig()


@pytest.fixture
def center():
    return StubCenter()


@pytest.fixture
def transform():
    return Transform()


@pytest.fixture
def trail():
    return StubTrail()


@pytest.fixture
def controller(orbit_config, center, transform, trail):
    """Started OrbitController bound to a center at the origin."""
    ctrl = OrbitController(orbit_config, center=center, trail=trail, transform=transform)
    ctrl.start()
    return ctrl


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with queue methods."""
    draw_manager = MagicMock()
    draw_manager.queue_draw = MagicMock()
    draw_manager.queue_shape = MagicMock()
    return draw_manager


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Add unit marker to everything not flagged as integration."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
