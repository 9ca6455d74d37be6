"""
conftest.py
-----------
Shared pytest configuration and fixtures for Balloon Pop tests.

Contains:
- Headless SDL setup so pygame works without a display
- Real pygame surfaces, canvas, event bus and scene stack fixtures
- Balloon placement helpers
"""

import copy
import os
import random
import sys

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

# Make the project root importable without installation
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame
import pytest

from balloon_pop.core.runtime.canvas import Canvas
from balloon_pop.core.services.event_manager import EventManager
from balloon_pop.core.services.state_manager import StateManager
from balloon_pop.entities.balloon import Balloon
from balloon_pop.entities.balloon_types import BalloonType, build_variants
from balloon_pop.scenes.balloon_scene import DEFAULT_BALLOON_CONFIG, BalloonScene


WINDOW_SIZE = (800, 600)
CANVAS_WIDTH = 500
CANVAS_LEFT = (WINDOW_SIZE[0] - CANVAS_WIDTH) // 2


# ===========================================================
# Core Fixtures
# ===========================================================

@pytest.fixture
def events():
    """Fresh deferred event bus."""
    return EventManager()


@pytest.fixture
def window():
    """Off-screen stand-in for the pygame window."""
    return pygame.Surface(WINDOW_SIZE, 0, 32)


@pytest.fixture
def canvas(window):
    """500px wide canvas centred in an 800x600 window (left edge at x=150)."""
    return Canvas(window, CANVAS_WIDTH)


@pytest.fixture
def manager(canvas, events):
    return StateManager(canvas, events)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def balloon_config():
    return copy.deepcopy(DEFAULT_BALLOON_CONFIG)


@pytest.fixture
def variants(balloon_config):
    return build_variants(balloon_config["variants"])


# ===========================================================
# Scene Fixtures
# ===========================================================

@pytest.fixture
def balloon_scene(balloon_config, rng):
    return BalloonScene(balloon_config, rng)


@pytest.fixture
def active_scene(manager, balloon_scene):
    """BalloonScene registered and pushed as the base scene."""
    manager.register_state("balloon", balloon_scene)
    manager.push_state("balloon")
    return balloon_scene


@pytest.fixture
def make_balloon(canvas, events, variants, rng):
    """Factory building a balloon at an exact position and velocity."""

    def _make(balloon_type=BalloonType.NORMAL, x=250.0, y=300.0, vx=0.0, vy=-75.0,
              color=(51, 102, 255), bus=None):
        balloon = Balloon(color, canvas, bus or events, variants[balloon_type], rng=rng)
        balloon.pos.update(x, y)
        balloon.velocity.update(vx, vy)
        return balloon

    return _make


@pytest.fixture
def place_balloon(active_scene, make_balloon):
    """Factory adding a balloon to the live scene at canvas-local (x, y)."""

    def _place(balloon_type=BalloonType.NORMAL, x=250.0, y=300.0, **kwargs):
        balloon = make_balloon(balloon_type, x, y, bus=active_scene.events, **kwargs)
        active_scene.balloons.append(balloon)
        return balloon

    return _place


# ===========================================================
# Test Utilities
# ===========================================================

@pytest.fixture
def to_page():
    """Convert canvas-local coordinates to window coordinates."""

    def _to_page(x, y):
        return x + CANVAS_LEFT, y

    return _to_page


class ScriptedRandom(random.Random):
    """random.Random whose random() replays a fixed sequence (cyclic)."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)
        self._index = 0

    def random(self):
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value


@pytest.fixture
def scripted_rng():
    """Factory for a ScriptedRandom replaying the given values."""
    return ScriptedRandom


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    """Initialise pygame modules once and shut them down at the end."""
    pygame.init()
    yield
    pygame.quit()


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
