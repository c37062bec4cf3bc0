"""Shared fixtures. pygame runs headless."""
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from dino_runner.config import GameConfig
from dino_runner.data_models import Character, GameState, Obstacle
from dino_runner.obstacles import ObstacleManager
from dino_runner.physics_core import PhysicsCore
from dino_runner.simulation import Simulation


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def physics(config):
    return PhysicsCore(config)


@pytest.fixture
def manager(config):
    return ObstacleManager(config, random.Random(7))


@pytest.fixture
def sim(config):
    return Simulation(config, rng=random.Random(7))


@pytest.fixture
def make_state(config):
    """Builds a GameState from a character y and a list of obstacle xs."""
    def _make(y=None, obstacles=(), **kwargs):
        character = Character(y=config.ground_y if y is None else y, airborne=kwargs.pop("airborne", False),
                              velocity=kwargs.pop("velocity", 0.0))
        return GameState(
            character=character,
            obstacles=tuple(Obstacle(x=x, y=config.ground_y) for x in obstacles),
            **kwargs,
        )
    return _make
