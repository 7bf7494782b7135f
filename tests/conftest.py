import os

# Headless pygame for renderer and input tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest
from pygame import Vector2

from asteroids.config import GameConfig
from asteroids.entities import Asteroid
from asteroids.simulation import Simulation
from asteroids.storage import MemoryScoreStore


def make_asteroid(x: float, y: float, r: float, vx: float = 0.0, vy: float = 0.0) -> Asteroid:
    """A perfectly round asteroid with a fixed velocity"""
    return Asteroid(pos=Vector2(x, y), velocity=Vector2(vx, vy), r=r, a=0.0, offs=[1.0] * 10)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def sim(config, rng, store):
    """A fresh game with its opening events already flushed"""
    simulation = Simulation(config, rng, store)
    simulation.state.pending_events.clear()
    return simulation


@pytest.fixture
def empty_sim(sim):
    """A game with no asteroids in the field and plenty left in the level"""
    sim.state.asteroids = []
    sim.state.roids_left = 100
    return sim
