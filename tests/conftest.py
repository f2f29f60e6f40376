"""Pytest configuration and shared fixtures."""

import os

# Ensure headless pygame for all tests
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import pytest

from scrolling_platformer.config import GameConfig
from scrolling_platformer.entities import Platform
from scrolling_platformer.level_gen import build_world
from scrolling_platformer.simulation import Simulation
from scrolling_platformer.world import WorldState


@pytest.fixture
def game_config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def world(game_config):
    """Fully generated world with a fixed seed."""
    return build_world(game_config, seed=42)


@pytest.fixture
def empty_world(game_config):
    """World with a player but no platforms, obstacles or power-ups."""
    return WorldState.from_config(game_config)


@pytest.fixture
def resting_world(game_config):
    """Player standing still on a single platform at y=500."""
    state = WorldState.from_config(game_config)
    state.platforms.append(Platform(x=50, y=500))
    state.player.x = 75
    state.player.y = 500 - state.player.height
    return state


@pytest.fixture
def simulation(game_config):
    return Simulation(game_config)
