"""scrolling-platformer — vertical climbing platformer with a per-tick simulation core.

A player climbs a procedurally placed ladder of platforms, dodging patrolling
obstacles and collecting power-ups (double jump, speed boost) while the world
scrolls downward. The simulation core (physics, collisions, scrolling) runs on
an explicit WorldState and is driven either by the pygame engine or by a
Gymnasium environment.
"""

from .config import PhysicsConfig, LayoutConfig, GameConfig, CONFIGS, get_config
from .entities import Player, Platform, Obstacle, PowerUp, PowerUpType
from .world import WorldState
from .level_gen import LevelGenerator, build_world
from .input import InputSnapshot, KeyState
from .physics import PhysicsWorld
from .simulation import Simulation, StepResult

__all__ = [
    "PhysicsConfig",
    "LayoutConfig",
    "GameConfig",
    "CONFIGS",
    "get_config",
    "Player",
    "Platform",
    "Obstacle",
    "PowerUp",
    "PowerUpType",
    "WorldState",
    "LevelGenerator",
    "build_world",
    "InputSnapshot",
    "KeyState",
    "PhysicsWorld",
    "Simulation",
    "StepResult",
]
