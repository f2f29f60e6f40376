"""Procedural placement of platforms, obstacles and power-ups.

The level is a vertical ladder: platforms stacked at a fixed gap from the
bottom of the world with random horizontal positions. Every other platform
carries a patrolling obstacle and every third platform a power-up.
"""

import random
from typing import List, Optional

from .config import LayoutConfig, GameConfig
from .entities import Platform, Obstacle, PowerUp, PowerUpType
from .world import WorldState


POWER_UP_TYPES = [PowerUpType.DOUBLE_JUMP, PowerUpType.SPEED_BOOST]


class LevelGenerator:
    """Fills a WorldState with generated entities.

    Uses its own random.Random so that a seed reproduces the same level
    without touching the global generator.
    """

    def __init__(self, layout: Optional[LayoutConfig] = None, seed: Optional[int] = None):
        self.layout = layout or LayoutConfig()
        self.layout.validate()
        self.rng = random.Random(seed)

    @classmethod
    def from_config(cls, config: GameConfig, seed: Optional[int] = None) -> "LevelGenerator":
        """Create generator from full game config."""
        return cls(config.layout, seed=seed)

    def generate_platforms(self, state: WorldState) -> List[Platform]:
        """Append the platform ladder and its obstacles to the state.

        Platform i sits at ``height - i * gap - bottom_margin``; obstacles
        go on platforms whose index is a multiple of obstacle_stride, at a
        random offset along the platform and resting on top of it.
        """
        layout = self.layout
        created = []
        for i in range(layout.platform_count):
            platform = Platform(
                x=self._random_platform_x(state.width),
                y=state.height - i * layout.platform_gap - layout.bottom_margin,
                width=layout.platform_width,
                height=layout.platform_height,
            )
            state.platforms.append(platform)
            created.append(platform)

            if i % layout.obstacle_stride == 0:
                state.obstacles.append(Obstacle(
                    x=platform.x + self.rng.random() * platform.width,
                    y=platform.y - layout.obstacle_height,
                    width=layout.obstacle_width,
                    height=layout.obstacle_height,
                    direction=-1 if self.rng.random() < 0.5 else 1,
                ))
        return created

    def generate_power_ups(self, state: WorldState) -> List[PowerUp]:
        """Append one power-up above every power_up_stride-th platform."""
        size = self.layout.power_up_size
        created = []
        for i, platform in enumerate(state.platforms):
            if i % self.layout.power_up_stride != 0:
                continue
            power_up = PowerUp(
                x=platform.x + platform.width / 2 - size / 2,
                y=platform.y - size,
                kind=self.rng.choice(POWER_UP_TYPES),
                size=size,
            )
            state.power_ups.append(power_up)
            created.append(power_up)
        return created

    def populate(self, state: WorldState) -> WorldState:
        """Generate platforms, obstacles and power-ups in startup order."""
        self.generate_platforms(state)
        self.generate_power_ups(state)
        return state

    def recycle_platforms(self, state: WorldState) -> int:
        """Move platforms that fell below the world back above the ladder.

        A recycled platform is placed one gap above the current highest
        platform with a fresh x. The list is updated in place so its
        length never changes.

        Returns:
            Number of platforms moved.
        """
        moved = 0
        for platform in state.platforms:
            if platform.y <= state.height:
                continue
            top = min(p.y for p in state.platforms)
            platform.y = top - self.layout.platform_gap
            platform.x = self._random_platform_x(state.width)
            moved += 1
        return moved

    def _random_platform_x(self, world_width: float) -> float:
        return self.rng.random() * max(world_width - self.layout.platform_width, 0.0)


def build_world(config: GameConfig, seed: Optional[int] = None) -> WorldState:
    """Create a fresh, fully populated world for the given config."""
    state = WorldState.from_config(config)
    LevelGenerator.from_config(config, seed=seed).populate(state)
    return state
