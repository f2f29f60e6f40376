"""Draws a WorldState onto a pygame surface.

Shared by the desktop engine and the Gymnasium environment. World
coordinates are already screen coordinates, so no camera transform is
needed: scrolling moves the entities themselves.
"""

from typing import Tuple

import numpy as np
import pygame

from .entities import PowerUpType
from .world import WorldState


# Colors (RGB)
COLOR_BG = (40, 44, 52)
COLOR_PLAYER = (0, 0, 255)
COLOR_PLATFORM = (0, 128, 0)
COLOR_OBSTACLE = (255, 0, 0)
COLOR_DOUBLE_JUMP = (128, 0, 128)
COLOR_SPEED_BOOST = (255, 255, 0)
COLOR_TEXT = (220, 220, 220)

POWER_UP_COLORS = {
    PowerUpType.DOUBLE_JUMP: COLOR_DOUBLE_JUMP,
    PowerUpType.SPEED_BOOST: COLOR_SPEED_BOOST,
}


def _rect(x: float, y: float, width: float, height: float) -> Tuple[int, int, int, int]:
    return int(x), int(y), int(width), int(height)


class Renderer:
    """Clears the surface and draws every entity once per frame."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def clear(self) -> None:
        self.surface.fill(COLOR_BG)

    def draw(self, state: WorldState) -> None:
        """Clear and redraw the whole world. The player is drawn only while alive."""
        self.clear()

        for plat in state.platforms:
            pygame.draw.rect(self.surface, COLOR_PLATFORM, _rect(plat.x, plat.y, plat.width, plat.height))

        for obstacle in state.obstacles:
            pygame.draw.rect(
                self.surface, COLOR_OBSTACLE,
                _rect(obstacle.x, obstacle.y, obstacle.width, obstacle.height),
            )

        for power_up in state.power_ups:
            cx, cy = power_up.center
            pygame.draw.circle(
                self.surface, POWER_UP_COLORS[power_up.kind],
                (int(cx), int(cy)), int(power_up.size / 2),
            )

        player = state.player
        if player.is_alive:
            pygame.draw.rect(self.surface, COLOR_PLAYER, _rect(player.x, player.y, player.width, player.height))

    def to_array(self, width: int, height: int) -> np.ndarray:
        """Current surface scaled to (height, width, 3) uint8."""
        scaled = pygame.transform.scale(self.surface, (width, height))
        # surfarray gives (W, H, 3); transpose to (H, W, 3)
        array = pygame.surfarray.array3d(scaled)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)
